"""
Tests for score submission.
"""

import pytest
from sqlalchemy import event
from sqlmodel import Session, select

from garf.core import InvalidSpeed, LayoutNotFound, StorageUnavailable, create_db_engine
from garf.models import Score
from garf.services.layouts import register_layout
from garf.services.scores import get_score, submit_score, validate_speed


def all_scores(session):
    return session.exec(select(Score).order_by(Score.id)).all()


class TestSubmitScore:
    """Tests for submit_score."""

    def test_first_submission_inserts(self, session, layouts):
        score = submit_score(session, "U2", "qwerty", 80)
        assert score.id is not None
        assert score.layout_id == layouts["qwerty"].id
        assert score.speed == 80

    def test_resubmission_replaces(self, session, layouts):
        for speed in (80, 120, 95):
            submit_score(session, "U2", "qwerty", speed)

        rows = all_scores(session)
        assert len(rows) == 1
        assert rows[0].user_id == "U2"
        assert rows[0].speed == 95

    def test_lower_resubmission_still_replaces(self, session, layouts):
        submit_score(session, "U2", "qwerty", 120)
        submit_score(session, "U2", "qwerty", 60)
        assert get_score(session, "U2", "qwerty").speed == 60

    def test_layout_name_case_insensitive(self, session, layouts):
        submit_score(session, "U2", "QWERTY", 80)
        submit_score(session, "U2", "Qwerty", 90)
        rows = all_scores(session)
        assert [row.speed for row in rows] == [90]

    def test_other_pairs_untouched(self, session, layouts):
        submit_score(session, "U2", "qwerty", 80)
        submit_score(session, "U3", "qwerty", 70)
        submit_score(session, "U2", "sturdy", 60)
        submit_score(session, "U2", "qwerty", 100)

        pairs = {(row.user_id, row.layout_id): row.speed for row in all_scores(session)}
        assert pairs == {
            ("U2", layouts["qwerty"].id): 100,
            ("U3", layouts["qwerty"].id): 70,
            ("U2", layouts["sturdy"].id): 60,
        }

    def test_unknown_layout_rejected_without_mutation(self, session, layouts):
        submit_score(session, "U2", "qwerty", 95)
        with pytest.raises(LayoutNotFound):
            submit_score(session, "U2", "dvorak", 100)

        rows = all_scores(session)
        assert len(rows) == 1
        assert rows[0].speed == 95

    def test_negative_speed_rejected(self, session, layouts):
        with pytest.raises(InvalidSpeed):
            submit_score(session, "U2", "qwerty", -1)
        assert all_scores(session) == []

    def test_zero_speed_allowed(self, session, layouts):
        assert submit_score(session, "U2", "qwerty", 0).speed == 0

    def test_storage_failure_surfaces(self):
        engine = create_db_engine("sqlite://")  # no tables created
        with Session(engine) as session:
            with pytest.raises(StorageUnavailable):
                submit_score(session, "U2", "qwerty", 80)
        engine.dispose()


class TestValidateSpeed:
    """Tests for the boundary speed check."""

    def test_within_bound(self):
        assert validate_speed(250, 400) == 250

    def test_at_bound(self):
        assert validate_speed(400, 400) == 400

    def test_above_bound(self):
        with pytest.raises(InvalidSpeed):
            validate_speed(401, 400)

    def test_negative(self):
        with pytest.raises(InvalidSpeed):
            validate_speed(-5)

    def test_no_bound(self):
        assert validate_speed(10**6) == 10**6


class TestGetScore:
    def test_missing(self, session, layouts):
        assert get_score(session, "U2", "qwerty") is None
        assert get_score(session, "U2", "dvorak") is None


class TestUniquenessBackstop:
    """The (layout_id, user_id) constraint catches a write that slips past the delete."""

    def test_collision_at_commit_rolls_back(self, file_engine):
        with Session(file_engine) as setup:
            layout_id = register_layout(setup, "qwerty", "U1", False, False, "alt").id

        with Session(file_engine) as session, Session(file_engine) as rival:

            def insert_rival_score(*_args):
                rival.add(Score(layout_id=layout_id, user_id="U2", speed=120))
                rival.commit()

            # Fires on the commit flush, after the old rows were cleared.
            event.listen(session, "before_flush", insert_rival_score, once=True)
            with pytest.raises(StorageUnavailable):
                submit_score(session, "U2", "qwerty", 80)

            rows = rival.exec(select(Score)).all()

        assert len(rows) == 1
        assert rows[0].user_id == "U2"
        assert rows[0].speed == 120

    def test_corrupt_database_file(self, tmp_path):
        path = tmp_path / "scores.db"
        path.write_bytes(b"definitely not sqlite " * 64)
        engine = create_db_engine(f"sqlite:///{path}")
        with Session(engine) as session:
            with pytest.raises(StorageUnavailable):
                submit_score(session, "U2", "qwerty", 80)
        engine.dispose()
