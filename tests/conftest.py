import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from garf import models  # noqa: F401 - register tables
from garf.app import create_app
from garf.core import create_db_engine
from garf.services.layouts import register_layout


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def file_engine(tmp_path):
    """Engine on a real SQLite file, so separate sessions use separate connections."""

    engine = create_db_engine(f"sqlite:///{tmp_path / 'scores.db'}")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def layouts(session):
    """A small registry with varied traits."""

    return {
        "qwerty": register_layout(session, "qwerty", "U1", False, False, "alt"),
        "sturdy": register_layout(session, "Sturdy", "U1", False, False, "inroll"),
        "magic-sturdy": register_layout(session, "magic-sturdy", "U3", True, False, "inroll"),
        "hands-down": register_layout(session, "Hands-Down", "U4", False, True, "alt"),
    }


@pytest.fixture
def client():
    app = create_app("sqlite://", page_size=10, max_speed=400, db_reset=False)
    with TestClient(app) as test_client:
        yield test_client
