import os

# In-memory database for the app's own engine, before anything imports db
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from db import Base
from api.deps.db import get_db
from core.auth import create_access_token
from core.roles import UserRole
from models.team import Team
from models.player import Player
from models.game import Game
from models.roster import RosterEntry  # noqa: F401
from models.availability import PlayerAvailability  # noqa: F401

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------
@pytest.fixture(scope="function")
def db_session():
    """Fresh in-memory SQLite schema for each test."""
    Base.metadata.create_all(bind=test_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI client that uses the test DB session."""
    def _get_test_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token("admin", role=UserRole.ADMIN)
    return {"Authorization": f"Bearer {token}"}


def coach_headers(*team_ids):
    token = create_access_token("coach", role=UserRole.COACH, teams=list(team_ids))
    return {"Authorization": f"Bearer {token}"}


# ----------------------------------------------------------------------
# Helpers to create test data
# ----------------------------------------------------------------------
def create_team(db, name: str = "Wildcats"):
    team = Team(name=name)
    db.add(team)
    db.commit()
    db.refresh(team)
    return team


def create_player(db, team, display_name: str, preferences=None, active: bool = True):
    player = Player(
        team_id=team.id,
        display_name=display_name,
        position_preferences=list(preferences or []),
        active=active,
    )
    db.add(player)
    db.commit()
    db.refresh(player)
    return player


def create_game(db, team, opponent: str = "Eagles", date: str = "2026-10-24"):
    game = Game(team_id=team.id, opponent=opponent, date=date, round="1")
    db.add(game)
    db.commit()
    db.refresh(game)
    return game
