"""
Test configuration and fixtures for the task manager API tests.

Provides:
- Test database with SQLite in-memory for speed
- FastAPI test client with database and avatar storage overrides
- Authentication helpers (JWT token generation)
- Common fixtures for users, teams, projects, statuses, tags and tasks
"""

import os
import logging
import tempfile
from datetime import date
from typing import Dict, Generator

# Settings are read once at import time; point them at throwaway locations first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="taskboard-uploads-"))
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app import models  # noqa: E402
from app.config.settings import get_settings  # noqa: E402
from app.database import Base, get_db  # noqa: E402
from app.services.file_storage import AvatarStorageService, get_avatar_storage  # noqa: E402
from app.utils.security import create_access_token, hash_password  # noqa: E402
from main import app  # noqa: E402

# Configure logging for tests
logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)

# SQLite in-memory database for fast testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def test_db() -> Generator[Session, None, None]:
    """
    Create a fresh in-memory SQLite database for each test.
    """
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def avatar_storage(tmp_path) -> AvatarStorageService:
    return AvatarStorageService(upload_dir=str(tmp_path / "uploads"), max_file_size=1024)


@pytest.fixture(scope="function")
def client(test_db: Session, avatar_storage: AvatarStorageService) -> Generator[TestClient, None, None]:
    """
    Create FastAPI test client with database dependency override.
    """
    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_avatar_storage] = lambda: avatar_storage

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _make_user(db: Session, username: str, email: str, password: str, role: str) -> models.User:
    user = models.User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Created user {username} with ID: {user.id}")
    return user


@pytest.fixture(scope="function")
def manager_user(test_db: Session) -> models.User:
    return _make_user(test_db, "admin", "admin@example.com", "admin123", "manager")


@pytest.fixture(scope="function")
def employee_user(test_db: Session) -> models.User:
    return _make_user(test_db, "user1", "user1@example.com", "password123", "employee")


def create_auth_token(user: models.User) -> str:
    """Issue a token the same way the login route does."""
    return create_access_token({"sub": str(user.id), "role": user.role}, get_settings())


@pytest.fixture(scope="function")
def auth_headers(manager_user: models.User) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_auth_token(manager_user)}"}


@pytest.fixture(scope="function")
def team(test_db: Session, manager_user: models.User, employee_user: models.User) -> models.Team:
    team = models.Team(name="Developers", description="Main development team", created_by=manager_user.id)
    team.members = [manager_user, employee_user]
    test_db.add(team)
    test_db.commit()
    test_db.refresh(team)
    return team


@pytest.fixture(scope="function")
def project(test_db: Session, team: models.Team) -> models.Project:
    project = models.Project(
        name="Website Redesign",
        description="Complete website redesign project",
        team_id=team.id,
        status="active",
        deadline=date(2024, 12, 31),
    )
    test_db.add(project)
    test_db.commit()
    test_db.refresh(project)
    return project


@pytest.fixture(scope="function")
def statuses(test_db: Session):
    rows = [models.TaskStatus(name=name) for name in ("To Do", "In Progress", "Done")]
    test_db.add_all(rows)
    test_db.commit()
    for row in rows:
        test_db.refresh(row)
    return rows


@pytest.fixture(scope="function")
def tags(test_db: Session):
    rows = [
        models.Tag(name="Frontend", color="#3498db"),
        models.Tag(name="Backend", color="#2ecc71"),
        models.Tag(name="Bug", color="#e74c3c"),
        models.Tag(name="Feature", color="#9b59b6"),
    ]
    test_db.add_all(rows)
    test_db.commit()
    for row in rows:
        test_db.refresh(row)
    return rows


@pytest.fixture(scope="function")
def task(test_db: Session, project: models.Project, statuses, manager_user: models.User) -> models.Task:
    task = models.Task(
        title="Design homepage",
        description="Create new homepage layout",
        project_id=project.id,
        status_id=statuses[0].id,
        creator_id=manager_user.id,
        priority="high",
        due_date=date(2024, 10, 15),
    )
    test_db.add(task)
    test_db.commit()
    test_db.refresh(task)
    return task
