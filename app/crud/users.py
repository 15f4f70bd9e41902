# app/crud/users.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.crud.base import apply_updates, commit
from app.models.task import Task
from app.models.team import Team
from app.models.user import User, UserSettings
from app.utils.security import hash_password

logger = logging.getLogger(__name__)


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def find_conflicts(
    db: Session,
    username: Optional[str] = None,
    email: Optional[str] = None,
    exclude_id: Optional[int] = None,
) -> Dict[str, bool]:
    """Return which of username/email already belong to another user."""
    filters = []
    if username is not None:
        filters.append(User.username == username)
    if email is not None:
        filters.append(User.email == email)
    if not filters:
        return {}

    query = db.query(User).filter(or_(*filters))
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)

    conflicts = {}
    for existing in query.all():
        if username is not None and existing.username == username:
            conflicts["username"] = True
        if email is not None and existing.email == email:
            conflicts["email"] = True
    return conflicts


def create_user(db: Session, username: str, email: str, password: str, role: str = "employee") -> User:
    db_user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(db_user)
    commit(db)
    db.refresh(db_user)
    logger.info(f"User created: {db_user.email} (ID: {db_user.id})")
    return db_user


def update_user(db: Session, db_user: User, update_data: Dict[str, Any]) -> User:
    apply_updates(db_user, update_data)
    commit(db)
    db.refresh(db_user)
    logger.info(f"User {db_user.id} updated: {sorted(update_data)}")
    return db_user


def set_password(db: Session, db_user: User, new_password: str) -> None:
    db_user.password_hash = hash_password(new_password)
    commit(db)
    logger.info(f"Password changed for user {db_user.id}")


def count_dependents(db: Session, user_id: int) -> Dict[str, int]:
    """Rows that would be orphaned by deleting the user (events and settings cascade)."""
    return {
        "teamCount": db.query(Team).filter(Team.created_by == user_id).count(),
        "taskCount": db.query(Task).filter(Task.creator_id == user_id).count(),
    }


def delete_user(db: Session, db_user: User) -> None:
    user_id = db_user.id
    db.delete(db_user)
    commit(db)
    logger.info(f"User {user_id} deleted")


def get_or_create_settings(db: Session, db_user: User) -> UserSettings:
    if db_user.settings is None:
        db_user.settings = UserSettings()
        commit(db)
        db.refresh(db_user)
        logger.info(f"Default settings created for user {db_user.id}")
    return db_user.settings


def update_settings(db: Session, db_settings: UserSettings, update_data: Dict[str, Any]) -> UserSettings:
    apply_updates(db_settings, update_data)
    commit(db)
    db.refresh(db_settings)
    return db_settings
