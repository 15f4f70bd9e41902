# app/crud/task_statuses.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import commit
from app.models.task import Task, TaskStatus

logger = logging.getLogger(__name__)


def list_statuses(db: Session) -> List[TaskStatus]:
    return db.query(TaskStatus).order_by(TaskStatus.id).all()


def get_status(db: Session, status_id: int) -> Optional[TaskStatus]:
    return db.query(TaskStatus).filter(TaskStatus.id == status_id).first()


def find_by_name(db: Session, name: str, exclude_id: Optional[int] = None) -> Optional[TaskStatus]:
    query = db.query(TaskStatus).filter(TaskStatus.name == name)
    if exclude_id is not None:
        query = query.filter(TaskStatus.id != exclude_id)
    return query.first()


def create_status(db: Session, name: str) -> TaskStatus:
    db_status = TaskStatus(name=name)
    db.add(db_status)
    commit(db)
    db.refresh(db_status)
    logger.info(f"Task status created: {db_status.name} (ID: {db_status.id})")
    return db_status


def rename_status(db: Session, db_status: TaskStatus, name: str) -> TaskStatus:
    db_status.name = name
    commit(db)
    db.refresh(db_status)
    return db_status


def count_tasks(db: Session, status_id: int) -> int:
    return db.query(Task).filter(Task.status_id == status_id).count()


def delete_status(db: Session, db_status: TaskStatus) -> None:
    db.delete(db_status)
    commit(db)
