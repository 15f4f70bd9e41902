# app/crud/tasks.py
import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from app.crud.base import apply_updates, as_dict, commit
from app.models.project import Project
from app.models.tag import Tag
from app.models.task import Task, TaskStatus, task_tags
from app.models.user import User

logger = logging.getLogger(__name__)


def _with_names(db: Session):
    return (
        db.query(
            Task,
            Project.name.label("project_name"),
            TaskStatus.name.label("status_name"),
            User.username.label("creator_name"),
        )
        .join(Project, Task.project_id == Project.id)
        .join(TaskStatus, Task.status_id == TaskStatus.id)
        .join(User, Task.creator_id == User.id)
    )


def _display(row) -> Dict[str, Any]:
    task, project_name, status_name, creator_name = row
    return {
        **as_dict(task),
        "project_name": project_name,
        "status_name": status_name,
        "creator_name": creator_name,
    }


def list_tasks(db: Session) -> List[Dict[str, Any]]:
    return [_display(row) for row in _with_names(db).order_by(Task.id).all()]


def get_task_display(db: Session, task_id: int) -> Optional[Dict[str, Any]]:
    row = _with_names(db).filter(Task.id == task_id).first()
    if row is None:
        return None
    task_data = _display(row)
    task_data["tags"] = [as_dict(tag) for tag in row[0].tags]
    return task_data


def get_task(db: Session, task_id: int) -> Optional[Task]:
    return db.query(Task).filter(Task.id == task_id).first()


def references_valid(
    db: Session,
    project_id: Optional[int] = None,
    status_id: Optional[int] = None,
    creator_id: Optional[int] = None,
) -> bool:
    """True when every supplied foreign reference points at an existing row."""
    checks = (
        (Project, project_id),
        (TaskStatus, status_id),
        (User, creator_id),
    )
    for model, ref_id in checks:
        if ref_id is not None and db.query(model.id).filter(model.id == ref_id).first() is None:
            return False
    return True


def create_task(db: Session, data: Dict[str, Any]) -> Task:
    db_task = Task(**data)
    db.add(db_task)
    commit(db)
    db.refresh(db_task)
    logger.info(f"Task created: {db_task.title} (ID: {db_task.id})")
    return db_task


def update_task(db: Session, db_task: Task, update_data: Dict[str, Any]) -> Task:
    apply_updates(db_task, update_data)
    commit(db)
    db.refresh(db_task)
    logger.info(f"Task {db_task.id} updated: {sorted(update_data)}")
    return db_task


def delete_task(db: Session, db_task: Task) -> None:
    task_id = db_task.id
    db.delete(db_task)
    commit(db)
    logger.info(f"Task {task_id} deleted")


# Task <-> tag assignments

def find_tags(db: Session, tag_ids: Sequence[int]) -> List[Tag]:
    return db.query(Tag).filter(Tag.id.in_(tag_ids)).all()


def assigned_tag_ids(db: Session, task_id: int, tag_ids: Sequence[int]) -> set:
    rows = (
        db.query(task_tags.c.tag_id)
        .filter(task_tags.c.task_id == task_id, task_tags.c.tag_id.in_(tag_ids))
        .all()
    )
    return {tag_id for (tag_id,) in rows}


def assign_tags(db: Session, task_id: int, tag_ids: Sequence[int]) -> int:
    """Insert the pairs that are not assigned yet and return how many were added."""
    existing = assigned_tag_ids(db, task_id, tag_ids)
    new_tag_ids = [tag_id for tag_id in tag_ids if tag_id not in existing]
    if not new_tag_ids:
        return 0

    db.execute(
        task_tags.insert(),
        [{"task_id": task_id, "tag_id": tag_id} for tag_id in new_tag_ids],
    )
    commit(db)
    logger.info(f"Task {task_id}: assigned tags {new_tag_ids}")
    return len(new_tag_ids)


def unassign_tag(db: Session, task_id: int, tag_id: int) -> None:
    db.execute(
        task_tags.delete().where(task_tags.c.task_id == task_id, task_tags.c.tag_id == tag_id)
    )
    commit(db)
    logger.info(f"Task {task_id}: removed tag {tag_id}")
