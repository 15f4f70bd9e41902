# app/crud/projects.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.crud.base import apply_updates, as_dict, commit
from app.models.project import Project
from app.models.task import Task
from app.models.team import Team

logger = logging.getLogger(__name__)


def _with_team(db: Session):
    return db.query(Project, Team.name.label("team_name")).join(Team, Project.team_id == Team.id)


def list_projects(db: Session) -> List[Dict[str, Any]]:
    rows = _with_team(db).order_by(Project.id).all()
    return [{**as_dict(project), "team_name": team_name} for project, team_name in rows]


def get_project_display(db: Session, project_id: int) -> Optional[Dict[str, Any]]:
    row = _with_team(db).filter(Project.id == project_id).first()
    if row is None:
        return None
    project, team_name = row
    return {**as_dict(project), "team_name": team_name}


def get_project(db: Session, project_id: int) -> Optional[Project]:
    return db.query(Project).filter(Project.id == project_id).first()


def team_exists(db: Session, team_id: int) -> bool:
    return db.query(Team.id).filter(Team.id == team_id).first() is not None


def create_project(db: Session, data: Dict[str, Any]) -> Project:
    db_project = Project(**data)
    db.add(db_project)
    commit(db)
    db.refresh(db_project)
    logger.info(f"Project created: {db_project.name} (ID: {db_project.id})")
    return db_project


def update_project(db: Session, db_project: Project, update_data: Dict[str, Any]) -> Project:
    apply_updates(db_project, update_data)
    commit(db)
    db.refresh(db_project)
    logger.info(f"Project {db_project.id} updated: {sorted(update_data)}")
    return db_project


def count_tasks(db: Session, project_id: int) -> int:
    return db.query(Task).filter(Task.project_id == project_id).count()


def delete_project(db: Session, db_project: Project) -> None:
    project_id = db_project.id
    db.delete(db_project)
    commit(db)
    logger.info(f"Project {project_id} deleted")
