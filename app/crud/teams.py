# app/crud/teams.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.crud.base import apply_updates, as_dict, commit
from app.models.project import Project
from app.models.team import Team
from app.models.user import User

logger = logging.getLogger(__name__)


def _with_creator(db: Session):
    return (
        db.query(Team, User.username.label("creator_name"))
        .outerjoin(User, Team.created_by == User.id)
    )


def list_teams(db: Session) -> List[Dict[str, Any]]:
    rows = _with_creator(db).order_by(Team.id).all()
    return [{**as_dict(team), "creator_name": creator_name} for team, creator_name in rows]


def get_team_display(db: Session, team_id: int) -> Optional[Dict[str, Any]]:
    row = _with_creator(db).filter(Team.id == team_id).first()
    if row is None:
        return None
    team, creator_name = row
    return {**as_dict(team), "creator_name": creator_name}


def get_team(db: Session, team_id: int) -> Optional[Team]:
    return db.query(Team).filter(Team.id == team_id).first()


def find_by_name(db: Session, name: str, exclude_id: Optional[int] = None) -> Optional[Team]:
    query = db.query(Team).filter(Team.name == name)
    if exclude_id is not None:
        query = query.filter(Team.id != exclude_id)
    return query.first()


def create_team(db: Session, name: str, description: Optional[str], created_by: Optional[int]) -> Team:
    db_team = Team(name=name, description=description, created_by=created_by)
    db.add(db_team)
    commit(db)
    db.refresh(db_team)
    logger.info(f"Team created: {db_team.name} (ID: {db_team.id})")
    return db_team


def update_team(db: Session, db_team: Team, update_data: Dict[str, Any]) -> Team:
    apply_updates(db_team, update_data)
    commit(db)
    db.refresh(db_team)
    logger.info(f"Team {db_team.id} updated: {sorted(update_data)}")
    return db_team


def count_projects(db: Session, team_id: int) -> int:
    return db.query(Project).filter(Project.team_id == team_id).count()


def delete_team(db: Session, db_team: Team) -> None:
    team_id = db_team.id
    db.delete(db_team)
    commit(db)
    logger.info(f"Team {team_id} deleted")
