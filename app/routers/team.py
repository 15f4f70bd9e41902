# app/routers/team.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.crud import teams as teams_crud
from app.crud import users as users_crud
from app.database import get_db
from app.models.team import Team
from app.models.user import User
from app.schemas.team import TeamCreate, TeamMessage, TeamOut, TeamUpdate
from app.schemas.user import UserBasic
from app.utils.auth import get_optional_user

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_team_or_404(db: Session, team_id: int) -> Team:
    team = teams_crud.get_team(db, team_id)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


def _check_name_free(db: Session, name: str, exclude_id: Optional[int] = None) -> None:
    existing = teams_crud.find_by_name(db, name, exclude_id=exclude_id)
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"error": "Team name already exists", "existingTeamId": existing.id},
        )


def _check_creator_exists(db: Session, user_id: Optional[int]) -> None:
    if user_id is not None and not users_crud.get_user(db, user_id):
        raise HTTPException(status_code=400, detail="User with this ID not found")


@router.get("", response_model=List[TeamOut])
def get_teams(db: Session = Depends(get_db)):
    """Get all teams with the creator's username"""
    return teams_crud.list_teams(db)


@router.get("/{team_id}", response_model=TeamOut)
def get_team(team_id: int, db: Session = Depends(get_db)):
    team = teams_crud.get_team_display(db, team_id)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


@router.get("/{team_id}/members", response_model=List[UserBasic])
def get_team_members(team_id: int, db: Session = Depends(get_db)):
    """Get the users that belong to a team"""
    team = _get_team_or_404(db, team_id)
    return sorted(team.members, key=lambda member: member.id)


@router.post("", response_model=TeamMessage, status_code=status.HTTP_201_CREATED)
def create_team(
    team: TeamCreate,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    """Create a new team; the creator defaults to the authenticated caller"""
    created_by = team.created_by
    if created_by is None and current_user is not None:
        created_by = current_user.id

    _check_creator_exists(db, created_by)
    _check_name_free(db, team.name)

    db_team = teams_crud.create_team(db, team.name, team.description, created_by)
    return {
        "message": "Team created successfully",
        "team": teams_crud.get_team_display(db, db_team.id),
    }


@router.put("/{team_id}", response_model=TeamMessage)
def update_team(team_id: int, team_update: TeamUpdate, db: Session = Depends(get_db)):
    db_team = _get_team_or_404(db, team_id)

    update_data = team_update.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No valid fields provided for update")

    _check_creator_exists(db, update_data.get("created_by"))
    if "name" in update_data:
        _check_name_free(db, update_data["name"], exclude_id=team_id)

    teams_crud.update_team(db, db_team, update_data)
    return {
        "message": "Team updated successfully",
        "team": teams_crud.get_team_display(db, team_id),
    }


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_team(team_id: int, db: Session = Depends(get_db)):
    """Delete a team that no project references; membership rows go with it"""
    db_team = _get_team_or_404(db, team_id)

    project_count = teams_crud.count_projects(db, team_id)
    if project_count:
        raise HTTPException(
            status_code=400,
            detail={"error": "Cannot delete team with associated projects", "projectCount": project_count},
        )

    teams_crud.delete_team(db, db_team)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
