# app/routers/project.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.crud import projects as projects_crud
from app.database import get_db
from app.models.project import Project
from app.schemas.common import CreatedId
from app.schemas.project import ProjectCreate, ProjectMessage, ProjectOut, ProjectUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_project_or_404(db: Session, project_id: int) -> Project:
    project = projects_crud.get_project(db, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


def _check_team_exists(db: Session, team_id: int) -> None:
    if not projects_crud.team_exists(db, team_id):
        raise HTTPException(status_code=400, detail="Team does not exist")


@router.get("", response_model=List[ProjectOut])
def get_projects(db: Session = Depends(get_db)):
    """Get all projects with their team's name"""
    return projects_crud.list_projects(db)


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: int, db: Session = Depends(get_db)):
    project = projects_crud.get_project_display(db, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.post("", response_model=CreatedId, status_code=status.HTTP_201_CREATED)
def create_project(project: ProjectCreate, db: Session = Depends(get_db)):
    _check_team_exists(db, project.team_id)

    db_project = projects_crud.create_project(db, project.model_dump())
    return {"id": db_project.id}


@router.put("/{project_id}", response_model=ProjectMessage)
def update_project(project_id: int, project_update: ProjectUpdate, db: Session = Depends(get_db)):
    """Partially update a project"""
    db_project = _get_project_or_404(db, project_id)

    update_data = project_update.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No valid fields provided for update")

    if "team_id" in update_data:
        _check_team_exists(db, update_data["team_id"])

    projects_crud.update_project(db, db_project, update_data)
    return {
        "message": "Project updated successfully",
        "project": projects_crud.get_project_display(db, project_id),
    }


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: int, db: Session = Depends(get_db)):
    db_project = _get_project_or_404(db, project_id)

    task_count = projects_crud.count_tasks(db, project_id)
    if task_count:
        raise HTTPException(
            status_code=400,
            detail={"error": "Cannot delete project with associated tasks", "taskCount": task_count},
        )

    projects_crud.delete_project(db, db_project)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
