# app/routers/task_statuses.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.crud import task_statuses as statuses_crud
from app.database import get_db
from app.models.task import TaskStatus
from app.schemas.common import CreatedId
from app.schemas.task_status import TaskStatusCreate, TaskStatusOut, TaskStatusUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_status_or_404(db: Session, status_id: int) -> TaskStatus:
    task_status = statuses_crud.get_status(db, status_id)
    if not task_status:
        raise HTTPException(status_code=404, detail="Task status not found")
    return task_status


def _check_name_free(db: Session, name: str, exclude_id: Optional[int] = None) -> None:
    if statuses_crud.find_by_name(db, name, exclude_id=exclude_id):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Task status already exists")


@router.get("", response_model=List[TaskStatusOut])
def get_task_statuses(db: Session = Depends(get_db)):
    return statuses_crud.list_statuses(db)


@router.post("", response_model=CreatedId, status_code=status.HTTP_201_CREATED)
def create_task_status(task_status: TaskStatusCreate, db: Session = Depends(get_db)):
    _check_name_free(db, task_status.name)
    db_status = statuses_crud.create_status(db, task_status.name)
    return {"id": db_status.id}


@router.put("/{status_id}", response_model=TaskStatusOut)
def update_task_status(status_id: int, status_update: TaskStatusUpdate, db: Session = Depends(get_db)):
    db_status = _get_status_or_404(db, status_id)

    if status_update.name is None:
        raise HTTPException(status_code=400, detail="No valid fields provided for update")

    _check_name_free(db, status_update.name, exclude_id=status_id)
    return statuses_crud.rename_status(db, db_status, status_update.name)


@router.delete("/{status_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task_status(status_id: int, db: Session = Depends(get_db)):
    """Delete a status that no task is using"""
    db_status = _get_status_or_404(db, status_id)

    task_count = statuses_crud.count_tasks(db, status_id)
    if task_count:
        raise HTTPException(
            status_code=400,
            detail={"error": "Cannot delete status that is used by tasks", "taskCount": task_count},
        )

    statuses_crud.delete_status(db, db_status)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
