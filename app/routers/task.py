# app/routers/task.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.crud import tags as tags_crud
from app.crud import tasks as tasks_crud
from app.database import get_db
from app.models.task import Task
from app.schemas.common import CreatedId, MessageOut
from app.schemas.tag import TagOut
from app.schemas.task import (
    TaskCreate, TaskDetail, TaskListItem, TaskMessage, TaskTagAssign, TaskTagsAssigned, TaskUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_REFERENCE = "Invalid project, status or user reference"


def _get_task_or_404(db: Session, task_id: int) -> Task:
    task = tasks_crud.get_task(db, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.get("", response_model=List[TaskListItem])
def get_tasks(db: Session = Depends(get_db)):
    """Get all tasks with project, status and creator names"""
    return tasks_crud.list_tasks(db)


@router.get("/{task_id}", response_model=TaskDetail)
def get_task(task_id: int, db: Session = Depends(get_db)):
    task = tasks_crud.get_task_display(db, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.post("", response_model=CreatedId, status_code=status.HTTP_201_CREATED)
def create_task(task: TaskCreate, db: Session = Depends(get_db)):
    if not tasks_crud.references_valid(db, task.project_id, task.status_id, task.creator_id):
        raise HTTPException(status_code=400, detail=INVALID_REFERENCE)

    db_task = tasks_crud.create_task(db, task.model_dump())
    return {"id": db_task.id}


@router.put("/{task_id}", response_model=TaskMessage)
def update_task(task_id: int, task_update: TaskUpdate, db: Session = Depends(get_db)):
    """Partially update a task; references are checked only when supplied"""
    db_task = _get_task_or_404(db, task_id)

    update_data = task_update.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No valid fields provided for update")

    if not tasks_crud.references_valid(
        db,
        update_data.get("project_id"),
        update_data.get("status_id"),
        update_data.get("creator_id"),
    ):
        raise HTTPException(status_code=400, detail=INVALID_REFERENCE)

    db_task = tasks_crud.update_task(db, db_task, update_data)
    return {"message": "Task updated successfully", "task": db_task}


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    db_task = _get_task_or_404(db, task_id)
    tasks_crud.delete_task(db, db_task)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{task_id}/tags", response_model=List[TagOut])
def get_task_tags(task_id: int, db: Session = Depends(get_db)):
    return _get_task_or_404(db, task_id).tags


@router.post("/{task_id}/tags", response_model=TaskTagsAssigned, status_code=status.HTTP_201_CREATED)
def assign_tags(task_id: int, payload: TaskTagAssign, db: Session = Depends(get_db)):
    """Assign tags to a task; pairs that already exist are skipped"""
    _get_task_or_404(db, task_id)

    tag_ids = list(dict.fromkeys(payload.tag_ids))
    if len(tasks_crud.find_tags(db, tag_ids)) != len(tag_ids):
        raise HTTPException(status_code=400, detail="One or more tags not found")

    count = tasks_crud.assign_tags(db, task_id, tag_ids)
    if count == 0:
        return JSONResponse(status_code=200, content={"message": "All tags already assigned to this task"})

    return {"count": count}


@router.delete("/{task_id}/tags/{tag_id}", response_model=MessageOut)
def remove_tag(task_id: int, tag_id: int, db: Session = Depends(get_db)):
    _get_task_or_404(db, task_id)
    if not tags_crud.get_tag(db, tag_id):
        raise HTTPException(status_code=404, detail="Tag not found")

    if not tasks_crud.assigned_tag_ids(db, task_id, [tag_id]):
        raise HTTPException(status_code=400, detail="Tag is not assigned to this task")

    tasks_crud.unassign_tag(db, task_id, tag_id)
    return {"message": "Tag removed from task successfully"}
