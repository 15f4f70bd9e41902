from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import date, datetime

from .common import TaskTitle
from .tag import TagOut

Priority = Literal["low", "medium", "high"]


class TaskCreate(BaseModel):
    title: TaskTitle
    project_id: int
    status_id: int
    creator_id: int
    priority: Priority
    due_date: Optional[date] = None
    description: Optional[str] = None


class TaskUpdate(BaseModel):
    title: Optional[TaskTitle] = None
    project_id: Optional[int] = None
    status_id: Optional[int] = None
    creator_id: Optional[int] = None
    priority: Optional[Priority] = None
    due_date: Optional[date] = None
    description: Optional[str] = None


class TaskOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    project_id: int
    status_id: int
    creator_id: int
    priority: str
    due_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class TaskListItem(TaskOut):
    """Task row joined with the display names of its project, status and creator"""
    project_name: str
    status_name: str
    creator_name: str


class TaskDetail(TaskListItem):
    tags: List[TagOut] = []


class TaskMessage(BaseModel):
    message: str
    task: TaskOut


class TaskTagAssign(BaseModel):
    tag_ids: List[int] = Field(min_length=1)


class TaskTagsAssigned(BaseModel):
    count: int
