from pydantic import BaseModel
from typing import Optional

from .common import StatusName


class TaskStatusCreate(BaseModel):
    name: StatusName


class TaskStatusUpdate(BaseModel):
    name: Optional[StatusName] = None


class TaskStatusOut(BaseModel):
    id: int
    name: str

    model_config = {
        "from_attributes": True
    }
