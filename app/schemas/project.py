from pydantic import BaseModel
from typing import Literal, Optional
from datetime import date, datetime

from .common import ProjectName

ProjectStatusName = Literal["active", "archived"]


class ProjectCreate(BaseModel):
    name: ProjectName
    team_id: int
    status: ProjectStatusName
    description: Optional[str] = None
    deadline: Optional[date] = None


class ProjectUpdate(BaseModel):
    name: Optional[ProjectName] = None
    team_id: Optional[int] = None
    status: Optional[ProjectStatusName] = None
    description: Optional[str] = None
    deadline: Optional[date] = None


class ProjectOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    team_id: int
    team_name: Optional[str] = None
    status: str
    deadline: Optional[date] = None
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class ProjectMessage(BaseModel):
    message: str
    project: ProjectOut
