from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from .common import TeamName


class TeamCreate(BaseModel):
    name: TeamName
    description: Optional[str] = None
    created_by: Optional[int] = None


class TeamUpdate(BaseModel):
    name: Optional[TeamName] = None
    description: Optional[str] = None
    created_by: Optional[int] = None


class TeamOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    created_by: Optional[int] = None
    creator_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class TeamMessage(BaseModel):
    message: str
    team: TeamOut
