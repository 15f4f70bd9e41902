from pydantic import BaseModel
from typing import Optional

from .common import HexColor, TagName


class TagCreate(BaseModel):
    name: TagName
    color: HexColor


class TagUpdate(BaseModel):
    name: Optional[TagName] = None
    color: Optional[HexColor] = None


class TagOut(BaseModel):
    id: int
    name: str
    color: str

    model_config = {
        "from_attributes": True
    }


class TagMessage(BaseModel):
    message: str
    tag: TagOut
