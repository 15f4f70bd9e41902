from pydantic import AliasChoices, BaseModel, Field
from typing import Optional
from datetime import date, datetime, time

from .common import HexColor, EventTitle

# Calendar clients send camelCase keys; snake_case is accepted as well


class EventCreate(BaseModel):
    user_id: int = Field(validation_alias=AliasChoices("userId", "user_id"))
    title: EventTitle
    description: Optional[str] = None
    event_date: date = Field(validation_alias=AliasChoices("eventDate", "event_date"))
    event_time: time = Field(validation_alias=AliasChoices("eventTime", "event_time"))
    color: HexColor


class EventUpdate(BaseModel):
    title: Optional[EventTitle] = None
    description: Optional[str] = None
    event_date: Optional[date] = Field(default=None, validation_alias=AliasChoices("eventDate", "event_date"))
    event_time: Optional[time] = Field(default=None, validation_alias=AliasChoices("eventTime", "event_time"))
    color: Optional[HexColor] = None


class EventOut(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    event_date: date
    event_time: time
    color: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
