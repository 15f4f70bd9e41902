# app/schemas/settings.py
from pydantic import BaseModel, Field, StringConstraints
from typing import Annotated, Optional
from datetime import datetime

from .common import HexColor


class UserSettingsOut(BaseModel):
    id: int
    user_id: int
    dark_mode: bool
    high_contrast: bool
    language: str
    font_size: int
    voice_assistant: bool
    accent_color: str
    date_format: str
    timezone: str
    two_factor_auth: bool
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class UserSettingsUpdate(BaseModel):
    dark_mode: Optional[bool] = None
    high_contrast: Optional[bool] = None
    language: Optional[Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=10)]] = None
    font_size: Optional[Annotated[int, Field(ge=8, le=48)]] = None
    voice_assistant: Optional[bool] = None
    accent_color: Optional[HexColor] = None
    date_format: Optional[Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=20)]] = None
    timezone: Optional[Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]] = None
    two_factor_auth: Optional[bool] = None
