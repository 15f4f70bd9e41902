from pydantic import AliasChoices, BaseModel, Field
from typing import Literal, Optional
from datetime import datetime

from .common import Email, Password, Username

Role = Literal["manager", "employee", "admin"]


class UserCreate(BaseModel):
    username: Username
    email: Email
    password: Password
    role: Role = "employee"


class UserLogin(BaseModel):
    email: Email
    password: Password


class UserUpdate(BaseModel):
    username: Optional[Username] = None
    email: Optional[Email] = None
    role: Optional[Role] = None


class PasswordChange(BaseModel):
    current_password: str = Field(validation_alias=AliasChoices("currentPassword", "current_password"))
    new_password: Password = Field(validation_alias=AliasChoices("newPassword", "new_password"))


class UserBasic(BaseModel):
    id: int
    username: str
    email: str
    role: str

    model_config = {
        "from_attributes": True
    }


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    role: str
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class UserCreated(BaseModel):
    success: bool = True
    userId: int
    message: str


class UserRegistered(BaseModel):
    message: str
    userId: int


class UserUpdated(BaseModel):
    message: str
    user: UserOut


class UserProfile(BaseModel):
    """Public profile card with the uploaded avatar path"""
    id: int
    username: str
    email: str
    avatar_url: Optional[str] = None

    model_config = {
        "from_attributes": True
    }


class ProfileOut(BaseModel):
    """Profile of the authenticated caller with the base64 avatar"""
    id: int
    username: str
    email: str
    avatar_data: Optional[str] = None

    model_config = {
        "from_attributes": True
    }


class ProfileUpdate(BaseModel):
    username: Optional[Username] = None
    avatar_data: Optional[str] = None
