# app/schemas/tokens.py
from pydantic import BaseModel
from app.schemas.user import UserBasic

class Token(BaseModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    user: UserBasic
    message: str
