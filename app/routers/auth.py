# app/routers/auth.py
import logging

from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from app.config.settings import Settings, get_settings
from app.crud import users as users_crud
from app.database import get_db
from app.models.user import User
from app.schemas.tokens import Token
from app.schemas.user import (
    UserCreate, UserLogin, UserRegistered, PasswordChange, ProfileOut, ProfileUpdate,
)
from app.utils.auth import get_current_user
from app.utils.security import verify_password, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/auth/register", response_model=UserRegistered, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    conflicts = users_crud.find_conflicts(db, username=user.username, email=user.email)
    if conflicts:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"error": "User already exists", "conflicts": conflicts},
        )

    new_user = users_crud.create_user(db, user.username, user.email, user.password, user.role)
    return {"message": "User registered successfully", "userId": new_user.id}


@router.post("/auth/login", response_model=Token)
def login(user: UserLogin, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    db_user = users_crud.get_user_by_email(db, user.email)
    if not db_user:
        logger.info(f"Login failed: no user with email {user.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"success": False, "error": "User with this email not found"},
        )

    if not verify_password(user.password, db_user.password_hash):
        logger.info(f"Login failed: wrong password for user {db_user.id}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"success": False, "error": "Incorrect password"},
        )

    token = create_access_token({"sub": str(db_user.id), "role": db_user.role}, settings)
    return {
        "success": True,
        "token": token,
        "user": db_user,
        "message": "Login successful",
    }


@router.post("/change-password")
def change_password(
    passwords: PasswordChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Re-verify the current password before storing a new hash"""
    if not verify_password(passwords.current_password, current_user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"errors": [{"msg": "Current password is incorrect"}]},
        )

    users_crud.set_password(db, current_user, passwords.new_password)
    return {"msg": "Password updated successfully"}


@router.get("/profile", response_model=ProfileOut)
def get_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/profile", response_model=ProfileOut)
def update_profile(
    profile: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    update_data = profile.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No valid fields provided for update")

    if "username" in update_data:
        conflicts = users_crud.find_conflicts(db, username=update_data["username"], exclude_id=current_user.id)
        if conflicts:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={"error": "Username already taken", "conflicts": conflicts},
            )

    return users_crud.update_user(db, current_user, update_data)
