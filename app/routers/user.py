# app/routers/user.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status
from sqlalchemy.orm import Session

from app.crud import users as users_crud
from app.database import get_db
from app.models.user import User
from app.schemas.settings import UserSettingsOut, UserSettingsUpdate
from app.schemas.user import UserBasic, UserCreate, UserCreated, UserOut, UserProfile, UserUpdate, UserUpdated
from app.services.file_storage import AvatarStorageService, get_avatar_storage

logger = logging.getLogger(__name__)

router = APIRouter()

# Same bounds as the Username schema type; the profile form is not a pydantic body
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = users_crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _raise_if_conflicts(conflicts: dict) -> None:
    if conflicts:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"error": "User already exists", "conflicts": conflicts},
        )


@router.get("", response_model=List[UserOut])
def get_all_users(db: Session = Depends(get_db)):
    """Get all users"""
    return users_crud.list_users(db)


@router.get("/{user_id}", response_model=UserBasic)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Get a specific user by ID"""
    return _get_user_or_404(db, user_id)


@router.post("", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Create a new user, rejecting a taken username or email with 409"""
    _raise_if_conflicts(users_crud.find_conflicts(db, username=user.username, email=user.email))

    db_user = users_crud.create_user(db, user.username, user.email, user.password, user.role)
    return {"success": True, "userId": db_user.id, "message": "User registered successfully"}


@router.put("/{user_id}", response_model=UserUpdated)
def update_user(user_id: int, user_update: UserUpdate, db: Session = Depends(get_db)):
    """Partially update a user; only the supplied fields change"""
    db_user = _get_user_or_404(db, user_id)

    update_data = user_update.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No valid fields provided for update")

    _raise_if_conflicts(
        users_crud.find_conflicts(
            db,
            username=update_data.get("username"),
            email=update_data.get("email"),
            exclude_id=user_id,
        )
    )

    db_user = users_crud.update_user(db, db_user, update_data)
    return {"message": "User updated successfully", "user": db_user}


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    storage: AvatarStorageService = Depends(get_avatar_storage),
):
    """Delete a user together with their events and settings"""
    db_user = _get_user_or_404(db, user_id)

    dependents = users_crud.count_dependents(db, user_id)
    if any(dependents.values()):
        raise HTTPException(
            status_code=400,
            detail={"error": "Cannot delete user who created teams or tasks", **dependents},
        )

    avatar_url = db_user.avatar_url
    users_crud.delete_user(db, db_user)
    storage.delete_avatar(avatar_url)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/profile", response_model=UserProfile)
def get_user_profile(user_id: int, db: Session = Depends(get_db)):
    return _get_user_or_404(db, user_id)


@router.put("/{user_id}/profile", response_model=UserProfile)
def update_user_profile(
    user_id: int,
    username: Optional[str] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: AvatarStorageService = Depends(get_avatar_storage),
):
    """Update username and/or replace the avatar image (multipart form)"""
    db_user = _get_user_or_404(db, user_id)

    update_data = {}
    if username is not None and username.strip():
        username = username.strip()
        if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
            raise HTTPException(
                status_code=400,
                detail={
                    "message": "Validation failed",
                    "errors": [{
                        "field": "username",
                        "msg": f"Username must be {USERNAME_MIN_LENGTH} to {USERNAME_MAX_LENGTH} characters",
                    }],
                },
            )
        _raise_if_conflicts(users_crud.find_conflicts(db, username=username, exclude_id=user_id))
        update_data["username"] = username

    if avatar is not None and avatar.filename:
        old_avatar_url = db_user.avatar_url
        update_data["avatar_url"] = storage.save_avatar(avatar, user_id)
    else:
        old_avatar_url = None

    if not update_data:
        raise HTTPException(status_code=400, detail="No valid fields provided for update")

    try:
        db_user = users_crud.update_user(db, db_user, update_data)
    except Exception:
        # The row was not updated, so the freshly stored file is orphaned
        storage.delete_avatar(update_data.get("avatar_url"))
        raise

    # Remove the replaced avatar only once the new one is recorded
    if old_avatar_url:
        storage.delete_avatar(old_avatar_url)

    return db_user


@router.get("/{user_id}/settings", response_model=UserSettingsOut)
def get_user_settings(user_id: int, db: Session = Depends(get_db)):
    """Get a user's settings, creating the defaults on first access"""
    db_user = _get_user_or_404(db, user_id)
    return users_crud.get_or_create_settings(db, db_user)


@router.put("/{user_id}/settings", response_model=UserSettingsOut)
def update_user_settings(user_id: int, settings_update: UserSettingsUpdate, db: Session = Depends(get_db)):
    db_user = _get_user_or_404(db, user_id)

    update_data = settings_update.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No valid fields provided for update")

    db_settings = users_crud.get_or_create_settings(db, db_user)
    return users_crud.update_settings(db, db_settings, update_data)
