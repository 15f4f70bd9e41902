# app/routers/tags.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.crud import tags as tags_crud
from app.database import get_db
from app.models.tag import Tag
from app.schemas.common import CreatedId
from app.schemas.tag import TagCreate, TagMessage, TagOut, TagUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_tag_or_404(db: Session, tag_id: int) -> Tag:
    tag = tags_crud.get_tag(db, tag_id)
    if not tag:
        raise HTTPException(status_code=404, detail="Tag not found")
    return tag


def _check_name_free(db: Session, name: str, exclude_id: Optional[int] = None) -> None:
    if tags_crud.find_by_name(db, name, exclude_id=exclude_id):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Tag name already exists")


@router.get("", response_model=List[TagOut])
def get_tags(db: Session = Depends(get_db)):
    return tags_crud.list_tags(db)


@router.get("/{tag_id}", response_model=TagOut)
def get_tag(tag_id: int, db: Session = Depends(get_db)):
    return _get_tag_or_404(db, tag_id)


@router.post("", response_model=CreatedId, status_code=status.HTTP_201_CREATED)
def create_tag(tag: TagCreate, db: Session = Depends(get_db)):
    _check_name_free(db, tag.name)
    db_tag = tags_crud.create_tag(db, tag.name, tag.color)
    return {"id": db_tag.id}


@router.put("/{tag_id}", response_model=TagMessage)
def update_tag(tag_id: int, tag_update: TagUpdate, db: Session = Depends(get_db)):
    db_tag = _get_tag_or_404(db, tag_id)

    update_data = tag_update.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No valid fields provided for update")

    if "name" in update_data:
        _check_name_free(db, update_data["name"], exclude_id=tag_id)

    db_tag = tags_crud.update_tag(db, db_tag, update_data)
    return {"message": "Tag updated successfully", "tag": db_tag}


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tag(tag_id: int, db: Session = Depends(get_db)):
    """Delete a tag; its task assignments are removed with it"""
    db_tag = _get_tag_or_404(db, tag_id)
    tags_crud.delete_tag(db, db_tag)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
