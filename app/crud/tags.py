# app/crud/tags.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.crud.base import apply_updates, commit
from app.models.tag import Tag

logger = logging.getLogger(__name__)


def list_tags(db: Session) -> List[Tag]:
    return db.query(Tag).order_by(Tag.id).all()


def get_tag(db: Session, tag_id: int) -> Optional[Tag]:
    return db.query(Tag).filter(Tag.id == tag_id).first()


def find_by_name(db: Session, name: str, exclude_id: Optional[int] = None) -> Optional[Tag]:
    query = db.query(Tag).filter(Tag.name == name)
    if exclude_id is not None:
        query = query.filter(Tag.id != exclude_id)
    return query.first()


def create_tag(db: Session, name: str, color: str) -> Tag:
    db_tag = Tag(name=name, color=color)
    db.add(db_tag)
    commit(db)
    db.refresh(db_tag)
    logger.info(f"Tag created: {db_tag.name} (ID: {db_tag.id})")
    return db_tag


def update_tag(db: Session, db_tag: Tag, update_data: Dict[str, Any]) -> Tag:
    apply_updates(db_tag, update_data)
    commit(db)
    db.refresh(db_tag)
    return db_tag


def delete_tag(db: Session, db_tag: Tag) -> None:
    # Assignments go with the tag
    tag_id = db_tag.id
    db.delete(db_tag)
    commit(db)
    logger.info(f"Tag {tag_id} deleted")
