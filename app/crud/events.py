# app/crud/events.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.crud.base import apply_updates, commit
from app.models.event import Event

logger = logging.getLogger(__name__)


def list_user_events(db: Session, user_id: int) -> List[Event]:
    return (
        db.query(Event)
        .filter(Event.user_id == user_id)
        .order_by(Event.event_date, Event.event_time)
        .all()
    )


def get_event(db: Session, event_id: int) -> Optional[Event]:
    return db.query(Event).filter(Event.id == event_id).first()


def create_event(db: Session, data: Dict[str, Any]) -> Event:
    db_event = Event(**data)
    db.add(db_event)
    commit(db)
    db.refresh(db_event)
    logger.info(f"Event created for user {db_event.user_id} (ID: {db_event.id})")
    return db_event


def update_event(db: Session, db_event: Event, update_data: Dict[str, Any]) -> Event:
    apply_updates(db_event, update_data)
    commit(db)
    db.refresh(db_event)
    return db_event


def delete_event(db: Session, db_event: Event) -> None:
    event_id = db_event.id
    db.delete(db_event)
    commit(db)
    logger.info(f"Event {event_id} deleted")
