# app/routers/events.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.crud import events as events_crud
from app.crud import users as users_crud
from app.database import get_db
from app.models.event import Event
from app.schemas.event import EventCreate, EventOut, EventUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_event_or_404(db: Session, event_id: int) -> Event:
    event = events_crud.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.get("", response_model=List[EventOut])
def get_events(user_id: Optional[int] = Query(None, alias="userId"), db: Session = Depends(get_db)):
    """Get a user's calendar events ordered by date and time"""
    if user_id is None:
        raise HTTPException(status_code=400, detail="User ID is required")
    return events_crud.list_user_events(db, user_id)


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: int, db: Session = Depends(get_db)):
    return _get_event_or_404(db, event_id)


@router.post("", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(event: EventCreate, db: Session = Depends(get_db)):
    if not users_crud.get_user(db, event.user_id):
        raise HTTPException(status_code=400, detail="User with this ID not found")
    return events_crud.create_event(db, event.model_dump())


@router.put("/{event_id}", response_model=EventOut)
def update_event(event_id: int, event_update: EventUpdate, db: Session = Depends(get_db)):
    db_event = _get_event_or_404(db, event_id)

    update_data = event_update.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No valid fields provided for update")

    return events_crud.update_event(db, db_event, update_data)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    db_event = _get_event_or_404(db, event_id)
    events_crud.delete_event(db, db_event)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
