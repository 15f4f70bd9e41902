# app/crud/base.py
"""
Helpers shared by the per-entity data access modules.

Existence and uniqueness pre-checks in the routers are not atomic, so the
database constraints stay the final word: ``commit`` turns an integrity
error raised by the store into a 409 (unique) or 400 (foreign key / not
null) instead of letting it surface as a 500.
"""

import logging
from typing import Any, Dict

from fastapi import HTTPException, status
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def is_unique_violation(error: IntegrityError) -> bool:
    code = getattr(error.orig, "pgcode", None)
    if code is not None:
        return code == UNIQUE_VIOLATION
    return "unique" in str(error.orig).lower()


def commit(db: Session) -> None:
    """Commit the session, mapping constraint violations to client errors."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        detail = str(e.orig)
        if is_unique_violation(e):
            logger.warning(f"Unique constraint rejected write: {detail}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={"error": "Duplicate value violates a unique constraint", "detail": detail},
            )
        logger.warning(f"Integrity constraint rejected write: {detail}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Operation violates a data integrity constraint", "detail": detail},
        )


def apply_updates(obj: Any, update_data: Dict[str, Any]) -> Any:
    for field, value in update_data.items():
        setattr(obj, field, value)
    return obj


def as_dict(obj: Any) -> Dict[str, Any]:
    """Column values of an ORM row, used to add joined display fields."""
    return {attr.key: getattr(obj, attr.key) for attr in inspect(obj).mapper.column_attrs}
