"""Owner-scoped lookups shared by the resource endpoints."""

from typing import Any, TypeVar

from sqlalchemy.orm import Session

from gift_tracker.errors import NotFound, ValidationError

ModelT = TypeVar("ModelT")


def get_owned(db: Session, model: type[ModelT], row_id: str, user_id: str, label: str) -> ModelT:
    """Get a row owned by the user.

    Rows that do not exist and rows owned by someone else raise the same NotFound.
    """
    row = db.query(model).filter(model.id == row_id, model.user_id == user_id).first()
    if row is None:
        raise NotFound(f"{label} not found")
    return row


def check_reference(
    db: Session,
    model: type,
    row_id: str | None,
    user_id: str,
    field: str,
) -> None:
    """Reject a foreign identifier that is missing or belongs to another user."""
    if row_id is None:
        return
    exists = (
        db.query(model.id).filter(model.id == row_id, model.user_id == user_id).first()
        is not None
    )
    if not exists:
        raise ValidationError(f"{field} does not reference one of your {model.__tablename__}")


def apply_changes(row: Any, changes: dict[str, Any]) -> None:
    """Copy explicitly supplied fields onto a row (last write wins)."""
    for field, value in changes.items():
        setattr(row, field, value)
