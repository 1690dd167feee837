"""Gift API endpoints."""

from fastapi import APIRouter, status

from gift_tracker.api.dependencies import CurrentUser, DbSession
from gift_tracker.models.gift import Gift
from gift_tracker.models.occasion import Occasion
from gift_tracker.models.person import Person
from gift_tracker.schemas.gift import GiftCreate, GiftResponse, GiftUpdate
from gift_tracker.services.ownership import apply_changes, check_reference, get_owned

router = APIRouter(prefix="/api/gifts", tags=["gifts"])


@router.get("", response_model=list[GiftResponse])
def list_gifts(current_user: CurrentUser, db: DbSession):
    """List the caller's gifts, newest first."""
    return (
        db.query(Gift)
        .filter(Gift.user_id == current_user.id)
        .order_by(Gift.created_at.desc(), Gift.id.desc())
        .all()
    )


@router.post("", response_model=GiftResponse, status_code=status.HTTP_201_CREATED)
def create_gift(gift_data: GiftCreate, current_user: CurrentUser, db: DbSession):
    """Create a gift for one of the caller's people."""
    check_reference(db, Person, gift_data.recipient_id, current_user.id, "recipientId")
    check_reference(db, Occasion, gift_data.occasion_id, current_user.id, "occasionId")

    gift = Gift(user_id=current_user.id, **gift_data.model_dump(mode="json"))
    db.add(gift)
    db.commit()
    db.refresh(gift)
    return gift


@router.get("/{gift_id}", response_model=GiftResponse)
def get_gift(gift_id: str, current_user: CurrentUser, db: DbSession):
    """Get a specific gift."""
    return get_owned(db, Gift, gift_id, current_user.id, "Gift")


@router.put("/{gift_id}", response_model=GiftResponse)
def update_gift(
    gift_id: str,
    gift_data: GiftUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update a gift. Status may move to any value, in any order."""
    gift = get_owned(db, Gift, gift_id, current_user.id, "Gift")

    changes = gift_data.model_dump(mode="json", exclude_unset=True)
    if "recipient_id" in changes:
        check_reference(db, Person, changes["recipient_id"], current_user.id, "recipientId")
    if "occasion_id" in changes:
        check_reference(db, Occasion, changes["occasion_id"], current_user.id, "occasionId")

    apply_changes(gift, changes)
    db.commit()
    db.refresh(gift)
    return gift


@router.delete("/{gift_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_gift(gift_id: str, current_user: CurrentUser, db: DbSession):
    """Delete a gift."""
    gift = get_owned(db, Gift, gift_id, current_user.id, "Gift")
    db.delete(gift)
    db.commit()
