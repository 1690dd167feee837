"""Occasion API endpoints."""

from fastapi import APIRouter, status

from gift_tracker.api.dependencies import CurrentUser, DbSession
from gift_tracker.models.budget import Budget
from gift_tracker.models.gift import Gift
from gift_tracker.models.occasion import Occasion
from gift_tracker.models.person import Person
from gift_tracker.schemas.occasion import OccasionCreate, OccasionResponse, OccasionUpdate
from gift_tracker.services.ownership import apply_changes, check_reference, get_owned

router = APIRouter(prefix="/api/occasions", tags=["occasions"])


@router.get("", response_model=list[OccasionResponse])
def list_occasions(current_user: CurrentUser, db: DbSession):
    """List the caller's occasions, soonest date first."""
    return (
        db.query(Occasion)
        .filter(Occasion.user_id == current_user.id)
        .order_by(Occasion.date.asc(), Occasion.created_at.asc(), Occasion.id.asc())
        .all()
    )


@router.post("", response_model=OccasionResponse, status_code=status.HTTP_201_CREATED)
def create_occasion(occasion_data: OccasionCreate, current_user: CurrentUser, db: DbSession):
    """Create a new occasion."""
    check_reference(db, Person, occasion_data.person_id, current_user.id, "personId")

    occasion = Occasion(user_id=current_user.id, **occasion_data.model_dump())
    occasion.type = occasion_data.type.value
    db.add(occasion)
    db.commit()
    db.refresh(occasion)
    return occasion


@router.get("/{occasion_id}", response_model=OccasionResponse)
def get_occasion(occasion_id: str, current_user: CurrentUser, db: DbSession):
    """Get a specific occasion."""
    return get_owned(db, Occasion, occasion_id, current_user.id, "Occasion")


@router.put("/{occasion_id}", response_model=OccasionResponse)
def update_occasion(
    occasion_id: str,
    occasion_data: OccasionUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update an occasion."""
    occasion = get_owned(db, Occasion, occasion_id, current_user.id, "Occasion")

    changes = occasion_data.model_dump(exclude_unset=True)
    if "person_id" in changes:
        check_reference(db, Person, changes["person_id"], current_user.id, "personId")
    if "type" in changes:
        changes["type"] = changes["type"].value

    apply_changes(occasion, changes)
    db.commit()
    db.refresh(occasion)
    return occasion


@router.delete("/{occasion_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_occasion(occasion_id: str, current_user: CurrentUser, db: DbSession):
    """Delete an occasion. Gifts and budgets planned for it are kept but detached."""
    occasion = get_owned(db, Occasion, occasion_id, current_user.id, "Occasion")

    db.query(Gift).filter(Gift.occasion_id == occasion_id).update({Gift.occasion_id: None})
    db.query(Budget).filter(Budget.occasion_id == occasion_id).update({Budget.occasion_id: None})

    db.delete(occasion)
    db.commit()
