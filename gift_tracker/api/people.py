"""People API endpoints."""

from fastapi import APIRouter, status

from gift_tracker.api.dependencies import CurrentUser, DbSession
from gift_tracker.models.budget import Budget
from gift_tracker.models.occasion import Occasion
from gift_tracker.models.person import Person
from gift_tracker.schemas.person import PersonCreate, PersonResponse, PersonUpdate
from gift_tracker.services.ownership import apply_changes, get_owned

router = APIRouter(prefix="/api/people", tags=["people"])


@router.get("", response_model=list[PersonResponse])
def list_people(current_user: CurrentUser, db: DbSession):
    """List the caller's people, newest first."""
    return (
        db.query(Person)
        .filter(Person.user_id == current_user.id)
        .order_by(Person.created_at.desc(), Person.id.desc())
        .all()
    )


@router.post("", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
def create_person(person_data: PersonCreate, current_user: CurrentUser, db: DbSession):
    """Create a new person."""
    person = Person(user_id=current_user.id, **person_data.model_dump())
    db.add(person)
    db.commit()
    db.refresh(person)
    return person


@router.get("/{person_id}", response_model=PersonResponse)
def get_person(person_id: str, current_user: CurrentUser, db: DbSession):
    """Get a specific person."""
    return get_owned(db, Person, person_id, current_user.id, "Person")


@router.put("/{person_id}", response_model=PersonResponse)
def update_person(
    person_id: str,
    person_data: PersonUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update a person."""
    person = get_owned(db, Person, person_id, current_user.id, "Person")

    apply_changes(person, person_data.model_dump(exclude_unset=True))
    db.commit()
    db.refresh(person)
    return person


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(person_id: str, current_user: CurrentUser, db: DbSession):
    """Delete a person and the gifts addressed to them.

    Occasions and budgets tied to the person are kept but detached.
    """
    person = get_owned(db, Person, person_id, current_user.id, "Person")

    db.query(Occasion).filter(Occasion.person_id == person_id).update({Occasion.person_id: None})
    db.query(Budget).filter(Budget.person_id == person_id).update({Budget.person_id: None})

    db.delete(person)
    db.commit()
