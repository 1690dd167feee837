"""Budget API endpoints."""

from fastapi import APIRouter, status

from gift_tracker.api.dependencies import CurrentUser, DbSession
from gift_tracker.errors import ValidationError
from gift_tracker.models.budget import Budget
from gift_tracker.models.occasion import Occasion
from gift_tracker.models.person import Person
from gift_tracker.schemas.budget import BudgetCreate, BudgetResponse, BudgetUpdate
from gift_tracker.services.ownership import apply_changes, check_reference, get_owned

router = APIRouter(prefix="/api/budgets", tags=["budgets"])


@router.get("", response_model=list[BudgetResponse])
def list_budgets(current_user: CurrentUser, db: DbSession):
    """List the caller's budgets, newest first."""
    return (
        db.query(Budget)
        .filter(Budget.user_id == current_user.id)
        .order_by(Budget.created_at.desc(), Budget.id.desc())
        .all()
    )


@router.post("", response_model=BudgetResponse, status_code=status.HTTP_201_CREATED)
def create_budget(budget_data: BudgetCreate, current_user: CurrentUser, db: DbSession):
    """Create a new budget, optionally scoped to one of the caller's people or occasions."""
    check_reference(db, Person, budget_data.person_id, current_user.id, "personId")
    check_reference(db, Occasion, budget_data.occasion_id, current_user.id, "occasionId")

    budget = Budget(user_id=current_user.id, **budget_data.model_dump())
    budget.period = budget_data.period.value
    db.add(budget)
    db.commit()
    db.refresh(budget)
    return budget


@router.get("/{budget_id}", response_model=BudgetResponse)
def get_budget(budget_id: str, current_user: CurrentUser, db: DbSession):
    """Get a specific budget."""
    return get_owned(db, Budget, budget_id, current_user.id, "Budget")


@router.put("/{budget_id}", response_model=BudgetResponse)
def update_budget(
    budget_id: str,
    budget_data: BudgetUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    """Update a budget."""
    budget = get_owned(db, Budget, budget_id, current_user.id, "Budget")

    changes = budget_data.model_dump(exclude_unset=True)
    if "person_id" in changes:
        check_reference(db, Person, changes["person_id"], current_user.id, "personId")
    if "occasion_id" in changes:
        check_reference(db, Occasion, changes["occasion_id"], current_user.id, "occasionId")
    if "period" in changes:
        changes["period"] = changes["period"].value

    start_date = changes.get("start_date", budget.start_date)
    end_date = changes.get("end_date", budget.end_date)
    if start_date and end_date and end_date < start_date:
        raise ValidationError("endDate must not be before startDate")

    apply_changes(budget, changes)
    db.commit()
    db.refresh(budget)
    return budget


@router.delete("/{budget_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_budget(budget_id: str, current_user: CurrentUser, db: DbSession):
    """Delete a budget."""
    budget = get_owned(db, Budget, budget_id, current_user.id, "Budget")
    db.delete(budget)
    db.commit()
