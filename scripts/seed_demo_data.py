#!/usr/bin/env python3
"""Seed demo data for screenshots.

Creates a dedicated demo user with representative people, occasions, gifts and
budgets in the configured database. Re-running replaces the demo user's data.

Usage:
    # From project root:
    python scripts/seed_demo_data.py

    # Or against another database:
    DATABASE_URL=sqlite:///./demo.db python scripts/seed_demo_data.py
"""

import os
import sys
from datetime import date

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gift_tracker.config import get_settings
from gift_tracker.database import build_engine, build_session_factory, init_db
from gift_tracker.models import Budget, Gift, Occasion, Person, User
from gift_tracker.models.enums import BudgetPeriod, GiftStatus, OccasionType
from gift_tracker.models.user import default_preferences
from gift_tracker.services.auth import pwd_context

# Demo user credentials
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demopass123"


def seed_demo_data():
    """Seed the database with representative data for the demo user."""
    engine = build_engine(get_settings().database_url)
    init_db(engine)
    Session = build_session_factory(engine)
    session = Session()

    try:
        # Check if demo user already exists
        existing_user = session.query(User).filter_by(email=DEMO_EMAIL).first()
        if existing_user:
            print("Demo data already exists. Clearing and re-seeding...")
            for model in (Gift, Budget, Occasion, Person):
                session.query(model).filter_by(user_id=existing_user.id).delete()
            session.delete(existing_user)
            session.commit()

        print("Creating demo user...")
        user = User(
            email=DEMO_EMAIL,
            password_hash=pwd_context.hash(DEMO_PASSWORD),
            name="Demo User",
            preferences=default_preferences(),
        )
        session.add(user)
        session.flush()

        print("Creating people...")
        mom = Person(
            user_id=user.id,
            name="Mom",
            relationship="mother",
            birthday=date(1962, 4, 18),
            avatar="🌷",
            notes="Loves gardening and mystery novels",
        )
        sam = Person(
            user_id=user.id,
            name="Sam Rivera",
            email="sam@example.com",
            relationship="friend",
            birthday=date(1991, 11, 2),
            avatar="🎸",
        )
        jordan = Person(
            user_id=user.id,
            name="Jordan",
            relationship="partner",
            birthday=date(1990, 7, 9),
        )
        session.add_all([mom, sam, jordan])
        session.flush()

        print("Creating occasions...")
        moms_birthday = Occasion(
            user_id=user.id,
            person_id=mom.id,
            name="Mom's birthday",
            date=date(2026, 4, 18),
            type=OccasionType.BIRTHDAY.value,
            budget=120.0,
        )
        anniversary = Occasion(
            user_id=user.id,
            person_id=jordan.id,
            name="Anniversary",
            date=date(2026, 9, 14),
            type=OccasionType.ANNIVERSARY.value,
            budget=250.0,
        )
        christmas = Occasion(
            user_id=user.id,
            name="Christmas",
            date=date(2026, 12, 25),
            type=OccasionType.HOLIDAY.value,
            description="Family gift exchange",
        )
        session.add_all([moms_birthday, anniversary, christmas])
        session.flush()

        print("Creating gifts...")
        gifts = [
            Gift(
                user_id=user.id,
                recipient_id=mom.id,
                occasion_id=moms_birthday.id,
                name="Heirloom seed collection",
                price=34.99,
                status=GiftStatus.PURCHASED.value,
            ),
            Gift(
                user_id=user.id,
                recipient_id=mom.id,
                occasion_id=christmas.id,
                name="Agatha Christie box set",
                price=59.0,
                status=GiftStatus.PLANNED.value,
            ),
            Gift(
                user_id=user.id,
                recipient_id=sam.id,
                occasion_id=christmas.id,
                name="Guitar strings and capo",
                price=28.5,
                status=GiftStatus.WRAPPED.value,
            ),
            Gift(
                user_id=user.id,
                recipient_id=jordan.id,
                occasion_id=anniversary.id,
                name="Weekend cabin booking",
                price=210.0,
                status=GiftStatus.PLANNED.value,
                notes="Book before June",
            ),
        ]
        session.add_all(gifts)

        print("Creating budgets...")
        budgets = [
            Budget(
                user_id=user.id,
                occasion_id=christmas.id,
                name="Christmas 2026",
                amount=500.0,
                period=BudgetPeriod.CUSTOM.value,
                start_date=date(2026, 11, 1),
                end_date=date(2026, 12, 24),
            ),
            Budget(
                user_id=user.id,
                name="Birthday gifts",
                amount=200.0,
                period=BudgetPeriod.MONTHLY.value,
            ),
        ]
        session.add_all(budgets)

        session.commit()
        print("Demo data seeded successfully!")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
