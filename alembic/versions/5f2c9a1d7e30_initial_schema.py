"""Initial schema: users, people, occasions, gifts, budgets

Revision ID: 5f2c9a1d7e30
Revises:
Create Date: 2026-10-17 09:12:44.108412

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5f2c9a1d7e30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("preferences", sa.JSON(), nullable=False),
        *timestamps(),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "people",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("relationship", sa.String(length=100), nullable=True),
        sa.Column("birthday", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("avatar", sa.String(length=500), nullable=True),
        sa.Column("family_id", sa.String(length=36), nullable=True),
        *timestamps(),
    )
    op.create_index(op.f("ix_people_user_id"), "people", ["user_id"])

    op.create_table(
        "occasions",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("person_id", sa.String(length=36), sa.ForeignKey("people.id"), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("budget", sa.Float(), nullable=True),
        *timestamps(),
    )
    op.create_index(op.f("ix_occasions_user_id"), "occasions", ["user_id"])
    op.create_index(op.f("ix_occasions_person_id"), "occasions", ["person_id"])

    op.create_table(
        "gifts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column(
            "recipient_id", sa.String(length=36), sa.ForeignKey("people.id"), nullable=False
        ),
        sa.Column(
            "occasion_id", sa.String(length=36), sa.ForeignKey("occasions.id"), nullable=True
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *timestamps(),
    )
    op.create_index(op.f("ix_gifts_user_id"), "gifts", ["user_id"])
    op.create_index(op.f("ix_gifts_recipient_id"), "gifts", ["recipient_id"])
    op.create_index(op.f("ix_gifts_occasion_id"), "gifts", ["occasion_id"])

    op.create_table(
        "budgets",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("person_id", sa.String(length=36), sa.ForeignKey("people.id"), nullable=True),
        sa.Column(
            "occasion_id", sa.String(length=36), sa.ForeignKey("occasions.id"), nullable=True
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("period", sa.String(length=20), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False, server_default="general"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        *timestamps(),
    )
    op.create_index(op.f("ix_budgets_user_id"), "budgets", ["user_id"])
    op.create_index(op.f("ix_budgets_person_id"), "budgets", ["person_id"])
    op.create_index(op.f("ix_budgets_occasion_id"), "budgets", ["occasion_id"])


def downgrade() -> None:
    op.drop_table("budgets")
    op.drop_table("gifts")
    op.drop_table("occasions")
    op.drop_table("people")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
