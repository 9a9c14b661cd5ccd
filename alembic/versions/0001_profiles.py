"""Profiles and match notification ledger

Revision ID: 0001_profiles
Revises: 
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "0001_profiles"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("user_id", sa.String(length=64), primary_key=True),
        sa.Column("state", sa.String(length=48), nullable=False, server_default="awaiting-name"),
        sa.Column("name", sa.String(length=120), nullable=True),
        sa.Column("gender", sa.String(length=16), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("age_visible", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("location", sa.String(length=120), nullable=True),
        sa.Column("hobbies", sa.JSON(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("photo", sa.String(length=255), nullable=True),
        sa.Column("handle", sa.String(length=120), nullable=True),
        sa.Column("pending_handle", sa.String(length=120), nullable=True),
        sa.Column("platform", sa.String(length=16), nullable=True),
        sa.Column("platform_label", sa.String(length=120), nullable=True),
        sa.Column("match_step", sa.String(length=32), nullable=True),
        sa.Column("match_location", sa.String(length=120), nullable=True),
    )
    op.create_index("ix_profiles_location", "profiles", ["location"], unique=False)

    op.create_table(
        "match_notifications",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("recipient_id", sa.String(length=64), nullable=False),
        sa.Column("source_id", sa.String(length=64), nullable=False),
        sa.UniqueConstraint("recipient_id", "source_id", name="uq_match_notifications_pair"),
    )
    op.create_index(
        "ix_match_notifications_recipient_id", "match_notifications", ["recipient_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_match_notifications_recipient_id", table_name="match_notifications")
    op.drop_table("match_notifications")
    op.drop_index("ix_profiles_location", table_name="profiles")
    op.drop_table("profiles")
