"""Record which account claimed the first-registrant admin role.

Revision ID: 0002_settings_admin_account
Revises: 0001_initial_schema
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0002_settings_admin_account"
down_revision = "0001_initial_schema"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column(
        "church_settings",
        sa.Column("admin_account_id", sa.String(length=36), nullable=True),
    )


def downgrade() -> None:
    op.drop_column("church_settings", "admin_account_id")
