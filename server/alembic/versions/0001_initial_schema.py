"""initial congregation schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

member_status = sa.Enum("Active", "Inactive", "Visitor", name="member_status")
member_gender = sa.Enum("Male", "Female", name="member_gender")
event_type = sa.Enum("Service", "Meeting", "Program", name="event_type")
donation_fund = sa.Enum("Tithe", "Offering", "Building Fund", "Missions", name="donation_fund")
donation_method = sa.Enum("Cash", "Cheque", "Transfer", name="donation_method")
profile_role = sa.Enum("Admin", "Pastor", "Treasurer", "Staff", name="profile_role")
announcement_target = sa.Enum("All", "Individual", name="announcement_target")


def upgrade() -> None:
    op.create_table(
        "auth_accounts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("session_version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_sign_in_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_auth_accounts_email", "auth_accounts", ["email"], unique=True)

    op.create_table(
        "profiles",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", profile_role, nullable=False, server_default="Staff"),
        sa.Column("avatar", sa.String(length=2048), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_profiles_email", "profiles", ["email"])

    op.create_table(
        "families",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("family_name", sa.String(length=150), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("head_of_family_id", sa.String(length=36), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "members",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("gender", member_gender, nullable=True),
        sa.Column("status", member_status, nullable=False, server_default="Active"),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("baptism_date", sa.Date(), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("photo_url", sa.String(length=2048), nullable=True),
        sa.Column("notes", sa.String(length=2000), nullable=True),
        sa.Column("family_id", sa.String(length=36), sa.ForeignKey("families.id", ondelete="SET NULL"), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_members_family_id", "members", ["family_id"])
    op.create_foreign_key(
        "fk_families_head_of_family_id",
        "families",
        "members",
        ["head_of_family_id"],
        ["id"],
        ondelete="SET NULL",
    )

    op.create_table(
        "events",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("type", event_type, nullable=False, server_default="Service"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_events_date", "events", ["date"])

    op.create_table(
        "event_attendance",
        sa.Column("event_id", sa.String(length=36), sa.ForeignKey("events.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("member_id", sa.String(length=36), sa.ForeignKey("members.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_event_attendance_member_id", "event_attendance", ["member_id"])

    op.create_table(
        "donations",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("member_id", sa.String(length=36), sa.ForeignKey("members.id", ondelete="SET NULL"), nullable=True),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("fund", donation_fund, nullable=False),
        sa.Column("method", donation_method, nullable=False),
        sa.Column("notes", sa.String(length=500), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_donations_member_id", "donations", ["member_id"])
    op.create_index("ix_donations_date", "donations", ["date"])

    op.create_table(
        "announcements",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("target", announcement_target, nullable=False, server_default="All"),
        sa.Column("target_member_id", sa.String(length=36), sa.ForeignKey("members.id", ondelete="SET NULL"), nullable=True),
        sa.Column("author", sa.String(length=255), nullable=False),
        sa.Column("sent_via_email", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_announcements_date", "announcements", ["date"])

    op.create_table(
        "church_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("currency", sa.String(length=8), nullable=False, server_default="$"),
        sa.Column("logo_url", sa.String(length=2048), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("church_settings")
    op.drop_index("ix_announcements_date", table_name="announcements")
    op.drop_table("announcements")
    op.drop_index("ix_donations_date", table_name="donations")
    op.drop_index("ix_donations_member_id", table_name="donations")
    op.drop_table("donations")
    op.drop_index("ix_event_attendance_member_id", table_name="event_attendance")
    op.drop_table("event_attendance")
    op.drop_index("ix_events_date", table_name="events")
    op.drop_table("events")
    op.drop_constraint("fk_families_head_of_family_id", "families", type_="foreignkey")
    op.drop_index("ix_members_family_id", table_name="members")
    op.drop_table("members")
    op.drop_table("families")
    op.drop_index("ix_profiles_email", table_name="profiles")
    op.drop_table("profiles")
    op.drop_index("ix_auth_accounts_email", table_name="auth_accounts")
    op.drop_table("auth_accounts")
    for enum_type in (
        announcement_target,
        profile_role,
        donation_method,
        donation_fund,
        event_type,
        member_gender,
        member_status,
    ):
        enum_type.drop(op.get_bind(), checkfirst=True)
