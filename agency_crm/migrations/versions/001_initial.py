"""Initial agency CRM schema.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None


def _string_enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True, length=32)


def _timestamps(*, updated: bool = True) -> list[sa.Column]:
    cols = [sa.Column("created_at", sa.DateTime(timezone=True), nullable=False)]
    if updated:
        cols.append(sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False))
    return cols


def upgrade() -> None:
    # Agency (tenant root)
    op.create_table(
        "agencies",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("subdomain", sa.String(63), nullable=False),
        sa.Column("logo_url", sa.String(2048)),
        sa.Column("favicon_url", sa.String(2048)),
        sa.Column("primary_color", sa.String(7)),
        sa.Column("secondary_color", sa.String(7)),
        sa.Column("smtp_host", sa.String(255)),
        sa.Column("smtp_port", sa.Integer),
        sa.Column("smtp_username", sa.String(255)),
        sa.Column("smtp_password", sa.String(255)),
        sa.Column("custom_domain", sa.String(255)),
        *_timestamps(),
    )
    op.create_index("ix_agencies_subdomain", "agencies", ["subdomain"], unique=True)

    # User
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("clerk_id", sa.String(255), nullable=False),
        sa.Column("agency_id", sa.Integer, sa.ForeignKey("agencies.id"), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column(
            "role",
            _string_enum("user_role", "super-admin", "agency-owner", "staff", "client"),
            nullable=False,
        ),
        sa.Column("avatar_url", sa.String(2048)),
        sa.Column("is_active", sa.Boolean, nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_users_clerk_id", "users", ["clerk_id"], unique=True)
    op.create_index("ix_users_agency_id", "users", ["agency_id"])

    # Contact
    op.create_table(
        "contacts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("agency_id", sa.Integer, sa.ForeignKey("agencies.id"), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255)),
        sa.Column("phone", sa.String(50)),
        sa.Column("company", sa.String(200)),
        sa.Column("position", sa.String(200)),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column("custom_fields", sa.JSON, nullable=False),
        sa.Column("created_by", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_contacts_agency_id", "contacts", ["agency_id"])
    op.create_index("ix_contacts_agency_email", "contacts", ["agency_id", "email"])

    # Deal
    op.create_table(
        "deals",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("agency_id", sa.Integer, sa.ForeignKey("agencies.id"), nullable=False),
        sa.Column("contact_id", sa.Integer, sa.ForeignKey("contacts.id"), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("value", sa.Numeric(12, 2)),
        sa.Column(
            "stage",
            _string_enum("deal_stage", "lead", "qualified", "proposal", "won", "lost"),
            nullable=False,
        ),
        sa.Column("probability", sa.Integer, nullable=False),
        sa.Column("expected_close_date", sa.Date),
        sa.Column("assigned_to", sa.Integer, sa.ForeignKey("users.id")),
        sa.Column("created_by", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_deals_agency_id", "deals", ["agency_id"])
    op.create_index("ix_deals_contact_id", "deals", ["contact_id"])

    # Landing page
    op.create_table(
        "landing_pages",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("agency_id", sa.Integer, sa.ForeignKey("agencies.id"), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("template_id", sa.String(100), nullable=False),
        sa.Column("content", sa.JSON, nullable=False),
        sa.Column(
            "status",
            _string_enum("landing_page_status", "draft", "published", "archived"),
            nullable=False,
        ),
        sa.Column("custom_domain", sa.String(255)),
        sa.Column("meta_title", sa.String(300)),
        sa.Column("meta_description", sa.String(1000)),
        sa.Column("published_at", sa.DateTime(timezone=True)),
        sa.Column("created_by", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_landing_pages_agency_id", "landing_pages", ["agency_id"])
    op.create_index("ix_landing_pages_slug", "landing_pages", ["slug"])

    # Contact interaction (append-only, no updated_at)
    op.create_table(
        "contact_interactions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("contact_id", sa.Integer, sa.ForeignKey("contacts.id"), nullable=False),
        sa.Column("agency_id", sa.Integer, sa.ForeignKey("agencies.id"), nullable=False),
        sa.Column(
            "type",
            _string_enum("interaction_type", "email", "call", "meeting", "note", "task"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("metadata", sa.JSON),
        sa.Column("created_by", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(updated=False),
    )
    op.create_index("ix_contact_interactions_agency_id", "contact_interactions", ["agency_id"])
    op.create_index("ix_contact_interactions_contact_id", "contact_interactions", ["contact_id"])


def downgrade() -> None:
    op.drop_table("contact_interactions")
    op.drop_table("landing_pages")
    op.drop_table("deals")
    op.drop_table("contacts")
    op.drop_table("users")
    op.drop_table("agencies")
