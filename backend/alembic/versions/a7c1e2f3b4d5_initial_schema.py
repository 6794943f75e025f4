"""Initial schema.

Revision ID: a7c1e2f3b4d5
Revises:
Create Date: 2026-10-12 09:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "a7c1e2f3b4d5"
down_revision = None
branch_labels = None
depends_on = None


def _id():
    return sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True)


def _created_at():
    return sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now())


def _updated_at():
    return sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now())


def upgrade():
    """Create every table of the catalog, content and workflow schema."""
    op.create_table(
        "users",
        _id(),
        sa.Column("open_id", sa.String(64), nullable=False, unique=True),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("login_method", sa.String(64), nullable=True),
        sa.Column("role", sa.String(16), nullable=False, server_default="user"),
        sa.Column("affiliation", sa.Text(), nullable=True),
        sa.Column("research_interests", sa.Text(), nullable=True),
        sa.Column(
            "last_signed_in", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "elites",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("date_of_birth", sa.String(50), nullable=True),
        sa.Column("education", sa.Text(), nullable=True),
        sa.Column("career_path", sa.Text(), nullable=True),
        sa.Column("current_positions", sa.JSON(), nullable=True),
        sa.Column("past_positions", sa.JSON(), nullable=True),
        sa.Column("political_orientation", sa.String(100), nullable=True),
        sa.Column("sphere_of_influence", sa.String(255), nullable=True),
        sa.Column("net_worth", sa.Numeric(15, 2), nullable=True),
        sa.Column("biography", sa.Text(), nullable=True),
        sa.Column("public_statements", sa.Text(), nullable=True),
        sa.Column("foreign_policy_positions", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(500), nullable=True),
        _created_at(),
        _updated_at(),
    )
    op.create_index("ix_elites_name", "elites", ["name"])

    op.create_table(
        "organizations",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("founded", sa.String(50), nullable=True),
        sa.Column("headquarters", sa.String(255), nullable=True),
        sa.Column("market_cap", sa.Numeric(15, 2), nullable=True),
        sa.Column("revenue", sa.Numeric(15, 2), nullable=True),
        sa.Column("employees", sa.Integer(), nullable=True),
        sa.Column("lobbying_spending", sa.Numeric(15, 2), nullable=True),
        sa.Column("political_donations", sa.Numeric(15, 2), nullable=True),
        sa.Column("foreign_policy_positions", sa.Text(), nullable=True),
        sa.Column("logo_url", sa.String(500), nullable=True),
        _created_at(),
        _updated_at(),
    )
    op.create_index("ix_organizations_name", "organizations", ["name"])

    op.create_table(
        "political_decisions",
        _id(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date_enacted", sa.DateTime(), nullable=True),
        sa.Column("administration", sa.String(100), nullable=True),
        sa.Column("key_players", sa.JSON(), nullable=True),
        sa.Column("lobbying_influence", sa.Text(), nullable=True),
        sa.Column("impact", sa.Text(), nullable=True),
        sa.Column("document_url", sa.String(500), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "elite_connections",
        _id(),
        sa.Column("elite_id_1", sa.Integer(), nullable=False),
        sa.Column("elite_id_2", sa.Integer(), nullable=False),
        sa.Column("connection_type", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("strength", sa.Integer(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["elite_id_1"], ["elites.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["elite_id_2"], ["elites.id"], ondelete="CASCADE"),
    )
    # Lookups hit either endpoint
    op.create_index("ix_elite_connections_elite_id_1", "elite_connections", ["elite_id_1"])
    op.create_index("ix_elite_connections_elite_id_2", "elite_connections", ["elite_id_2"])

    op.create_table(
        "elite_organizations",
        _id(),
        sa.Column("elite_id", sa.Integer(), nullable=False),
        sa.Column("organization_id", sa.Integer(), nullable=False),
        sa.Column("role", sa.String(255), nullable=True),
        sa.Column("start_date", sa.String(50), nullable=True),
        sa.Column("end_date", sa.String(50), nullable=True),
        sa.Column("is_current", sa.String(3), nullable=False, server_default="yes"),
        _created_at(),
        sa.ForeignKeyConstraint(["elite_id"], ["elites.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["organization_id"], ["organizations.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_elite_organizations_elite_id", "elite_organizations", ["elite_id"])
    op.create_index(
        "ix_elite_organizations_organization_id", "elite_organizations", ["organization_id"]
    )

    op.create_table(
        "reports",
        _id(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("access_level", sa.String(16), nullable=False, server_default="public"),
        sa.Column("publish_date", sa.DateTime(), nullable=False),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("pdf_url", sa.String(500), nullable=True),
        _created_at(),
        _updated_at(),
    )
    op.create_index("ix_reports_access_level", "reports", ["access_level"])

    op.create_table(
        "educational_resources",
        _id(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("resource_type", sa.String(100), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("access_level", sa.String(16), nullable=False, server_default="public"),
        sa.Column("file_url", sa.String(500), nullable=True),
        _created_at(),
        _updated_at(),
    )
    op.create_index(
        "ix_educational_resources_access_level", "educational_resources", ["access_level"]
    )

    op.create_table(
        "posts",
        _id(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("slug", sa.String(500), nullable=False, unique=True),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("publish_date", sa.DateTime(), nullable=False),
        sa.Column("image_url", sa.String(500), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "events",
        _id(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("event_type", sa.String(100), nullable=True),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("registration_url", sa.String(500), nullable=True),
        sa.Column("recording_url", sa.String(500), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="upcoming"),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "publications",
        _id(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("authors", sa.Text(), nullable=True),
        sa.Column("publication_type", sa.String(100), nullable=True),
        sa.Column("publication_date", sa.DateTime(), nullable=True),
        sa.Column("journal", sa.String(255), nullable=True),
        sa.Column("abstract", sa.Text(), nullable=True),
        sa.Column("url", sa.String(500), nullable=True),
        sa.Column("pdf_url", sa.String(500), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "newsletter_subscriptions",
        _id(),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column(
            "subscribed_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("is_active", sa.String(3), nullable=False, server_default="yes"),
        _created_at(),
    )

    op.create_table(
        "expert_access_requests",
        _id(),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("affiliation", sa.Text(), nullable=True),
        sa.Column("research_interests", sa.Text(), nullable=True),
        sa.Column("justification", sa.Text(), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="pending"),
        sa.Column("reviewed_at", sa.DateTime(), nullable=True),
        sa.Column("reviewed_by", sa.Integer(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["reviewed_by"], ["users.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_expert_access_requests_status", "expert_access_requests", ["status"])


def downgrade():
    """Drop every table created by upgrade()."""
    op.drop_table("expert_access_requests")
    op.drop_table("newsletter_subscriptions")
    op.drop_table("publications")
    op.drop_table("events")
    op.drop_table("posts")
    op.drop_table("educational_resources")
    op.drop_table("reports")
    op.drop_table("elite_organizations")
    op.drop_table("elite_connections")
    op.drop_table("political_decisions")
    op.drop_table("organizations")
    op.drop_table("elites")
    op.drop_table("users")
