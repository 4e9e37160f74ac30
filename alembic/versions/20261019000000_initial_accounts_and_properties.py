"""Initial schema: users, property_templates, sample_properties.

Revision ID: 20261019000000
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "property_templates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("commodity_type", sa.String(length=64), nullable=False),
        sa.Column("property_name", sa.String(length=255), nullable=False),
        sa.Column("units", sa.String(length=64), nullable=True),
        sa.Column("property_category", sa.String(length=64), nullable=True),
        sa.Column("is_required", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("display_order", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_property_templates_commodity_type"),
        "property_templates",
        ["commodity_type"],
        unique=False,
    )

    op.create_table(
        "sample_properties",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("sample_id", sa.Integer(), nullable=False),
        sa.Column("property_name", sa.String(length=255), nullable=False),
        sa.Column("property_value", sa.JSON(none_as_null=True), nullable=True),
        sa.Column("units", sa.String(length=64), nullable=True),
        sa.Column("property_category", sa.String(length=64), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_sample_properties_sample_id"),
        "sample_properties",
        ["sample_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_sample_properties_property_category"),
        "sample_properties",
        ["property_category"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_sample_properties_property_category"), table_name="sample_properties")
    op.drop_index(op.f("ix_sample_properties_sample_id"), table_name="sample_properties")
    op.drop_table("sample_properties")
    op.drop_index(op.f("ix_property_templates_commodity_type"), table_name="property_templates")
    op.drop_table("property_templates")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
