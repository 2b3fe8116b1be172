"""create skill_listings

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "skill_listings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("subcategory", sa.String(length=50), nullable=True),
        sa.Column("proficiency_level", sa.String(length=20), nullable=False),
        sa.Column("skill_type", sa.String(length=20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.TIMESTAMP(), nullable=True),
    )
    op.create_index("ix_skill_listings_id", "skill_listings", ["id"])
    op.create_index("ix_skill_listings_user_id", "skill_listings", ["user_id"])
    op.create_index("ix_skill_listings_title", "skill_listings", ["title"])
    op.create_index("ix_skill_listings_category", "skill_listings", ["category"])


def downgrade() -> None:
    op.drop_index("ix_skill_listings_category", table_name="skill_listings")
    op.drop_index("ix_skill_listings_title", table_name="skill_listings")
    op.drop_index("ix_skill_listings_user_id", table_name="skill_listings")
    op.drop_index("ix_skill_listings_id", table_name="skill_listings")
    op.drop_table("skill_listings")
