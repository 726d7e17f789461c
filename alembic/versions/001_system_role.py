"""System role table.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "system_role",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "permissions",
            sa.ARRAY(sa.String(255)),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "is_deleted",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
        ),
        sa.Column("created_by", sa.String(255), nullable=False),
        sa.Column("updated_by", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
    )
    # unique index backs the duplicate-name conflict
    op.create_index("ix_system_role_name", "system_role", ["name"], unique=True)
    op.create_index("ix_system_role_created_at", "system_role", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_system_role_created_at", table_name="system_role")
    op.drop_index("ix_system_role_name", table_name="system_role")
    op.drop_table("system_role")
