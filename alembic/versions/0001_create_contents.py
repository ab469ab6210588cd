"""create Contents table

Revision ID: 0001_create_contents
Revises:
Create Date: 2026-10-17 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_create_contents"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Contents",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("categoryName", sa.String(length=255), nullable=False),
        sa.Column("categoryKey", sa.String(length=1024), nullable=False),
        sa.Column("summarizeContent", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("slug", sa.String(length=300), nullable=False),
        sa.Column("createdAt", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updatedAt", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("categoryKey", name="uq_contents_category_key"),
    )
    op.create_index("ix_Contents_slug", "Contents", ["slug"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_Contents_slug", table_name="Contents")
    op.drop_table("Contents")
