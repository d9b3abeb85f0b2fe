"""create customers

Revision ID: 3a7c5e91d2b4
Revises:
Create Date: 2026-10-17

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = "3a7c5e91d2b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    insp = inspect(bind)
    existing_tables = set(insp.get_table_names())

    # Tables created by scripts/init_db.py before migrations were in use are kept as-is.
    if "customers" not in existing_tables:
        op.create_table(
            "customers",
            sa.Column("seq", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
            sa.Column("id", sa.String(length=32), nullable=False),
            sa.Column("name", sa.Text(), nullable=False),
            sa.Column("email", sa.Text(), nullable=False),
            sa.Column("status", sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column(
                "created_at",
                sa.DateTime(timezone=False),
                nullable=False,
                server_default=sa.func.current_timestamp(),
            ),
            sa.UniqueConstraint("id", name="uq_customers_id"),
        )


def downgrade() -> None:
    op.drop_table("customers")
