"""create employees table

Revision ID: 3c9e2a7f41d0
Revises:
Create Date: 2026-10-18 10:12:44.318207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c9e2a7f41d0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("married", sa.Boolean(), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("salary", sa.Float(), nullable=True),
        sa.Column("years_in_company", sa.Integer(), nullable=True),
    )
    # lookup index only, emails may repeat
    op.create_index("ix_employees_email", "employees", ["email"], unique=False)


def downgrade():
    op.drop_index("ix_employees_email", table_name="employees")
    op.drop_table("employees")
