"""create commands table

Revision ID: 001
Revises: 
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'Commands',
        sa.Column('Id', sa.Integer(), nullable=False, autoincrement=True),
        sa.Column('HowTo', sa.String(length=250), nullable=False),
        sa.Column('Line', sa.Text(), nullable=False),
        sa.Column('Platform', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('Id')
    )


def downgrade() -> None:
    op.drop_table('Commands')
