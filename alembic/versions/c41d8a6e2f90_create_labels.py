"""create labels and todo_labels

Revision ID: c41d8a6e2f90
Revises: 5b2e9f0c3a17
Create Date: 2023-01-31 22:24:26.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c41d8a6e2f90'
down_revision: Union[str, None] = '5b2e9f0c3a17'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'labels',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
    )

    # Both checks wait until commit, otherwise a todo and its labels could not
    # be inserted in the same transaction (the todo id does not exist yet).
    op.create_table(
        'todo_labels',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('todo_id', sa.Integer(), nullable=False),
        sa.Column('label_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['todo_id'], ['todos.id'], deferrable=True, initially='DEFERRED'),
        sa.ForeignKeyConstraint(['label_id'], ['labels.id'], deferrable=True, initially='DEFERRED'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('todo_labels')
    op.drop_table('labels')
