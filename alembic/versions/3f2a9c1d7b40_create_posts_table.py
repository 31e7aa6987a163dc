"""create_posts_table

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-19 10:12:41.518204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the Posts table.

    authorId holds the JWT subject of the creating user. It is indexed
    because every user-facing query filters on it.
    """
    op.create_table(
        'Posts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('authorId', sa.String(length=100), nullable=False),
        sa.Column('dateCreated', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_Posts_authorId'), 'Posts', ['authorId'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_Posts_authorId'), table_name='Posts')
    op.drop_table('Posts')
