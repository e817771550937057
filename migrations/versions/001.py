"""Create videogames table

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None

INDEXED = ['title', 'developer', 'publisher', 'genre', 'platform']


def upgrade():
    bind = op.get_bind()
    if 'videogames' in inspect(bind).get_table_names():
        return
    op.create_table(
        'videogames',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('developer', sa.String(length=255), nullable=True),
        sa.Column('publisher', sa.String(length=255), nullable=True),
        sa.Column('genre', sa.String(length=120), nullable=True),
        sa.Column('platform', sa.String(length=120), nullable=True),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('artwork_url', sa.String(length=512), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    for column in INDEXED:
        op.create_index(f'ix_videogames_{column}', 'videogames', [column], unique=False)


def downgrade():
    for column in INDEXED:
        op.drop_index(f'ix_videogames_{column}', table_name='videogames')
    op.drop_table('videogames')
