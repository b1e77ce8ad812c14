"""create tracker tables

Revision ID: 3f9a1c2e7b40
Revises:
Create Date: 2026-10-18 10:12:41.208334

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2e7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # 1. categories
    op.create_table(
        'categories',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('icon', sa.String(length=64), nullable=False),
        sa.Column('color', sa.String(length=16), nullable=False),
        sa.Column('weight', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # 2. tracks (soft delete via deleted_at)
    op.create_table(
        'tracks',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('category_id', sa.String(length=64), nullable=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('frequency', sa.String(length=20), nullable=True),
        sa.Column('day_of_week', sa.SmallInteger(), nullable=True),
        sa.Column('day_of_month', sa.SmallInteger(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_tracks_category_id', 'tracks', ['category_id'])

    # 3. logs ((track_id, date) deliberately not unique)
    op.create_table(
        'logs',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.Column('track_id', sa.String(length=64), nullable=False),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_logs_date', 'logs', ['date'])
    op.create_index('ix_logs_track_date', 'logs', ['track_id', 'date'])

    # 4. finance_records
    op.create_table(
        'finance_records',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('month', sa.String(length=7), nullable=False),
        sa.Column('income', sa.Numeric(precision=14, scale=2), nullable=False, server_default='0'),
        sa.Column('expense', sa.Numeric(precision=14, scale=2), nullable=False, server_default='0'),
        sa.Column('sip_started', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('learning_sessions', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('month')
    )

    # 5. records
    op.create_table(
        'records',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.Column('category_id', sa.String(length=64), nullable=True),
        sa.Column('tags', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_records_date', 'records', ['date'])
    op.create_index('ix_records_category_id', 'records', ['category_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_records_category_id', table_name='records')
    op.drop_index('ix_records_date', table_name='records')
    op.drop_table('records')
    op.drop_table('finance_records')
    op.drop_index('ix_logs_track_date', table_name='logs')
    op.drop_index('ix_logs_date', table_name='logs')
    op.drop_table('logs')
    op.drop_index('ix_tracks_category_id', table_name='tracks')
    op.drop_table('tracks')
    op.drop_table('categories')
