"""create users, weight_entries and weight_goals tables

Revision ID: 5e1c0a7f3d21
Revises:
Create Date: 2025-12-02 09:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5e1c0a7f3d21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if 'users' not in tables:
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('username', sa.String(length=64), nullable=False),
            sa.Column('name', sa.String(), nullable=True),
            sa.Column('hashed_password', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        )
        op.create_index('ix_users_id', 'users', ['id'])
        op.create_index('ix_users_username', 'users', ['username'], unique=True)

    if 'weight_entries' not in tables:
        op.create_table(
            'weight_entries',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('weight', sa.Float(), nullable=False),
            sa.Column('notes', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        )
        op.create_index('ix_weight_entries_id', 'weight_entries', ['id'])
        op.create_index('ix_weight_entries_user_id', 'weight_entries', ['user_id'])
        op.create_index('ix_weight_entries_date', 'weight_entries', ['date'])

    if 'weight_goals' not in tables:
        op.create_table(
            'weight_goals',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('target_weight', sa.Float(), nullable=False),
            sa.Column('target_date', sa.Date(), nullable=True),
            sa.Column('initial_weight', sa.Float(), nullable=True),
            sa.Column('daily_goal', sa.Float(), nullable=True),
            sa.Column('weekly_goal', sa.Float(), nullable=True),
            sa.Column('monthly_goal', sa.Float(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        )
        op.create_index('ix_weight_goals_id', 'weight_goals', ['id'])
        op.create_index('ix_weight_goals_user_id', 'weight_goals', ['user_id'], unique=True)


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS weight_goals')
    op.execute('DROP TABLE IF EXISTS weight_entries')
    op.execute('DROP TABLE IF EXISTS users')
