"""Initial schema: users and daily measurement logs

Revision ID: 001
Revises: 
Create Date: 2026-10-19

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
    # Users table
    op.create_table(
        'users',
        sa.Column('id', sa.String(255), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('height', sa.Float(), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('gender', sa.String(16), nullable=True),
        sa.Column('activity_level', sa.String(16), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # Measurement logs table
    op.create_table(
        'measurement_logs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id', onupdate='CASCADE'), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('bmi', sa.Float(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'date', name='uq_measurement_logs_user_date'),
    )
    op.create_index('ix_measurement_logs_user_id', 'measurement_logs', ['user_id'])
    op.create_index('ix_measurement_logs_date', 'measurement_logs', ['date'])


def downgrade() -> None:
    op.drop_index('ix_measurement_logs_date', table_name='measurement_logs')
    op.drop_index('ix_measurement_logs_user_id', table_name='measurement_logs')
    op.drop_table('measurement_logs')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
