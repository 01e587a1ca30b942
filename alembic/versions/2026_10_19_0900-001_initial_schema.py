"""Initial schema: profiles, templates, plans, training sessions

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PROFILE_ROLE = sa.Enum('client', 'trainer', 'nutritionist', name='profile_role')
SCHEDULE_TYPE = sa.Enum('weekly', 'monthly', 'custom', name='schedule_type')
PLAN_STATUS = sa.Enum('draft', 'active', 'completed', 'cancelled', name='plan_status')
SESSION_STATUS = sa.Enum('scheduled', 'completed', 'no_show', 'cancelled', name='session_status')


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
    ]


def upgrade() -> None:
    """Create all tables."""
    op.create_table('profiles', sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('role', PROFILE_ROLE, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_profiles_email'), 'profiles', ['email'], unique=True)

    op.create_table('workout_templates', sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('estimated_duration_minutes', sa.Integer(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default='false'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['created_by'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('template_exercises', sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('template_id', sa.Uuid(), nullable=False),
        sa.Column('exercise_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('section_title', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('sets_config', sa.JSON(), nullable=True),
        sa.ForeignKeyConstraint(['template_id'], ['workout_templates.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_template_exercises_template_id'), 'template_exercises', ['template_id'])

    op.create_table('workout_plans', sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('client_id', sa.Uuid(), nullable=False),
        sa.Column('trainer_id', sa.Uuid(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('schedule_type', SCHEDULE_TYPE, nullable=False),
        sa.Column('status', PLAN_STATUS, nullable=False),
        sa.Column('schedule_data', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['client_id'], ['profiles.id']),
        sa.ForeignKeyConstraint(['trainer_id'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_plans_client_id'), 'workout_plans', ['client_id'])
    op.create_index(op.f('ix_workout_plans_status'), 'workout_plans', ['status'])

    op.create_table('training_sessions', sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('client_id', sa.Uuid(), nullable=False),
        sa.Column('trainer_id', sa.Uuid(), nullable=False),
        sa.Column('template_id', sa.Uuid(), nullable=True),
        sa.Column('plan_id', sa.Uuid(), nullable=True),
        sa.Column('scheduled_date', sa.Date(), nullable=False),
        sa.Column('scheduled_time', sqlmodel.sql.sqltypes.AutoString(length=8), nullable=True),
        sa.Column('status', SESSION_STATUS, nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('session_type', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('location', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('trainer_notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('session_rating', sa.Integer(), nullable=True),
        sa.Column('completion_data', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['client_id'], ['profiles.id']),
        sa.ForeignKeyConstraint(['trainer_id'], ['profiles.id']),
        sa.ForeignKeyConstraint(['template_id'], ['workout_templates.id']),
        sa.ForeignKeyConstraint(['plan_id'], ['workout_plans.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_training_sessions_client_id'), 'training_sessions', ['client_id'])
    op.create_index(op.f('ix_training_sessions_trainer_id'), 'training_sessions', ['trainer_id'])
    op.create_index(op.f('ix_training_sessions_scheduled_date'), 'training_sessions', ['scheduled_date'])
    op.create_index(op.f('ix_training_sessions_status'), 'training_sessions', ['status'])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('training_sessions')
    op.drop_table('workout_plans')
    op.drop_table('template_exercises')
    op.drop_table('workout_templates')
    op.drop_index(op.f('ix_profiles_email'), table_name='profiles')
    op.drop_table('profiles')
    bind = op.get_bind()
    for enum_type in (SESSION_STATUS, PLAN_STATUS, SCHEDULE_TYPE, PROFILE_ROLE):
        enum_type.drop(bind, checkfirst=True)
