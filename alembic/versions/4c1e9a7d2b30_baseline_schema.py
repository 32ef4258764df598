"""baseline_schema

Revision ID: 4c1e9a7d2b30
Revises: 
Create Date: 2026-10-19 10:12:41.508213

Production-safe migration: only creates tables that don't exist yet.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '4c1e9a7d2b30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

USER_ROLE = sa.Enum('ADMIN', 'USER', name='userrole')
JOB_ROLE = sa.Enum(
    'FRONTEND_DEVELOPER', 'BACKEND_DEVELOPER', 'DATA_SCIENTIST', 'PRODUCT_MANAGER', 'UX_DESIGNER',
    name='jobrole',
)
EXPERIENCE_LEVEL = sa.Enum('ENTRY', 'MID', 'SENIOR', name='experiencelevel')


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    if not table_exists('users'):
        op.create_table('users',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('name', sa.String(), nullable=True),
            sa.Column('email', sa.String(), nullable=False),
            sa.Column('password_hash', sa.String(), nullable=True),
            sa.Column('email_verified', sa.DateTime(timezone=True), nullable=True),
            sa.Column('is_oauth', sa.Boolean(), nullable=False),
            sa.Column('role', USER_ROLE, nullable=False),
            sa.Column('job_role', JOB_ROLE, nullable=True),
            sa.Column('resume_url', sa.String(), nullable=True),
            sa.Column('extracted_text', sa.Text(), nullable=True),
            sa.Column('skills', sa.JSON(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    if not table_exists('resume_jobs'):
        op.create_table('resume_jobs',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('user_id', sa.String(length=36), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('skills', sa.JSON(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_resume_jobs_user_id'), 'resume_jobs', ['user_id'], unique=False)

    if not table_exists('interviewers'):
        op.create_table('interviewers',
            sa.Column('id', sa.String(length=64), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('agent_id', sa.String(), nullable=True),
            sa.Column('image', sa.String(), nullable=True),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('audio', sa.String(), nullable=True),
            sa.Column('specialties', sa.JSON(), nullable=False),
            sa.Column('rapport', sa.Integer(), nullable=True),
            sa.Column('exploration', sa.Integer(), nullable=True),
            sa.Column('empathy', sa.Integer(), nullable=True),
            sa.Column('speed', sa.Integer(), nullable=True),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_interviewers_name'), 'interviewers', ['name'], unique=False)
        op.create_index(op.f('ix_interviewers_is_active'), 'interviewers', ['is_active'], unique=False)

    if not table_exists('popular_interviews'):
        op.create_table('popular_interviews',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('difficulty', sa.String(), nullable=True),
            sa.Column('duration', sa.Integer(), nullable=True),
            sa.Column('category', sa.String(), nullable=False),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_popular_category_title', 'popular_interviews', ['category', 'title'], unique=False)
        op.create_index(op.f('ix_popular_interviews_is_active'), 'popular_interviews', ['is_active'], unique=False)

    if not table_exists('behavioral_interviews'):
        op.create_table('behavioral_interviews',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('category', sa.String(), nullable=False),
            sa.Column('company', sa.String(), nullable=True),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_behavioral_category_company_title', 'behavioral_interviews', ['category', 'company', 'title'], unique=False)
        op.create_index(op.f('ix_behavioral_interviews_is_active'), 'behavioral_interviews', ['is_active'], unique=False)

    if not table_exists('questions'):
        op.create_table('questions',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('role', JOB_ROLE, nullable=False),
            sa.Column('question', sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_questions_role'), 'questions', ['role'], unique=False)

    if not table_exists('popular_interview_sessions'):
        op.create_table('popular_interview_sessions',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('user_id', sa.String(length=36), nullable=False),
            sa.Column('popular_interview_id', sa.String(length=36), nullable=False),
            sa.Column('interviewer_id', sa.String(length=64), nullable=True),
            sa.Column('question_count', sa.Integer(), nullable=False),
            sa.Column('duration', sa.Integer(), nullable=False),
            sa.Column('start_time', sa.DateTime(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.ForeignKeyConstraint(['popular_interview_id'], ['popular_interviews.id'], ),
            sa.ForeignKeyConstraint(['interviewer_id'], ['interviewers.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_popular_session_user_interview', 'popular_interview_sessions', ['user_id', 'popular_interview_id'], unique=False)
        op.create_index(op.f('ix_popular_interview_sessions_user_id'), 'popular_interview_sessions', ['user_id'], unique=False)
        op.create_index(op.f('ix_popular_interview_sessions_popular_interview_id'), 'popular_interview_sessions', ['popular_interview_id'], unique=False)

    if not table_exists('interview_responses'):
        op.create_table('interview_responses',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('session_id', sa.String(length=36), nullable=False),
            sa.Column('question_text', sa.Text(), nullable=False),
            sa.Column('user_response', sa.Text(), nullable=True),
            sa.Column('ai_response', sa.Text(), nullable=True),
            sa.Column('response_time', sa.Integer(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.ForeignKeyConstraint(['session_id'], ['popular_interview_sessions.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_interview_responses_session_id'), 'interview_responses', ['session_id'], unique=False)

    if not table_exists('behavioral_interview_sessions'):
        op.create_table('behavioral_interview_sessions',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('user_id', sa.String(length=36), nullable=False),
            sa.Column('behavioral_interview_id', sa.String(length=36), nullable=False),
            sa.Column('interviewer_id', sa.String(length=64), nullable=True),
            sa.Column('question_count', sa.Integer(), nullable=False),
            sa.Column('duration', sa.Integer(), nullable=False),
            sa.Column('experience_level', EXPERIENCE_LEVEL, nullable=False),
            sa.Column('target_role', sa.String(), nullable=False),
            sa.Column('questions', sa.JSON(), nullable=False),
            sa.Column('start_time', sa.DateTime(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.ForeignKeyConstraint(['behavioral_interview_id'], ['behavioral_interviews.id'], ),
            sa.ForeignKeyConstraint(['interviewer_id'], ['interviewers.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_behavioral_session_user_interview', 'behavioral_interview_sessions', ['user_id', 'behavioral_interview_id'], unique=False)
        op.create_index(op.f('ix_behavioral_interview_sessions_user_id'), 'behavioral_interview_sessions', ['user_id'], unique=False)
        op.create_index(op.f('ix_behavioral_interview_sessions_behavioral_interview_id'), 'behavioral_interview_sessions', ['behavioral_interview_id'], unique=False)


def downgrade() -> None:
    for table in (
        'interview_responses',
        'behavioral_interview_sessions',
        'popular_interview_sessions',
        'questions',
        'behavioral_interviews',
        'popular_interviews',
        'interviewers',
        'resume_jobs',
        'users',
    ):
        if table_exists(table):
            op.drop_table(table)
