"""initial_schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'admin_users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(length=100), nullable=False),
        sa.Column('role', sa.Enum('ADMIN', 'VIEWER', name='userrole'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('last_login_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_admin_users_id', 'admin_users', ['id'])
    op.create_index('ix_admin_users_username', 'admin_users', ['username'], unique=True)
    op.create_index('ix_admin_users_email', 'admin_users', ['email'], unique=True)

    op.create_table(
        'survey_responses',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('department', sa.String(length=100), nullable=False),
        sa.Column('awareness', sa.Text(), nullable=False),
        sa.Column('urgent_trainings', sa.Text(), nullable=False),
        sa.Column('urgent_trainings_other', sa.Text(), nullable=True),
        sa.Column('finance_wellness_needs', sa.Text(), nullable=False),
        sa.Column('culture_wellness_needs', sa.Text(), nullable=False),
        sa.Column('culture_wellness_other', sa.Text(), nullable=True),
        sa.Column('digital_skills_needs', sa.Text(), nullable=False),
        sa.Column('digital_skills_other', sa.Text(), nullable=True),
        sa.Column('professional_dev_needs', sa.Text(), nullable=False),
        sa.Column('professional_dev_other', sa.Text(), nullable=True),
        sa.Column('confidence_level', sa.String(length=50), nullable=False),
        sa.Column('faced_unsure_situation', sa.Boolean(), nullable=False),
        sa.Column('unsure_situation_description', sa.Text(), nullable=True),
        sa.Column('observed_issues', sa.Text(), nullable=False),
        sa.Column('observed_issues_other', sa.Text(), nullable=True),
        sa.Column('knew_reporting_channel', sa.String(length=20), nullable=False),
        sa.Column('training_method', sa.String(length=100), nullable=False),
        sa.Column('training_method_other', sa.Text(), nullable=True),
        sa.Column('refresher_frequency', sa.String(length=50), nullable=False),
        sa.Column('prioritized_policies', sa.Text(), nullable=False),
        sa.Column('prioritization_reason', sa.Text(), nullable=True),
        sa.Column('policy_challenges', sa.Text(), nullable=False),
        sa.Column('policy_challenges_other', sa.Text(), nullable=True),
        sa.Column('compliance_suggestions', sa.Text(), nullable=True),
        sa.Column('general_comments', sa.Text(), nullable=True),
        sa.Column('survey_period', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_survey_responses_department', 'survey_responses', ['department'])
    op.create_index('ix_survey_responses_survey_period', 'survey_responses', ['survey_period'])
    op.create_index('ix_survey_responses_period_created', 'survey_responses', ['survey_period', 'created_at'])

    op.create_table(
        'survey_configs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('survey_period', sa.String(length=64), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('expected_responses', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_survey_configs_id', 'survey_configs', ['id'])
    op.create_index('ix_survey_configs_survey_period', 'survey_configs', ['survey_period'])

    op.create_table(
        'department_counts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('department', sa.String(length=100), nullable=False),
        sa.Column('staff_count', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint('staff_count >= 0', name='check_staff_count_non_negative'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_department_counts_id', 'department_counts', ['id'])
    op.create_index('ix_department_counts_department', 'department_counts', ['department'])
    op.create_index('ix_department_counts_is_active', 'department_counts', ['is_active'])


def downgrade() -> None:
    op.drop_table('department_counts')
    op.drop_table('survey_configs')
    op.drop_table('survey_responses')
    op.drop_table('admin_users')
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
