"""Initial schema: departments, employees, tasks

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-17
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'departments',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_departments_name', 'departments', ['name'], unique=True)

    op.create_table(
        'employees',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('role', sa.String(20), nullable=False, server_default='employee'),
        sa.Column(
            'department_id', sa.String(36),
            sa.ForeignKey('departments.id', ondelete='RESTRICT'), nullable=False
        ),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('address', sa.String(255), nullable=True),
        sa.Column('position', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_employees_name', 'employees', ['name'])
    op.create_index('ix_employees_email', 'employees', ['email'], unique=True)
    op.create_index('ix_employees_department_id', 'employees', ['department_id'])

    op.create_table(
        'tasks',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('due_date', sa.DateTime(), nullable=False),
        sa.Column(
            'department_id', sa.String(36),
            sa.ForeignKey('departments.id', ondelete='RESTRICT'), nullable=False
        ),
        sa.Column(
            'assigned_to_id', sa.String(36),
            sa.ForeignKey('employees.id', ondelete='CASCADE'), nullable=False
        ),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_tasks_department_id', 'tasks', ['department_id'])
    op.create_index('ix_tasks_assigned_to_id', 'tasks', ['assigned_to_id'])


def downgrade() -> None:
    op.drop_index('ix_tasks_assigned_to_id', table_name='tasks')
    op.drop_index('ix_tasks_department_id', table_name='tasks')
    op.drop_table('tasks')
    op.drop_index('ix_employees_department_id', table_name='employees')
    op.drop_index('ix_employees_email', table_name='employees')
    op.drop_index('ix_employees_name', table_name='employees')
    op.drop_table('employees')
    op.drop_index('ix_departments_name', table_name='departments')
    op.drop_table('departments')
