"""Add admin_overrides table

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


def upgrade() -> None:
    """Create admin_overrides table."""
    op.create_table('admin_overrides', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('plan_date', sa.Date(), nullable=False),
        sa.Column('component', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('reason', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=False),
        sa.Column('overridden_by', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('original_value', sa.JSON(), nullable=True),
        sa.Column('new_value', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('deactivated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_admin_overrides_user_id'), 'admin_overrides', ['user_id'], unique=False)
    op.create_index(op.f('ix_admin_overrides_plan_date'), 'admin_overrides', ['plan_date'], unique=False)


def downgrade() -> None:
    """Drop admin_overrides table."""
    op.drop_index(op.f('ix_admin_overrides_plan_date'), table_name='admin_overrides')
    op.drop_index(op.f('ix_admin_overrides_user_id'), table_name='admin_overrides')
    op.drop_table('admin_overrides')
