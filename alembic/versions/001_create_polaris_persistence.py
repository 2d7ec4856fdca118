"""Create polaris_persistence table

Revision ID: 001_create_polaris_persistence
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001_create_polaris_persistence'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'polaris_persistence',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('strategy_id', sa.String(64), nullable=False),
        sa.Column('question', sa.Text(), nullable=True),
        sa.Column('reflection', sa.Text(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    # Conflict target for the per-field upsert
    op.create_index('ix_polaris_persistence_strategy_id', 'polaris_persistence', ['strategy_id'], unique=True)
    op.create_index('ix_polaris_persistence_id', 'polaris_persistence', ['id'])


def downgrade() -> None:
    op.drop_index('ix_polaris_persistence_id', table_name='polaris_persistence')
    op.drop_index('ix_polaris_persistence_strategy_id', table_name='polaris_persistence')
    op.drop_table('polaris_persistence')
