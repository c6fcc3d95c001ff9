"""add player_availability table

Revision ID: 8b2e4d6f1a93
Revises: 3f9a1c2d7e10
Create Date: 2026-10-18 09:41:27.530912

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b2e4d6f1a93'
down_revision: Union[str, Sequence[str], None] = '3f9a1c2d7e10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'player_availability',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('game_id', sa.Integer(), nullable=False),
        sa.Column('player_id', sa.Integer(), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.ForeignKeyConstraint(['game_id'], ['games.id'], ),
        sa.ForeignKeyConstraint(['player_id'], ['players.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('game_id', 'player_id', name='unique_game_player_availability')
    )
    op.create_index(op.f('ix_player_availability_id'), 'player_availability', ['id'], unique=False)
    op.create_index(op.f('ix_player_availability_game_id'), 'player_availability', ['game_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_player_availability_game_id'), table_name='player_availability')
    op.drop_index(op.f('ix_player_availability_id'), table_name='player_availability')
    op.drop_table('player_availability')
