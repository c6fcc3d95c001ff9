"""create teams, players, games and rosters tables

Revision ID: 3f9a1c2d7e10
Revises:
Create Date: 2026-10-17 10:12:04.118231

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2d7e10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'teams',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_index(op.f('ix_teams_id'), 'teams', ['id'], unique=False)

    op.create_table(
        'players',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=False),
        sa.Column('display_name', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('position_preferences', sa.JSON(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_players_id'), 'players', ['id'], unique=False)
    op.create_index(op.f('ix_players_team_id'), 'players', ['team_id'], unique=False)

    op.create_table(
        'games',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=False),
        sa.Column('opponent', sa.String(), nullable=True),
        sa.Column('date', sa.String(), nullable=False),
        sa.Column('round', sa.String(), nullable=True),
        sa.Column(
            'status',
            sa.Enum('UPCOMING', 'IN_PROGRESS', 'COMPLETED', 'FORFEIT_WIN', 'FORFEIT_LOSS', name='gamestatus'),
            nullable=False
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_games_id'), 'games', ['id'], unique=False)
    op.create_index(op.f('ix_games_team_id'), 'games', ['team_id'], unique=False)

    op.create_table(
        'rosters',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('game_id', sa.Integer(), nullable=False),
        sa.Column('quarter', sa.Integer(), nullable=False),
        sa.Column('position', sa.String(length=2), nullable=False),
        sa.Column('player_id', sa.Integer(), nullable=False),
        sa.CheckConstraint('quarter BETWEEN 1 AND 4', name='roster_quarter_range'),
        sa.ForeignKeyConstraint(['game_id'], ['games.id'], ),
        sa.ForeignKeyConstraint(['player_id'], ['players.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('game_id', 'quarter', 'position', name='unique_game_quarter_position'),
        sa.UniqueConstraint('game_id', 'quarter', 'player_id', name='unique_game_quarter_player')
    )
    op.create_index(op.f('ix_rosters_id'), 'rosters', ['id'], unique=False)
    op.create_index(op.f('ix_rosters_game_id'), 'rosters', ['game_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_rosters_game_id'), table_name='rosters')
    op.drop_index(op.f('ix_rosters_id'), table_name='rosters')
    op.drop_table('rosters')
    op.drop_index(op.f('ix_games_team_id'), table_name='games')
    op.drop_index(op.f('ix_games_id'), table_name='games')
    op.drop_table('games')
    sa.Enum(name='gamestatus').drop(op.get_bind(), checkfirst=True)
    op.drop_index(op.f('ix_players_team_id'), table_name='players')
    op.drop_index(op.f('ix_players_id'), table_name='players')
    op.drop_table('players')
    op.drop_index(op.f('ix_teams_id'), table_name='teams')
    op.drop_table('teams')
