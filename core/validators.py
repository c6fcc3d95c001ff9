from sqlalchemy.orm import Session
from models.team import Team
from models.game import Game
from models.player import Player
from api.crud.team_crud import get_team
from api.crud.game_crud import get_game
from api.crud.player_crud import get_player
from core.exceptions import TeamNotFound, GameNotFound, PlayerNotFound, PlayerNotOnTeam


def validate_team_exists(db: Session, team_id: int) -> Team:
    """Validate team exists and return it"""
    team = get_team(db, team_id)
    if not team:
        raise TeamNotFound()
    return team


def validate_game_exists(db: Session, game_id: int) -> Game:
    """Validate game exists and return it"""
    game = get_game(db, game_id)
    if not game:
        raise GameNotFound()
    return game


def validate_player_exists(db: Session, player_id: int) -> Player:
    player = get_player(db, player_id)
    if not player:
        raise PlayerNotFound()
    return player


def validate_player_on_team(player: Player, team_id: int):
    if player.team_id != team_id:
        raise PlayerNotOnTeam(player.id)
