from typing import List, Sequence
from sqlalchemy.orm import Session

from models.game import Game
from models.player import Player as PlayerModel
from core import exceptions
from core.logging import logger
from core.validators import validate_player_exists, validate_player_on_team
from api.crud import availability_crud
from api.crud.player_crud import get_active_players, get_players_by_ids, get_team_players


def get_game_availability(db: Session, game: Game) -> dict:
    """
    Availability of every team player for a game.

    Until availability is saved for the game, active players count as
    available and inactive ones do not.
    """
    players = get_team_players(db, game.team_id)
    available_ids = availability_crud.get_available_player_ids(db, game.id)
    is_set = available_ids is not None
    if not is_set:
        available_ids = {p.id for p in players if p.active}

    return {
        "game_id": game.id,
        "is_set": is_set,
        "available_player_ids": [p.id for p in players if p.id in available_ids],
        "players": [
            {"player_id": p.id, "display_name": p.display_name, "is_available": p.id in available_ids}
            for p in players
        ],
    }


def set_game_availability(db: Session, game: Game, available_player_ids: Sequence[int]) -> dict:
    """Replace a game's availability: listed players can play, every other team player cannot"""
    found = {p.id: p for p in get_players_by_ids(db, set(available_player_ids))}
    for player_id in available_player_ids:
        player = found.get(player_id)
        if player is None:
            raise exceptions.PlayerNotFound()
        validate_player_on_team(player, game.team_id)

    team_player_ids = [p.id for p in get_team_players(db, game.team_id)]
    availability_crud.replace_game_availability(db, game.id, team_player_ids, set(available_player_ids))
    logger.info(
        f"Availability for game {game.id}: {len(available_player_ids)} of {len(team_player_ids)} players available"
    )
    return get_game_availability(db, game)


def set_player_availability(db: Session, game: Game, player_id: int, is_available: bool) -> dict:
    """Change one player's availability, keeping everyone else's current state"""
    player = validate_player_exists(db, player_id)
    validate_player_on_team(player, game.team_id)

    if availability_crud.get_available_player_ids(db, game.id) is None:
        # First edit for this game: start from the active squad
        team_players = get_team_players(db, game.team_id)
        availability_crud.replace_game_availability(
            db, game.id, [p.id for p in team_players], {p.id for p in team_players if p.active}
        )

    availability_crud.set_player_availability(db, game.id, player_id, is_available)
    logger.info(f"Player {player_id} marked {'available' if is_available else 'unavailable'} for game {game.id}")
    return get_game_availability(db, game)


def clear_game_availability(db: Session, game: Game) -> int:
    removed = availability_crud.clear_game_availability(db, game.id)
    logger.info(f"Cleared availability for game {game.id} ({removed} rows)")
    return removed


def available_players_for_game(db: Session, game: Game) -> List[PlayerModel]:
    """Active players who can make the game"""
    players = get_active_players(db, game.team_id)
    available_ids = availability_crud.get_available_player_ids(db, game.id)
    if available_ids is None:
        return players
    return [p for p in players if p.id in available_ids]
