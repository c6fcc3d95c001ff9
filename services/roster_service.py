from collections import defaultdict
from typing import Dict, List, Optional, Sequence
from sqlalchemy.orm import Session

from models.game import Game
from models.player import Player as PlayerModel
from core import exceptions
from core.logging import logger
from core.validators import validate_player_on_team
from api.crud.player_crud import get_players_by_ids
from api.crud import availability_crud
from api.crud import roster_crud
from services.availability_service import available_players_for_game
from services import roster_engine
from services.roster_engine import (
    POSITIONS, QUARTERS, TOTAL_SLOTS, AutoFillResult, Position, SlotAssignment,
    find_double_bookings
)
from schemas.roster import RosterEntryInput


def to_engine_player(player: PlayerModel) -> roster_engine.Player:
    """Convert a stored player into the engine's record, skipping unknown position codes"""
    preferences = []
    for code in player.position_preferences or []:
        try:
            position = Position(code)
        except ValueError:
            logger.warning(f"Ignoring unknown position '{code}' in preferences of player {player.id}")
            continue
        if position not in preferences:
            preferences.append(position)

    return roster_engine.Player(
        id=player.id,
        display_name=player.display_name,
        position_preferences=tuple(preferences),
        active=bool(player.active),
    )


def auto_fill_game_roster(db: Session, game: Game) -> AutoFillResult:
    """
    Run auto-fill for a game and replace its stored roster with the result.

    Only active players available for the game take part. NoPlayersAvailable
    leaves the existing roster untouched.
    """
    players = [to_engine_player(p) for p in available_players_for_game(db, game)]

    try:
        result = roster_engine.auto_fill(players)
    except roster_engine.NoPlayersAvailable:
        logger.info(f"Auto-fill for game {game.id} skipped: no active players available")
        raise exceptions.NoPlayersAvailable()

    removed = roster_crud.replace_game_rosters(db, game.id, result.entries())
    logger.info(
        f"Auto-fill for game {game.id}: replaced {removed} entries with {len(result.assignments)}, "
        f"{len(result.unfilled_slots)} slots unfilled, target {result.min_quarters} quarters"
    )
    return result


def validate_roster_entries(db: Session, game: Game, entries: Sequence[RosterEntryInput]):
    """
    Every player belongs to the game's team, can make the game, and plays
    at most one position per quarter.
    """
    players = {p.id: p for p in get_players_by_ids(db, {e.player_id for e in entries})}
    available_ids = availability_crud.get_available_player_ids(db, game.id)

    for entry in entries:
        player = players.get(entry.player_id)
        if player is None:
            raise exceptions.PlayerNotFound()
        validate_player_on_team(player, game.team_id)
        if available_ids is not None and player.id not in available_ids:
            raise exceptions.PlayerNotAvailable(player.id)

    slots = [
        SlotAssignment(quarter=e.quarter, position=Position(e.position), player_id=e.player_id)
        for e in entries
    ]
    double_bookings = find_double_bookings(slots)
    if double_bookings:
        quarter, player_id = double_bookings[0]
        first = next(s for s in slots if (s.quarter, s.player_id) == (quarter, player_id))
        raise exceptions.PlayerAlreadyInQuarter(player_id, quarter, first.position.value)


def save_game_roster(db: Session, game: Game, entries: Sequence[RosterEntryInput]) -> int:
    """Replace a game's roster with a manually built one"""
    validate_roster_entries(db, game, entries)

    slots = [
        SlotAssignment(quarter=e.quarter, position=Position(e.position), player_id=e.player_id)
        for e in entries
    ]
    removed = roster_crud.replace_game_rosters(db, game.id, slots)
    logger.info(f"Saved roster for game {game.id}: replaced {removed} entries with {len(slots)}")
    return len(slots)


def assign_slot(db: Session, game: Game, quarter: int, position: Position, player_id: int):
    """
    Put a player in one slot.

    A player may hold only one position per quarter; assigning them to a
    second slot of the same quarter is rejected.
    """
    validate_roster_entries(
        db, game, [RosterEntryInput(quarter=quarter, position=position, player_id=player_id)]
    )

    existing = roster_crud.get_player_slot_in_quarter(db, game.id, quarter, player_id)
    if existing and existing.position != Position(position).value:
        logger.info(
            f"Rejected slot edit for game {game.id}: player {player_id} already at "
            f"{existing.position} in quarter {quarter}"
        )
        raise exceptions.PlayerAlreadyInQuarter(player_id, quarter, existing.position)

    return roster_crud.set_slot(db, game.id, quarter, position, player_id)


def clear_slot(db: Session, game: Game, quarter: int, position: Position):
    if not roster_crud.delete_slot(db, game.id, quarter, position):
        raise exceptions.RosterEntryNotFound(quarter, Position(position).value)


def copy_quarter(db: Session, game: Game, source_quarter: int, target_quarter: int) -> int:
    """Make the target quarter a copy of the source quarter, empty source slots clear the target"""
    if source_quarter == target_quarter:
        raise exceptions.InvalidQuarterCopy()
    if source_quarter not in QUARTERS or target_quarter not in QUARTERS:
        raise exceptions.InvalidQuarterCopy("quarter must be between 1 and 4")

    source_entries = [
        SlotAssignment(quarter=target_quarter, position=Position(e.position), player_id=e.player_id)
        for e in roster_crud.get_game_rosters(db, game.id)
        if e.quarter == source_quarter
    ]
    roster_crud.replace_quarter_rosters(db, game.id, target_quarter, source_entries)
    logger.info(f"Copied quarter {source_quarter} to {target_quarter} for game {game.id}")
    return len(source_entries)


def build_roster_summary(db: Session, game: Game) -> dict:
    """Grid, fill status and playing time for a game's stored roster"""
    entries = roster_crud.get_game_rosters(db, game.id)

    grid: Dict[int, Dict[Position, Optional[int]]] = {
        quarter: {position: None for position in POSITIONS} for quarter in QUARTERS
    }
    quarters_by_player: Dict[int, List[int]] = defaultdict(list)
    names: Dict[int, str] = {}

    for entry in entries:
        grid[entry.quarter][Position(entry.position)] = entry.player_id
        if entry.quarter not in quarters_by_player[entry.player_id]:
            quarters_by_player[entry.player_id].append(entry.quarter)
        names[entry.player_id] = entry.display_name or f"Player {entry.player_id}"

    filled_by_quarter = {
        quarter: sum(1 for player_id in grid[quarter].values() if player_id is not None)
        for quarter in QUARTERS
    }
    filled = sum(filled_by_quarter.values())

    players = [
        {
            "player_id": player_id,
            "display_name": names[player_id],
            "quarters_played": len(quarters),
            "quarters": sorted(quarters),
        }
        for player_id, quarters in quarters_by_player.items()
    ]
    players.sort(key=lambda p: (-p["quarters_played"], p["display_name"].casefold(), p["player_id"]))

    return {
        "game_id": game.id,
        "quarters": grid,
        "filled_by_quarter": filled_by_quarter,
        "filled_slots": filled,
        "total_slots": TOTAL_SLOTS,
        "completion_percentage": round(filled * 100 / TOTAL_SLOTS, 1),
        "position_labels": {position: position.label for position in POSITIONS},
        "players": players,
    }
