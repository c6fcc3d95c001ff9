from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from api.deps.db import get_db
from core.auth import get_current_principal, ensure_team_access
from core.validators import validate_game_exists
from schemas.auth import TokenData
from schemas.availability import AvailabilityUpdate, GameAvailability, PlayerAvailabilityUpdate
from services import availability_service

router = APIRouter(prefix="/games/{game_id}/availability", tags=["Availability"])


@router.get("", response_model=GameAvailability)
async def get_game_availability(
    game_id: int,
    db: Session = Depends(get_db)
):
    """Who can make the game"""
    game = validate_game_exists(db, game_id)
    return availability_service.get_game_availability(db, game)


@router.put("", response_model=GameAvailability)
async def set_game_availability(
    game_id: int,
    availability: AvailabilityUpdate,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Replace the game's availability with the listed players"""
    game = validate_game_exists(db, game_id)
    ensure_team_access(principal, game.team_id, "edit availability for this game")
    return availability_service.set_game_availability(db, game, availability.available_player_ids)


@router.put("/{player_id}", response_model=GameAvailability)
async def set_player_availability(
    game_id: int,
    player_id: int,
    update: PlayerAvailabilityUpdate,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    game = validate_game_exists(db, game_id)
    ensure_team_access(principal, game.team_id, "edit availability for this game")
    return availability_service.set_player_availability(db, game, player_id, update.is_available)


@router.delete("")
async def clear_game_availability(
    game_id: int,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Forget the game's availability so every active player counts again"""
    game = validate_game_exists(db, game_id)
    ensure_team_access(principal, game.team_id, "edit availability for this game")
    removed = availability_service.clear_game_availability(db, game)
    return {
        "message": "Availability cleared for game",
        "game_id": game_id,
        "deleted_entries": removed
    }
