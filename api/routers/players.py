from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from api.deps.db import get_db
from api.crud.player_crud import create_player, get_team_players, update_player
from core.auth import get_current_principal, ensure_team_access
from core.validators import validate_team_exists, validate_player_exists
from core.logging import logger
from schemas.auth import TokenData
from schemas.player import Player, PlayerCreate, PlayerUpdate

router = APIRouter(tags=["Players"])


@router.post("/teams/{team_id}/players", response_model=Player, status_code=status.HTTP_201_CREATED)
async def create_player_endpoint(
    team_id: int,
    player: PlayerCreate,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Add a player to a team"""
    validate_team_exists(db, team_id)
    ensure_team_access(principal, team_id, "add players to this team")
    db_player = create_player(db, team_id, player)
    logger.info(f"Player {db_player.id} ({db_player.display_name}) added to team {team_id}")
    return db_player


@router.get("/teams/{team_id}/players", response_model=List[Player])
async def list_team_players(
    team_id: int,
    active_only: bool = False,
    db: Session = Depends(get_db)
):
    validate_team_exists(db, team_id)
    return get_team_players(db, team_id, active_only=active_only)


@router.get("/players/{player_id}", response_model=Player)
async def get_player_endpoint(
    player_id: int,
    db: Session = Depends(get_db)
):
    return validate_player_exists(db, player_id)


@router.patch("/players/{player_id}", response_model=Player)
async def update_player_endpoint(
    player_id: int,
    player_update: PlayerUpdate,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Update name, position preferences or active flag"""
    player = validate_player_exists(db, player_id)
    ensure_team_access(principal, player.team_id, "edit players of this team")
    return update_player(db, player_id, player_update)
