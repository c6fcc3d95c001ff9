from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from api.deps.db import get_db
from api.crud.game_crud import create_game, get_team_games, delete_game
from core.auth import get_current_principal, ensure_team_access
from core.validators import validate_team_exists, validate_game_exists
from core.logging import logger
from schemas.auth import TokenData
from schemas.game import Game, GameCreate

router = APIRouter(tags=["Games"])


@router.post("/teams/{team_id}/games", response_model=Game, status_code=status.HTTP_201_CREATED)
async def create_game_endpoint(
    team_id: int,
    game: GameCreate,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    validate_team_exists(db, team_id)
    ensure_team_access(principal, team_id, "schedule games for this team")
    return create_game(db, team_id, game)


@router.get("/teams/{team_id}/games", response_model=List[Game])
async def list_team_games(
    team_id: int,
    db: Session = Depends(get_db)
):
    validate_team_exists(db, team_id)
    return get_team_games(db, team_id)


@router.get("/games/{game_id}", response_model=Game)
async def get_game_endpoint(
    game_id: int,
    db: Session = Depends(get_db)
):
    return validate_game_exists(db, game_id)


@router.delete("/games/{game_id}")
async def delete_game_endpoint(
    game_id: int,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Delete a game and its roster"""
    game = validate_game_exists(db, game_id)
    ensure_team_access(principal, game.team_id, "delete games of this team")
    delete_game(db, game_id)
    logger.info(f"Game {game_id} deleted")
    return {"message": "Game deleted", "game_id": game_id}
