from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from api.deps.db import get_db
from api.crud.team_crud import create_team, get_teams, get_team_by_name
from core.auth import get_admin
from core.validators import validate_team_exists
from schemas.auth import TokenData
from schemas.team import Team, TeamCreate

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.post("", response_model=Team, status_code=status.HTTP_201_CREATED)
async def create_team_endpoint(
    team: TeamCreate,
    principal: TokenData = Depends(get_admin),
    db: Session = Depends(get_db)
):
    """Create a team (admins only)"""
    if get_team_by_name(db, team.name):
        raise HTTPException(status_code=400, detail="Team with this name already exists")
    return create_team(db, team)


@router.get("", response_model=List[Team])
async def list_teams(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db)
):
    return get_teams(db, skip=skip, limit=limit)


@router.get("/{team_id}", response_model=Team)
async def get_team_endpoint(
    team_id: int,
    db: Session = Depends(get_db)
):
    return validate_team_exists(db, team_id)
