from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List
from api.deps.db import get_db
from api.crud.roster_crud import get_game_rosters, get_slot, delete_game_rosters
from core.auth import get_current_principal, ensure_team_access
from core.exceptions import RosterException
from core.validators import validate_game_exists
from core.logging import logger
from schemas.auth import TokenData
from schemas.roster import (
    AutoFillResponse, QuarterCopy, RosterEntry, RosterSave, RosterSaveResponse,
    RosterSummary, SlotUpdate
)
from services import roster_service
from services.roster_engine import Position

router = APIRouter(prefix="/games/{game_id}/rosters", tags=["Rosters"])


@router.get("", response_model=List[RosterEntry])
async def get_game_roster(
    game_id: int,
    db: Session = Depends(get_db)
):
    """Stored roster entries of a game, quarter by quarter"""
    validate_game_exists(db, game_id)
    return get_game_rosters(db, game_id)


@router.put("", response_model=RosterSaveResponse)
async def save_game_roster(
    game_id: int,
    roster: RosterSave,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Replace the whole roster of a game"""
    game = validate_game_exists(db, game_id)
    ensure_team_access(principal, game.team_id, "edit this roster")

    try:
        saved = roster_service.save_game_roster(db, game, roster.entries)
        return RosterSaveResponse(
            game_id=game_id,
            saved_entries=saved,
            message=f"Roster saved with {saved} entries"
        )
    except RosterException:
        raise
    except Exception as e:
        logger.error(f"Failed to save roster for game {game_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.delete("")
async def clear_game_roster(
    game_id: int,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Delete every roster entry of a game"""
    game = validate_game_exists(db, game_id)
    ensure_team_access(principal, game.team_id, "edit this roster")

    deleted = delete_game_rosters(db, game_id)
    logger.info(f"Cleared {deleted} roster entries for game {game_id}")
    return {
        "message": "All roster entries deleted for game",
        "game_id": game_id,
        "deleted_entries": deleted
    }


@router.post("/auto-fill", response_model=AutoFillResponse)
async def auto_fill_game_roster(
    game_id: int,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Assign active players to every quarter and position, replacing the current roster"""
    game = validate_game_exists(db, game_id)
    ensure_team_access(principal, game.team_id, "edit this roster")

    try:
        result = roster_service.auto_fill_game_roster(db, game)
    except RosterException:
        raise
    except Exception as e:
        logger.error(f"Auto-fill failed for game {game_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    filled = len(result.assignments)
    return AutoFillResponse(
        game_id=game_id,
        entries=[RosterEntry.model_validate(e) for e in get_game_rosters(db, game_id)],
        assignment_counts=result.assignment_counts,
        ideal_quarters=result.ideal_quarters,
        min_quarters=result.min_quarters,
        target_feasible=result.target_feasible,
        unfilled_slots=[
            {"quarter": quarter, "position": position}
            for quarter, position in result.unfilled_slots
        ],
        message=f"Auto-fill assigned {filled} of {filled + len(result.unfilled_slots)} positions"
    )


@router.put("/slot", response_model=RosterEntry)
async def assign_slot(
    game_id: int,
    slot: SlotUpdate,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Set the player of one quarter/position"""
    game = validate_game_exists(db, game_id)
    ensure_team_access(principal, game.team_id, "edit this roster")

    entry = roster_service.assign_slot(db, game, slot.quarter, slot.position, slot.player_id)
    entry.display_name = entry.player.display_name if entry.player else None
    return entry


@router.delete("/slot")
async def clear_slot(
    game_id: int,
    position: Position,
    quarter: int = Query(..., ge=1, le=4),
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Leave one quarter/position unassigned"""
    game = validate_game_exists(db, game_id)
    ensure_team_access(principal, game.team_id, "edit this roster")

    roster_service.clear_slot(db, game, quarter, position)
    return {
        "message": f"{position.value} cleared for quarter {quarter}",
        "game_id": game_id
    }


@router.get("/slot", response_model=RosterEntry)
async def get_slot_endpoint(
    game_id: int,
    position: Position,
    quarter: int = Query(..., ge=1, le=4),
    db: Session = Depends(get_db)
):
    validate_game_exists(db, game_id)
    entry = get_slot(db, game_id, quarter, position)
    if not entry:
        raise HTTPException(status_code=404, detail="Position not assigned")
    entry.display_name = entry.player.display_name if entry.player else None
    return entry


@router.post("/copy-quarter")
async def copy_quarter(
    game_id: int,
    copy_request: QuarterCopy,
    principal: TokenData = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Copy one quarter's positions onto another quarter"""
    game = validate_game_exists(db, game_id)
    ensure_team_access(principal, game.team_id, "edit this roster")

    copied = roster_service.copy_quarter(
        db, game, copy_request.source_quarter, copy_request.target_quarter
    )
    return {
        "message": f"Quarter {copy_request.source_quarter} copied to quarter {copy_request.target_quarter}",
        "game_id": game_id,
        "copied_entries": copied
    }


@router.get("/summary", response_model=RosterSummary)
async def get_roster_summary(
    game_id: int,
    db: Session = Depends(get_db)
):
    """Fill status per quarter and quarters played per player"""
    game = validate_game_exists(db, game_id)
    return roster_service.build_roster_summary(db, game)
