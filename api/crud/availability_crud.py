from sqlalchemy.orm import Session, joinedload
from typing import Iterable, List, Optional, Set
from models.availability import PlayerAvailability


def get_game_availability(db: Session, game_id: int) -> List[PlayerAvailability]:
    return db.query(PlayerAvailability).options(
        joinedload(PlayerAvailability.player)
    ).filter(PlayerAvailability.game_id == game_id).all()


def get_available_player_ids(db: Session, game_id: int) -> Optional[Set[int]]:
    """Ids marked available for the game, or None when availability was never set"""
    rows = db.query(PlayerAvailability).filter(PlayerAvailability.game_id == game_id).all()
    if not rows:
        return None
    return {row.player_id for row in rows if row.is_available}


def replace_game_availability(db: Session, game_id: int, player_ids: Iterable[int], available_ids: Set[int]) -> int:
    """
    Write one availability row per player, replacing the game's previous rows.

    Old rows are deleted and flushed before the inserts, in one transaction.
    """
    try:
        old_rows = db.query(PlayerAvailability).filter(PlayerAvailability.game_id == game_id).all()
        for row in old_rows:
            db.delete(row)
        db.flush()

        new_rows = [
            PlayerAvailability(game_id=game_id, player_id=player_id, is_available=player_id in available_ids)
            for player_id in player_ids
        ]
        db.add_all(new_rows)
        db.commit()
    except Exception:
        db.rollback()
        raise

    return len(new_rows)


def set_player_availability(db: Session, game_id: int, player_id: int, is_available: bool) -> PlayerAvailability:
    db_row = db.query(PlayerAvailability).filter(
        PlayerAvailability.game_id == game_id,
        PlayerAvailability.player_id == player_id
    ).first()
    if db_row:
        db_row.is_available = is_available
    else:
        db_row = PlayerAvailability(game_id=game_id, player_id=player_id, is_available=is_available)
        db.add(db_row)
    db.commit()
    db.refresh(db_row)
    return db_row


def clear_game_availability(db: Session, game_id: int) -> int:
    rows = db.query(PlayerAvailability).filter(PlayerAvailability.game_id == game_id).all()
    for row in rows:
        db.delete(row)
    db.commit()
    return len(rows)
