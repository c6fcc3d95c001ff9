from sqlalchemy.orm import Session, joinedload
from typing import Iterable, List, Optional
from models.roster import RosterEntry
from services.roster_engine import POSITIONS, Position, SlotAssignment

POSITION_ORDER = {position.value: index for index, position in enumerate(POSITIONS)}


def _slot_order(entry: RosterEntry):
    return entry.quarter, POSITION_ORDER.get(entry.position, len(POSITION_ORDER))


def _delete_entries(db: Session, *criteria) -> int:
    """Delete matching entries through the session and flush, returns the number removed"""
    entries = db.query(RosterEntry).filter(*criteria).all()
    for entry in entries:
        db.delete(entry)
    db.flush()
    return len(entries)


def get_game_rosters(db: Session, game_id: int) -> List[RosterEntry]:
    """Roster entries of a game in quarter then court order, with player names attached"""
    entries = db.query(RosterEntry).options(
        joinedload(RosterEntry.player)
    ).filter(RosterEntry.game_id == game_id).all()

    for entry in entries:
        entry.display_name = entry.player.display_name if entry.player else None

    return sorted(entries, key=_slot_order)


def get_slot(db: Session, game_id: int, quarter: int, position: Position) -> Optional[RosterEntry]:
    return db.query(RosterEntry).filter(
        RosterEntry.game_id == game_id,
        RosterEntry.quarter == quarter,
        RosterEntry.position == Position(position).value
    ).first()


def get_player_slot_in_quarter(db: Session, game_id: int, quarter: int, player_id: int) -> Optional[RosterEntry]:
    return db.query(RosterEntry).filter(
        RosterEntry.game_id == game_id,
        RosterEntry.quarter == quarter,
        RosterEntry.player_id == player_id
    ).first()


def create_roster_entry(db: Session, game_id: int, quarter: int, position: Position, player_id: int):
    db_entry = RosterEntry(
        game_id=game_id,
        quarter=quarter,
        position=Position(position).value,
        player_id=player_id
    )
    db.add(db_entry)
    db.commit()
    db.refresh(db_entry)
    return db_entry


def delete_game_rosters(db: Session, game_id: int) -> int:
    """Delete every roster entry of a game, returns the number removed"""
    deleted = _delete_entries(db, RosterEntry.game_id == game_id)
    db.commit()
    return deleted


def replace_game_rosters(db: Session, game_id: int, entries: Iterable[SlotAssignment]) -> int:
    """
    Replace the whole roster of a game.

    The old rows are deleted and flushed before any new row is inserted,
    all in one transaction. On failure the previous roster stays in place.
    """
    try:
        removed = _delete_entries(db, RosterEntry.game_id == game_id)

        new_entries = [
            RosterEntry(
                game_id=game_id,
                quarter=entry.quarter,
                position=Position(entry.position).value,
                player_id=entry.player_id
            )
            for entry in entries
        ]
        db.add_all(new_entries)
        db.commit()
    except Exception:
        db.rollback()
        raise

    return removed


def replace_quarter_rosters(db: Session, game_id: int, quarter: int, entries: Iterable[SlotAssignment]) -> int:
    """Replace the entries of one quarter, same ordering rules as replace_game_rosters"""
    try:
        removed = _delete_entries(db, RosterEntry.game_id == game_id, RosterEntry.quarter == quarter)

        db.add_all([
            RosterEntry(
                game_id=game_id,
                quarter=quarter,
                position=Position(entry.position).value,
                player_id=entry.player_id
            )
            for entry in entries
        ])
        db.commit()
    except Exception:
        db.rollback()
        raise

    return removed


def set_slot(db: Session, game_id: int, quarter: int, position: Position, player_id: int) -> RosterEntry:
    """Assign a player to one slot, replacing whoever held it"""
    db_entry = get_slot(db, game_id, quarter, position)
    if db_entry:
        db_entry.player_id = player_id
        db.commit()
        db.refresh(db_entry)
        return db_entry
    return create_roster_entry(db, game_id, quarter, position, player_id)


def delete_slot(db: Session, game_id: int, quarter: int, position: Position) -> bool:
    db_entry = get_slot(db, game_id, quarter, position)
    if not db_entry:
        return False
    db.delete(db_entry)
    db.commit()
    return True
