from sqlalchemy.orm import Session
from typing import List
from models.player import Player
from schemas.player import PlayerCreate, PlayerUpdate


def create_player(db: Session, team_id: int, player: PlayerCreate):
    data = player.model_dump(mode="json")
    db_player = Player(team_id=team_id, **data)
    db.add(db_player)
    db.commit()
    db.refresh(db_player)
    return db_player


def get_player(db: Session, player_id: int):
    return db.query(Player).filter(Player.id == player_id).first()


def get_team_players(db: Session, team_id: int, active_only: bool = False) -> List[Player]:
    query = db.query(Player).filter(Player.team_id == team_id)
    if active_only:
        query = query.filter(Player.active == True)  # noqa: E712
    return query.order_by(Player.display_name, Player.id).all()


def get_active_players(db: Session, team_id: int) -> List[Player]:
    """Players who take part in auto-fill for this team"""
    return get_team_players(db, team_id, active_only=True)


def get_players_by_ids(db: Session, player_ids) -> List[Player]:
    if not player_ids:
        return []
    return db.query(Player).filter(Player.id.in_(list(player_ids))).all()


def update_player(db: Session, player_id: int, player_update: PlayerUpdate):
    db_player = db.query(Player).filter(Player.id == player_id).first()
    if not db_player:
        return None

    update_data = player_update.model_dump(mode="json", exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_player, field, value)

    db.commit()
    db.refresh(db_player)
    return db_player
