from sqlalchemy.orm import Session
from models.game import Game
from schemas.game import GameCreate


def create_game(db: Session, team_id: int, game: GameCreate):
    db_game = Game(team_id=team_id, **game.model_dump())
    db.add(db_game)
    db.commit()
    db.refresh(db_game)
    return db_game


def get_game(db: Session, game_id: int):
    return db.query(Game).filter(Game.id == game_id).first()


def get_team_games(db: Session, team_id: int):
    return db.query(Game).filter(
        Game.team_id == team_id
    ).order_by(Game.date, Game.id).all()


def delete_game(db: Session, game_id: int):
    """Delete a game together with its roster entries"""
    db_game = db.query(Game).filter(Game.id == game_id).first()
    if not db_game:
        return False
    db.delete(db_game)
    db.commit()
    return True
