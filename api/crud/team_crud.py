from sqlalchemy.orm import Session
from models.team import Team
from schemas.team import TeamCreate


def create_team(db: Session, team: TeamCreate):
    db_team = Team(name=team.name)
    db.add(db_team)
    db.commit()
    db.refresh(db_team)
    return db_team


def get_team(db: Session, team_id: int):
    return db.query(Team).filter(Team.id == team_id).first()


def get_team_by_name(db: Session, name: str):
    return db.query(Team).filter(Team.name == name).first()


def get_teams(db: Session, skip: int = 0, limit: int = 100):
    return db.query(Team).order_by(Team.name).offset(skip).limit(limit).all()
