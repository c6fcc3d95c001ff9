"""
Seed a demo team with players and a game
Run with: python3 -m scripts.seed_demo_team
"""
from db import Base, engine, SessionLocal
from models.team import Team
from models.player import Player
from models.game import Game
from models.roster import RosterEntry  # noqa: F401
from models.availability import PlayerAvailability  # noqa: F401

DEMO_TEAM = "Warrandyte Wildcats"

DEMO_PLAYERS = [
    # (display name, first, last, preferences)
    ("Abbey", "Abbey", "Nguyen", ["GS", "GA"]),
    ("Bella", "Bella", "Roberts", ["GA", "GS"]),
    ("Chloe", "Chloe", "Park", ["WA", "C"]),
    ("Dani", "Danielle", "Hughes", ["C", "WA", "WD"]),
    ("Ella", "Ella", "Morris", ["WD", "C"]),
    ("Freya", "Freya", "Walsh", ["GD", "GK"]),
    ("Grace", "Grace", "Kim", ["GK", "GD"]),
    ("Hannah", "Hannah", "Lopez", []),
    ("Isla", "Isla", "Turner", ["GS"]),
]


def seed_demo_team():
    """Create the demo team once, skip when it already exists"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        team = db.query(Team).filter(Team.name == DEMO_TEAM).first()
        if team:
            print(f"Skipped {DEMO_TEAM} (already exists, id={team.id})")
            return team.id

        team = Team(name=DEMO_TEAM)
        db.add(team)
        db.flush()

        for display_name, first_name, last_name, preferences in DEMO_PLAYERS:
            db.add(Player(
                team_id=team.id,
                display_name=display_name,
                first_name=first_name,
                last_name=last_name,
                position_preferences=preferences,
                active=True
            ))
            print(f"Added {display_name} ({', '.join(preferences) or 'no preference'})")

        game = Game(team_id=team.id, opponent="Eltham Eagles", date="2026-10-24", round="1")
        db.add(game)
        db.commit()

        print(f"\nSummary:")
        print(f"   Team id: {team.id}")
        print(f"   Players: {len(DEMO_PLAYERS)}")
        print(f"   Game id: {game.id}")
        return team.id
    finally:
        db.close()


if __name__ == "__main__":
    print("Seeding demo team...\n")
    seed_demo_team()
    print("\nDone!")
