from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, JSON
from sqlalchemy.orm import relationship
from db import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    display_name = Column(String, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)

    # Ordered list of position codes, most preferred first e.g. ["GS", "GA"]
    position_preferences = Column(JSON, nullable=False, default=list)
    active = Column(Boolean, nullable=False, default=True)

    # Relationships
    team = relationship("Team", back_populates="players")
    roster_entries = relationship("RosterEntry", back_populates="player", cascade="all, delete-orphan")
    availability = relationship("PlayerAvailability", back_populates="player", cascade="all, delete-orphan")
