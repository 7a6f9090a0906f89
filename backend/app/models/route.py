"""
Route database model.

A route is one leg (from -> to) of a trip.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from backend.app.db.session import Base


class Route(Base):
    """Trip leg. ``from`` is a Python keyword, hence ``from_``."""
    __tablename__ = "routes"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    
    from_ = Column("from", String(255), nullable=False)
    to = Column(String(255), nullable=False)
    
    trip = relationship("Trip", back_populates="routes")
    
    def __repr__(self):
        return f"<Route(id={self.id}, trip_id={self.trip_id}, '{self.from_}' -> '{self.to}')>"
