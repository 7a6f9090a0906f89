"""
Brand database model.

A brand groups trucks and the mechanics certified to repair them.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from backend.app.db.session import Base


class Brand(Base):
    """Truck brand. Cannot be deleted while trucks reference it."""
    __tablename__ = "brands"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    
    trucks = relationship("Truck", back_populates="brand", passive_deletes=True)
    mechanics = relationship(
        "MechanicBrand",
        back_populates="brand",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    
    def __repr__(self):
        return f"<Brand(id={self.id}, name='{self.name}')>"
