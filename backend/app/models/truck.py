"""
Truck database model.

Trucks belong to a brand and carry a denormalized repair counter.
"""

from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from backend.app.db.session import Base


class Truck(Base):
    """
    Truck model.
    
    ``number_of_repairs`` mirrors the count of repair rows for the truck.
    It is only changed by repair create/delete, never by the truck API.
    """
    __tablename__ = "trucks"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    brand_id = Column(Integer, ForeignKey("brands.id"), nullable=False, index=True)
    
    load = Column(Integer, nullable=False)
    capacity = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    
    number_of_repairs = Column(Integer, default=0, nullable=False)
    
    brand = relationship("Brand", back_populates="trucks")
    repairs = relationship("Repair", back_populates="truck", passive_deletes=True)
    trips = relationship("Trip", back_populates="truck", passive_deletes=True)
    
    def __repr__(self):
        return f"<Truck(id={self.id}, brand_id={self.brand_id}, repairs={self.number_of_repairs})>"
