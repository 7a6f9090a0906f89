"""
Trip database model.

A trip runs one truck with one or two drivers and owns routes and shipments.
"""

from sqlalchemy import Column, Integer, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from backend.app.db.session import Base


class Trip(Base):
    """
    Trip model.
    
    driver1 is required, driver2 and the end timestamp are optional.
    """
    __tablename__ = "trips"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    truck_id = Column(Integer, ForeignKey("trucks.id"), nullable=False, index=True)
    
    # Driver assignment
    driver1_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    driver2_id = Column(Integer, ForeignKey("employees.id"), nullable=True, index=True)
    
    start = Column(DateTime, nullable=False)
    end = Column(DateTime, nullable=True)
    
    truck = relationship("Truck", back_populates="trips")
    driver1 = relationship("Employee", foreign_keys=[driver1_id])
    driver2 = relationship("Employee", foreign_keys=[driver2_id])
    routes = relationship("Route", back_populates="trip", passive_deletes=True)
    shipments = relationship("Shipment", back_populates="trip", passive_deletes=True)
    
    def __repr__(self):
        return f"<Trip(id={self.id}, truck_id={self.truck_id}, driver1_id={self.driver1_id})>"
