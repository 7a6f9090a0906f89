"""
Shipment database model.
"""

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from backend.app.db.session import Base


class Shipment(Base):
    """
    Shipment model.
    
    Goods of one customer carried on one trip. Weight and value are
    fixed-point decimals.
    """
    __tablename__ = "shipments"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    
    weight = Column(Numeric(12, 2), nullable=False)
    value = Column(Numeric(12, 2), nullable=False)
    origin = Column(String(255), nullable=False)
    destination = Column(String(255), nullable=False)
    
    trip = relationship("Trip", back_populates="shipments")
    customer = relationship("Customer", back_populates="shipments")
    
    def __repr__(self):
        return f"<Shipment(id={self.id}, trip_id={self.trip_id}, customer_id={self.customer_id})>"
