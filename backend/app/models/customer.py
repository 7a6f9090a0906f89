"""
Customer database model.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from backend.app.db.session import Base


class Customer(Base):
    """
    Customer model.
    
    A customer owns shipments; phone2 is optional.
    """
    __tablename__ = "customers"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    address = Column(String(500), nullable=False)
    phone1 = Column(String(50), nullable=False)
    phone2 = Column(String(50), nullable=True)
    
    shipments = relationship("Shipment", back_populates="customer", passive_deletes=True)
    
    def __repr__(self):
        return f"<Customer(id={self.id}, name='{self.name}')>"
