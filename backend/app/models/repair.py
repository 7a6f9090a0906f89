"""
Repair database model.

Each repair row counts towards ``Truck.number_of_repairs``; the counter is
maintained by ``backend.app.services.repair_counter``.
"""

from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from backend.app.db.session import Base


class Repair(Base):
    """A repair of one truck performed by one mechanic."""
    __tablename__ = "repairs"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    truck_id = Column(Integer, ForeignKey("trucks.id"), nullable=False, index=True)
    mechanic_id = Column("employee_id", Integer, ForeignKey("employees.id"), nullable=False, index=True)
    
    order_date = Column(DateTime, nullable=False)
    days_to_repair = Column(Integer, nullable=False)
    
    truck = relationship("Truck", back_populates="repairs")
    mechanic = relationship("Employee", back_populates="repairs")
    
    def __repr__(self):
        return f"<Repair(id={self.id}, truck_id={self.truck_id}, mechanic_id={self.mechanic_id})>"
