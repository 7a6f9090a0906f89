"""
Mechanic-Brand association model.

Many-to-many join between mechanics and the brands they service.
"""

from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from backend.app.db.session import Base


class MechanicBrand(Base):
    """Join row keyed by (employee_id, brand_id)."""
    __tablename__ = "mechanic_brands"
    
    employee_id = Column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True
    )
    brand_id = Column(
        Integer, ForeignKey("brands.id", ondelete="CASCADE"), primary_key=True
    )
    
    mechanic = relationship("Employee", back_populates="brands")
    brand = relationship("Brand", back_populates="mechanics")
    
    def __repr__(self):
        return f"<MechanicBrand(employee_id={self.employee_id}, brand_id={self.brand_id})>"
