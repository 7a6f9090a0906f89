"""
Employee database model.

Drivers and mechanics share one table. The ``role`` column is the tag that
decides which role-specific fields are meaningful:

* Driver: ``driver_category`` (optional), referenced by trips.
* Mechanic: repairs performed and brand certifications.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from backend.app.db.session import Base
from backend.app.models.enums import EmployeeRole


class Employee(Base):
    """Role-tagged employee row (Driver or Mechanic)."""
    __tablename__ = "employees"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    # Tag: an EmployeeRole value
    role = Column(String(20), nullable=False, index=True)
    
    name = Column(String(200), nullable=False)
    surname = Column(String(100), nullable=False)
    seniority_level = Column(String(20), nullable=False)
    
    # Driver-only
    driver_category = Column(String(50), nullable=True)
    
    # Mechanic-only
    repairs = relationship("Repair", back_populates="mechanic", passive_deletes=True)
    brands = relationship(
        "MechanicBrand",
        back_populates="mechanic",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    
    @property
    def is_driver(self) -> bool:
        return self.role == EmployeeRole.DRIVER.value
    
    def __repr__(self):
        return f"<Employee(id={self.id}, role='{self.role}', name='{self.name} {self.surname}')>"
