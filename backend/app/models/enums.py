"""
Employee enumerations.

Defines the closed value sets accepted for employees.
"""

import enum


class EmployeeRole(str, enum.Enum):
    """
    Employee role enumeration.
    
    Roles:
        DRIVER: Drives trucks on trips (may carry a driver category)
        MECHANIC: Performs repairs and is certified for brands
    """
    DRIVER = "Driver"
    MECHANIC = "Mechanic"


class SeniorityLevel(str, enum.Enum):
    """Employee seniority enumeration (stored lowercase)."""
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
