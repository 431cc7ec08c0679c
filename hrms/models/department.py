"""
Departments
"""
import uuid
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from ..database import Base
from ..utils.clock import utcnow


class Department(Base):
    """
    A department that owns employees and their task queue.
    Department names are unique and are used as the public identifier in routes.
    """
    __tablename__ = "departments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Informational back-reference; Employee.department_id is authoritative
    employees = relationship("Employee", back_populates="department", viewonly=True)

    def __repr__(self):
        return f"<Department {self.name}>"

    @property
    def employee_ids(self):
        return [employee.id for employee in self.employees]
