"""
Employees (credential store)
"""
import uuid
import enum
from typing import Optional
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..database import Base
from ..utils.clock import utcnow
from ..utils.security import hash_password, verify_password


class EmployeeRole(str, enum.Enum):
    """Employee roles"""
    ADMIN = "admin"
    EMPLOYEE = "employee"


PROFILE_FIELDS = ("phone", "address", "position")


class Employee(Base):
    """
    Employee record. The password is write-only: it is hashed by
    set_password() and only ever checked through compare_password().
    """
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=EmployeeRole.EMPLOYEE.value)

    department_id = Column(
        String(36),
        ForeignKey("departments.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )

    # Profile
    phone = Column(String(20), nullable=True)
    address = Column(String(255), nullable=True)
    position = Column(String(100), nullable=True)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    department = relationship("Department", back_populates="employees")
    tasks = relationship(
        "Task",
        back_populates="assignee",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    def __repr__(self):
        return f"<Employee {self.email} ({self.role})>"

    @property
    def is_admin(self) -> bool:
        return self.role == EmployeeRole.ADMIN.value

    @property
    def profile(self) -> dict:
        return {field: getattr(self, field) for field in PROFILE_FIELDS}

    def set_profile(self, profile: Optional[dict]) -> None:
        """Replace the whole profile; missing keys are cleared"""
        profile = profile or {}
        for field in PROFILE_FIELDS:
            setattr(self, field, profile.get(field))

    def set_password(self, password: str) -> None:
        self.hashed_password = hash_password(password)

    def compare_password(self, candidate_password: str) -> bool:
        return verify_password(candidate_password, self.hashed_password)
