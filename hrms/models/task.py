"""
Department tasks
"""
import uuid
import enum
from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..database import Base
from ..utils.clock import utcnow


class TaskStatus(str, enum.Enum):
    """Task status. Any value may be set at any time."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


# Statuses that count as outstanding work for load balancing
OPEN_TASK_STATUSES = (TaskStatus.PENDING.value, TaskStatus.IN_PROGRESS.value)


class Task(Base):
    """
    A task created in a department and assigned to one of its employees.
    department_id always matches the assignee's department at creation time.
    """
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=TaskStatus.PENDING.value)
    due_date = Column(DateTime, nullable=False)

    department_id = Column(
        String(36),
        ForeignKey("departments.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )
    assigned_to_id = Column(
        String(36),
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    department = relationship("Department")
    assignee = relationship("Employee", back_populates="tasks")

    def __repr__(self):
        return f"<Task {self.title} - {self.status}>"
