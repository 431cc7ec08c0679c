"""Task persistence and per-employee load counters."""
from typing import Iterable, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models.task import Task


class TaskRepository:
    def __init__(self, db: Session):
        self.db = db

    def count_by_assignee(self, employee_id: str) -> int:
        count = self.db.query(func.count(Task.id)).filter(
            Task.assigned_to_id == employee_id
        ).scalar()
        return count or 0

    def count_by_assignee_and_status(self, employee_id: str, statuses: Iterable[str]) -> int:
        count = self.db.query(func.count(Task.id)).filter(
            Task.assigned_to_id == employee_id,
            Task.status.in_(list(statuses))
        ).scalar()
        return count or 0

    def find_by_department(self, department_id: str) -> List[Task]:
        return self.db.query(Task).filter(
            Task.department_id == department_id
        ).order_by(Task.created_at.asc()).all()

    def find_by_assignee(self, employee_id: str) -> List[Task]:
        return self.db.query(Task).filter(
            Task.assigned_to_id == employee_id
        ).order_by(Task.created_at.asc()).all()

    def find_by_id(self, task_id: str, department_id: str) -> Optional[Task]:
        return self.db.query(Task).filter(
            Task.id == task_id,
            Task.department_id == department_id
        ).first()

    def create(self, fields: dict) -> Task:
        task = Task(**fields)
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def update(self, task: Task, fields: dict) -> Task:
        for field, value in fields.items():
            setattr(task, field, value)

        self.db.commit()
        self.db.refresh(task)
        return task

    def delete_by_id(self, task_id: str, department_id: str) -> Optional[Task]:
        task = self.find_by_id(task_id, department_id)
        if not task:
            return None

        self.db.delete(task)
        self.db.commit()
        return task
