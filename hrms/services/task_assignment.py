"""
Task assignment: least-loaded employee selection and task creation.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from ..config import settings
from ..exceptions import AssignmentFailure
from ..models.department import Department
from ..models.employee import Employee
from ..models.task import Task, TaskStatus, OPEN_TASK_STATUSES
from ..repositories.employees import EmployeeRepository
from ..repositories.tasks import TaskRepository
from ..utils.clock import utcnow
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class EmployeeLoad:
    employee: Employee
    total_tasks: int
    pending_tasks: int


class TaskAssignmentService:
    """
    Picks the assignee for a new department task.

    The employee with the fewest tasks overall wins; ties are broken by the
    fewest pending/in-progress tasks, and any remaining tie keeps the
    employee seen first. Loads are recomputed from the task table on every
    call and no lock is held, so concurrent creations may pick the same
    employee.
    """

    def __init__(self, db: Session):
        self.db = db
        self.employees = EmployeeRepository(db)
        self.tasks = TaskRepository(db)

    def employee_loads(self, department_id: str) -> List[EmployeeLoad]:
        return [
            EmployeeLoad(
                employee=employee,
                total_tasks=self.tasks.count_by_assignee(employee.id),
                pending_tasks=self.tasks.count_by_assignee_and_status(employee.id, OPEN_TASK_STATUSES),
            )
            for employee in self.employees.find_by_department(department_id)
        ]

    def select_least_loaded(self, department_id: str) -> Optional[EmployeeLoad]:
        loads = self.employee_loads(department_id)
        if not loads:
            return None

        selected = None
        for load in loads:
            if selected is None or (
                load.total_tasks < selected.total_tasks
                or (load.total_tasks == selected.total_tasks and load.pending_tasks < selected.pending_tasks)
            ):
                selected = load

        return selected or loads[0]

    def select_assignee(self, department_id: str) -> Optional[Employee]:
        selected = self.select_least_loaded(department_id)
        return selected.employee if selected else None

    def create_task(
        self,
        department: Department,
        title: str,
        description: str,
        due_date: Optional[datetime] = None,
        now: Optional[datetime] = None
    ) -> Task:
        """Create a task in the department and assign it. Raises AssignmentFailure when nobody can take it."""
        selected = self.select_least_loaded(department.id)
        if selected is None:
            logger.warning("No employee available in department %s", department.name)
            raise AssignmentFailure()

        created_at = now or utcnow()
        task = self.tasks.create({
            "title": title,
            "description": description,
            "department_id": department.id,
            "assigned_to_id": selected.employee.id,
            "status": TaskStatus.PENDING.value,
            "due_date": due_date or created_at + timedelta(days=settings.task_due_days),
            "created_at": created_at,
            "updated_at": created_at,
        })

        logger.task_assigned(
            task_id=task.id,
            department_id=department.id,
            employee_id=selected.employee.id,
            total_tasks=selected.total_tasks,
            pending_tasks=selected.pending_tasks
        )
        return task
