# Models package
from .department import Department
from .employee import Employee, EmployeeRole, PROFILE_FIELDS
from .task import Task, TaskStatus, OPEN_TASK_STATUSES

__all__ = [
    "Department",
    "Employee", "EmployeeRole", "PROFILE_FIELDS",
    "Task", "TaskStatus", "OPEN_TASK_STATUSES",
]
