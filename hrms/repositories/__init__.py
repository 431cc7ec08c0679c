# Repositories package
from .departments import DepartmentRepository
from .employees import EmployeeRepository
from .tasks import TaskRepository

__all__ = ["DepartmentRepository", "EmployeeRepository", "TaskRepository"]
