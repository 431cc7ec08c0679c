# Services package
from .token_service import TokenService, TokenClaims, get_token_service
from .task_assignment import TaskAssignmentService, EmployeeLoad

__all__ = [
    "TokenService", "TokenClaims", "get_token_service",
    "TaskAssignmentService", "EmployeeLoad",
]
