"""
Employee self-service: assigned tasks and profile.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import NotFound, ValidationFailure
from ..repositories.employees import EmployeeRepository
from ..repositories.tasks import TaskRepository
from ..schemas.employee import EmployeeProfile, ProfileUpdateRequest
from ..schemas.task import TaskResponse
from ..utils.dependencies import require_user

router = APIRouter(prefix="/employee", tags=["Employees"], dependencies=[Depends(require_user)])


@router.get("/{employee_id}/tasks", response_model=List[TaskResponse])
def get_employee_tasks(employee_id: str, db: Session = Depends(get_db)):
    tasks = TaskRepository(db).find_by_assignee(employee_id)
    if not tasks:
        raise NotFound("No tasks found for this employee")
    return tasks


@router.get("/{employee_id}/profile", response_model=EmployeeProfile)
def get_employee_profile(employee_id: str, db: Session = Depends(get_db)):
    employee = EmployeeRepository(db).find_by_id(employee_id)
    if not employee:
        raise NotFound("Employee not found")
    return employee.profile


@router.put("/{employee_id}/profile", response_model=EmployeeProfile)
def update_employee_profile(employee_id: str, payload: ProfileUpdateRequest, db: Session = Depends(get_db)):
    """Replace the employee's profile"""
    if payload.profile is None:
        raise ValidationFailure("Profile data is required")

    employee = EmployeeRepository(db).update_profile(employee_id, payload.profile.model_dump())
    if not employee:
        raise NotFound("Employee not found")
    return employee.profile
