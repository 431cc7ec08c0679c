"""
Department work queue: department roster and its tasks.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import NotFound
from ..repositories.departments import DepartmentRepository
from ..repositories.employees import EmployeeRepository
from ..repositories.tasks import TaskRepository
from ..schemas.base import MessageResponse
from ..schemas.employee import EmployeeResponse
from ..schemas.task import TaskCreate, TaskUpdate, TaskResponse
from ..services.task_assignment import TaskAssignmentService
from ..utils.dependencies import require_admin, require_user
from ..utils.logging_config import get_logger

router = APIRouter(prefix="/department", tags=["Departments"])

logger = get_logger(__name__)


@router.get(
    "/{department_name}/employee",
    response_model=List[EmployeeResponse],
    dependencies=[Depends(require_admin)]
)
def list_department_employees(department_name: str, db: Session = Depends(get_db)):
    """Employees within the department"""
    department = DepartmentRepository(db).get_by_name(department_name)

    employees = EmployeeRepository(db).find_by_department(department.id)
    if not employees:
        raise NotFound("No employees found in this department")
    return employees


# ======== Tasks ========

@router.post(
    "/{department_name}/task",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_user)]
)
def create_task(department_name: str, payload: TaskCreate, db: Session = Depends(get_db)):
    """Create a task and assign it to the least-loaded employee of the department"""
    department = DepartmentRepository(db).get_by_name(department_name)

    return TaskAssignmentService(db).create_task(
        department,
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date
    )


@router.get(
    "/{department_name}/task",
    response_model=List[TaskResponse],
    dependencies=[Depends(require_admin)]
)
def list_tasks(department_name: str, db: Session = Depends(get_db)):
    """All tasks within the department"""
    department = DepartmentRepository(db).get_by_name(department_name)

    tasks = TaskRepository(db).find_by_department(department.id)
    if not tasks:
        raise NotFound("No tasks found in this department")
    return tasks


@router.get(
    "/{department_name}/task/{task_id}",
    response_model=TaskResponse,
    dependencies=[Depends(require_user)]
)
def get_task(department_name: str, task_id: str, db: Session = Depends(get_db)):
    department = DepartmentRepository(db).get_by_name(department_name)

    task = TaskRepository(db).find_by_id(task_id, department.id)
    if not task:
        raise NotFound("Task not found in this department")
    return task


@router.put(
    "/{department_name}/task/{task_id}",
    response_model=TaskResponse,
    dependencies=[Depends(require_user)]
)
def update_task(department_name: str, task_id: str, payload: TaskUpdate, db: Session = Depends(get_db)):
    """Partial update; status may be set to any value at any time"""
    department = DepartmentRepository(db).get_by_name(department_name)

    tasks = TaskRepository(db)
    task = tasks.find_by_id(task_id, department.id)
    if not task:
        raise NotFound("Task not found in this department")

    update_data = {field: value for field, value in payload.model_dump(exclude_unset=True).items() if value}
    if "status" in update_data:
        update_data["status"] = payload.status.value

    old_status = task.status
    task = tasks.update(task, update_data)

    if task.status != old_status:
        logger.task_status_changed(task.id, old_status, task.status)

    return task


@router.delete(
    "/{department_name}/task/{task_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)]
)
def delete_task(department_name: str, task_id: str, db: Session = Depends(get_db)):
    department = DepartmentRepository(db).get_by_name(department_name)

    task = TaskRepository(db).delete_by_id(task_id, department.id)
    if not task:
        raise NotFound("Task not found in this department")
    return MessageResponse(message="Task deleted successfully")
