"""
Admin API: department and employee records.
Every route requires an admin token.
"""
from typing import List

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import NotFound, ValidationFailure
from ..models.employee import Employee
from ..repositories.departments import DepartmentRepository
from ..repositories.employees import EmployeeRepository
from ..schemas.department import (
    DepartmentCreate, DepartmentUpdate, DepartmentResponse, DepartmentMessage
)
from ..schemas.employee import (
    EmployeeCreate, EmployeeUpdate, EmployeeResponse, EmployeeSummary,
    EmployeeMessage, EmployeeSummaryMessage, EmployeeProfile
)
from ..services.token_service import TokenClaims
from ..utils.audit_logger import log_auth_event, log_role_change, log_resource_access, get_request_id
from ..utils.dependencies import require_admin
from ..utils.logging_config import get_logger
from ..utils.security import validate_password_strength

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])

logger = get_logger(__name__)


def to_summary(employee: Employee) -> EmployeeSummary:
    return EmployeeSummary(
        name=employee.name,
        profile=EmployeeProfile.model_validate(employee.profile),
        department_name=employee.department.name if employee.department else "N/A"
    )


def check_password(password: str) -> None:
    is_valid, error_msg = validate_password_strength(password)
    if not is_valid:
        raise ValidationFailure(error_msg)


# ======== Departments ========

@router.get("/department", response_model=List[DepartmentResponse])
def list_departments(db: Session = Depends(get_db)):
    """Retrieve a list of all departments"""
    departments = DepartmentRepository(db).find_all()
    if not departments:
        raise NotFound("No departments found")
    return departments


@router.post("/department", response_model=DepartmentMessage, status_code=status.HTTP_201_CREATED)
def create_department(payload: DepartmentCreate, db: Session = Depends(get_db)):
    """Create a new department"""
    departments = DepartmentRepository(db)
    if departments.find_by_name(payload.name):
        raise ValidationFailure("Department already exists")

    department = departments.create(payload.name, payload.description)
    logger.info("Department created: %s", department.name)

    return DepartmentMessage(
        message="Successfully saved department",
        department=DepartmentResponse.model_validate(department)
    )


@router.get("/department/{department_name}", response_model=DepartmentResponse)
def get_department(department_name: str, db: Session = Depends(get_db)):
    """Retrieve details of a specific department by name"""
    return DepartmentRepository(db).get_by_name(department_name)


@router.put("/department/{department_name}", response_model=DepartmentMessage)
def update_department(department_name: str, payload: DepartmentUpdate, db: Session = Depends(get_db)):
    """Update details of a specific department by name"""
    departments = DepartmentRepository(db)
    update_data = {field: value for field, value in payload.model_dump(exclude_unset=True).items() if value}

    new_name = update_data.get("name")
    if new_name and new_name != department_name and departments.find_by_name(new_name):
        raise ValidationFailure("Department already exists")

    department = departments.update_by_name(department_name, update_data)
    if not department:
        raise NotFound("Department not found")

    return DepartmentMessage(
        message="Department updated successfully",
        department=DepartmentResponse.model_validate(department)
    )


@router.delete("/department/{department_name}", response_model=DepartmentMessage)
def delete_department(department_name: str, db: Session = Depends(get_db)):
    """Delete a specific department by name"""
    departments = DepartmentRepository(db)
    department = departments.get_by_name(department_name)
    snapshot = DepartmentResponse.model_validate(department)

    departments.delete_by_name(department_name)
    logger.info("Department deleted: %s", department_name)

    return DepartmentMessage(message="Department deleted successfully", department=snapshot)


# ======== Employees ========

@router.get("/employee", response_model=List[EmployeeSummary])
def list_employees(db: Session = Depends(get_db)):
    """Retrieve a list of all employees"""
    employees = EmployeeRepository(db).find_all()
    if not employees:
        raise NotFound("No employees found")
    return [to_summary(employee) for employee in employees]


@router.post("/employee", response_model=EmployeeMessage, status_code=status.HTTP_201_CREATED)
def create_employee(
    request: Request,
    payload: EmployeeCreate,
    db: Session = Depends(get_db),
    current_admin: TokenClaims = Depends(require_admin)
):
    """Register a new employee"""
    check_password(payload.password)

    department = DepartmentRepository(db).get_by_name(payload.department_name)

    employees = EmployeeRepository(db)
    if employees.find_by_email(payload.email):
        raise ValidationFailure("Email already registered")

    employee = employees.create({
        "name": payload.name,
        "email": payload.email,
        "password": payload.password,
        "role": payload.role.value,
        "department_id": department.id,
        "profile": payload.profile.model_dump() if payload.profile else None,
    })

    log_auth_event(
        "REGISTER",
        email=employee.email,
        user_id=employee.id,
        success=True,
        details=f"Created by {current_admin.email}",
        request_id=get_request_id(request)
    )

    return EmployeeMessage(
        message="Employee created successfully",
        employee=EmployeeResponse.model_validate(employee)
    )


@router.get("/employee/{employee_email}", response_model=EmployeeSummary)
def get_employee(employee_email: str, db: Session = Depends(get_db)):
    """Retrieve details of a specific employee by email"""
    employee = EmployeeRepository(db).find_by_email(employee_email)
    if not employee:
        raise NotFound("Employee not found")
    return to_summary(employee)


@router.put("/employee/{employee_name}", response_model=EmployeeSummaryMessage)
def update_employee(
    request: Request,
    employee_name: str,
    payload: EmployeeUpdate,
    db: Session = Depends(get_db),
    current_admin: TokenClaims = Depends(require_admin)
):
    """Update details of a specific employee by name"""
    employees = EmployeeRepository(db)
    update_data = payload.model_dump(exclude_unset=True)

    department_name = update_data.pop("department_name", None)
    if department_name:
        update_data["department_id"] = DepartmentRepository(db).get_by_name(department_name).id

    if update_data.get("password"):
        check_password(update_data["password"])

    if update_data.get("role") is not None:
        update_data["role"] = payload.role.value

    employee = employees.find_by_name(employee_name)
    if not employee:
        raise NotFound("Employee not found")

    new_email = update_data.get("email")
    holder = employees.find_by_email(new_email) if new_email else None
    if holder and holder.id != employee.id:
        raise ValidationFailure("Email already registered")

    old_role = employee.role
    employee = employees.update_by_name(employee_name, update_data)

    if employee.role != old_role:
        log_role_change(
            target_user_id=employee.id,
            old_role=old_role,
            new_role=employee.role,
            changed_by=current_admin.user_id,
            request_id=get_request_id(request)
        )

    return EmployeeSummaryMessage(message="Employee updated successfully", employee=to_summary(employee))


@router.delete("/employee/{employee_name}", response_model=EmployeeMessage)
def delete_employee(
    request: Request,
    employee_name: str,
    db: Session = Depends(get_db),
    current_admin: TokenClaims = Depends(require_admin)
):
    """Delete a specific employee by name"""
    employees = EmployeeRepository(db)
    employee = employees.find_by_name(employee_name)
    if not employee:
        raise NotFound("Employee not found")
    snapshot = EmployeeResponse.model_validate(employee)

    employees.delete_by_name(employee_name)

    log_resource_access(
        "DELETE",
        resource_type="employee",
        resource_id=snapshot.id,
        user_id=current_admin.user_id,
        request_id=get_request_id(request)
    )

    return EmployeeMessage(message="Employee deleted successfully", employee=snapshot)
