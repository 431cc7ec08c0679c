"""
Employee schemas
"""
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import EmailStr, Field

from .base import CamelModel


class EmployeeRole(str, Enum):
    """Must match models/employee.py"""
    ADMIN = "admin"
    EMPLOYEE = "employee"


class EmployeeProfile(CamelModel):
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=255)
    position: Optional[str] = Field(None, max_length=100)


class EmployeeCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    role: EmployeeRole = EmployeeRole.EMPLOYEE
    department_name: str = Field(..., min_length=1)
    profile: Optional[EmployeeProfile] = None


class EmployeeUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8, max_length=128)
    role: Optional[EmployeeRole] = None
    department_name: Optional[str] = None
    profile: Optional[EmployeeProfile] = None


class EmployeeResponse(CamelModel):
    """Full record for admins; the password hash is never exposed"""
    id: str
    name: str
    email: str
    role: str
    department_id: str
    profile: EmployeeProfile
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EmployeeSummary(CamelModel):
    name: str
    profile: EmployeeProfile
    department_name: str = "N/A"


class EmployeeMessage(CamelModel):
    message: str
    employee: EmployeeResponse


class EmployeeSummaryMessage(CamelModel):
    message: str
    employee: EmployeeSummary


class ProfileUpdateRequest(CamelModel):
    profile: Optional[EmployeeProfile] = None
