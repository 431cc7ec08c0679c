"""
Department schemas
"""
from datetime import datetime
from typing import List, Optional
from pydantic import Field

from .base import CamelModel


class DepartmentCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)


class DepartmentUpdate(CamelModel):
    """Only non-empty values are applied"""
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None


class DepartmentResponse(CamelModel):
    id: str
    name: str
    description: str
    employee_ids: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DepartmentMessage(CamelModel):
    message: str
    department: DepartmentResponse
