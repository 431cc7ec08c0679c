"""Department persistence."""
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.department import Department
from ..exceptions import NotFound


class DepartmentRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_name(self, name: str) -> Optional[Department]:
        return self.db.query(Department).filter(Department.name == name).first()

    def get_by_name(self, name: str) -> Department:
        """find_by_name that raises NotFound on a miss"""
        department = self.find_by_name(name)
        if not department:
            raise NotFound("Department not found")
        return department

    def find_all(self) -> List[Department]:
        return self.db.query(Department).order_by(Department.created_at.asc()).all()

    def create(self, name: str, description: str) -> Department:
        department = Department(name=name, description=description)
        self.db.add(department)
        self.db.commit()
        self.db.refresh(department)
        return department

    def update_by_name(self, name: str, fields: dict) -> Optional[Department]:
        department = self.find_by_name(name)
        if not department:
            return None

        for field, value in fields.items():
            setattr(department, field, value)

        self.db.commit()
        self.db.refresh(department)
        return department

    def delete_by_name(self, name: str) -> Optional[Department]:
        department = self.find_by_name(name)
        if not department:
            return None

        self.db.delete(department)
        self.db.commit()
        return department
