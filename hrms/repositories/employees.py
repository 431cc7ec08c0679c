"""Employee persistence (also the credential store used by login)."""
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.employee import Employee, EmployeeRole


def normalize_email(email: str) -> str:
    """Emails are stored and looked up lowercased"""
    return email.strip().lower()


class EmployeeRepository:
    def __init__(self, db: Session):
        self.db = db

    def _ordered(self):
        # Insertion order; the task selector relies on it for tie-breaking
        return self.db.query(Employee).order_by(Employee.created_at.asc(), Employee.id.asc())

    def find_all(self) -> List[Employee]:
        return self._ordered().all()

    def find_by_department(self, department_id: str) -> List[Employee]:
        return self._ordered().filter(Employee.department_id == department_id).all()

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        return self.db.query(Employee).filter(Employee.id == employee_id).first()

    def find_by_email(self, email: str) -> Optional[Employee]:
        return self.db.query(Employee).filter(Employee.email == normalize_email(email)).first()

    def find_by_name(self, name: str) -> Optional[Employee]:
        return self._ordered().filter(Employee.name == name).first()

    def has_admin(self) -> bool:
        return self.db.query(Employee.id).filter(Employee.role == EmployeeRole.ADMIN.value).first() is not None

    def create(self, fields: dict) -> Employee:
        """Create an employee. A plaintext 'password' entry is hashed, never stored."""
        fields = dict(fields)
        password = fields.pop("password")
        profile = fields.pop("profile", None)
        fields["email"] = normalize_email(fields["email"])

        employee = Employee(**fields)
        employee.set_password(password)
        employee.set_profile(profile)

        self.db.add(employee)
        self.db.commit()
        self.db.refresh(employee)
        return employee

    def update_by_name(self, name: str, fields: dict) -> Optional[Employee]:
        employee = self.find_by_name(name)
        if not employee:
            return None

        fields = dict(fields)
        password = fields.pop("password", None)
        if password:
            employee.set_password(password)

        if "profile" in fields:
            employee.set_profile(fields.pop("profile"))

        if fields.get("email"):
            fields["email"] = normalize_email(fields["email"])

        for field, value in fields.items():
            setattr(employee, field, value)

        self.db.commit()
        self.db.refresh(employee)
        return employee

    def update_profile(self, employee_id: str, profile: dict) -> Optional[Employee]:
        employee = self.find_by_id(employee_id)
        if not employee:
            return None

        employee.set_profile(profile)
        self.db.commit()
        self.db.refresh(employee)
        return employee

    def delete_by_name(self, name: str) -> Optional[Employee]:
        employee = self.find_by_name(name)
        if not employee:
            return None

        self.db.delete(employee)
        self.db.commit()
        return employee
