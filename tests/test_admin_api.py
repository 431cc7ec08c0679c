"""
Admin endpoints: departments and employees
"""
import pytest

from hrms.models.employee import Employee
from hrms.models.task import Task


def new_employee(**overrides):
    payload = {
        "name": "Bob",
        "email": "bob@acme.com",
        "password": "Secret123",
        "departmentName": "Engineering",
        "profile": {"phone": "555-0100", "position": "Developer"},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def engineering(make_department):
    return make_department("Engineering", "Builds things")


class TestDepartments:

    def test_create(self, client, admin_headers):
        response = client.post(
            "/admin/department",
            json={"name": "Engineering", "description": "Builds things"},
            headers=admin_headers
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Successfully saved department"
        assert data["department"]["name"] == "Engineering"
        assert data["department"]["employeeIds"] == []

    def test_duplicate_name(self, client, admin_headers, engineering):
        response = client.post(
            "/admin/department",
            json={"name": "Engineering", "description": "Again"},
            headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Department already exists"

    def test_missing_description(self, client, admin_headers):
        response = client.post("/admin/department", json={"name": "Engineering"}, headers=admin_headers)
        assert response.status_code == 400

    def test_list(self, client, admin_headers, engineering):
        response = client.get("/admin/department", headers=admin_headers)

        assert response.status_code == 200
        assert {d["name"] for d in response.json()} == {"Administration", "Engineering"}

    def test_get_lists_employee_ids(self, client, admin_headers, engineering, make_employee):
        employee = make_employee(engineering)

        response = client.get("/admin/department/Engineering", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["employeeIds"] == [employee.id]

    def test_get_unknown(self, client, admin_headers):
        response = client.get("/admin/department/Nowhere", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Department not found"

    def test_update(self, client, admin_headers, engineering):
        response = client.put(
            "/admin/department/Engineering",
            json={"description": "Builds better things", "name": ""},
            headers=admin_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Department updated successfully"
        assert data["department"]["name"] == "Engineering"
        assert data["department"]["description"] == "Builds better things"

    def test_rename(self, client, admin_headers, engineering):
        client.put("/admin/department/Engineering", json={"name": "R&D"}, headers=admin_headers)

        assert client.get("/admin/department/R&D", headers=admin_headers).status_code == 200
        assert client.get("/admin/department/Engineering", headers=admin_headers).status_code == 404

    def test_update_unknown(self, client, admin_headers):
        response = client.put("/admin/department/Nowhere", json={"description": "x"}, headers=admin_headers)
        assert response.status_code == 404

    def test_delete(self, client, admin_headers, engineering):
        response = client.delete("/admin/department/Engineering", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Department deleted successfully"
        assert response.json()["department"]["id"] == engineering.id

    def test_delete_with_employees_is_refused(self, client, admin_headers, engineering, make_employee):
        make_employee(engineering)

        response = client.delete("/admin/department/Engineering", headers=admin_headers)

        assert response.status_code == 400

    def test_delete_unknown(self, client, admin_headers):
        assert client.delete("/admin/department/Nowhere", headers=admin_headers).status_code == 404


class TestEmployees:

    def test_create(self, client, db_session, admin_headers, engineering):
        response = client.post("/admin/employee", json=new_employee(), headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Employee created successfully"
        assert data["employee"]["departmentId"] == engineering.id
        assert data["employee"]["role"] == "employee"
        assert data["employee"]["profile"]["position"] == "Developer"
        assert "password" not in data["employee"]
        assert "hashedPassword" not in data["employee"]

        stored = db_session.query(Employee).filter(Employee.email == "bob@acme.com").one()
        assert stored.hashed_password != "Secret123"

    def test_unknown_department(self, client, admin_headers):
        response = client.post("/admin/employee", json=new_employee(departmentName="Nowhere"), headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Department not found"

    def test_duplicate_email(self, client, admin_headers, engineering):
        client.post("/admin/employee", json=new_employee(), headers=admin_headers)

        response = client.post("/admin/employee", json=new_employee(name="Bobby"), headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Email already registered"

    def test_weak_password(self, client, admin_headers, engineering):
        response = client.post("/admin/employee", json=new_employee(password="secret123"), headers=admin_headers)

        assert response.status_code == 400
        assert "uppercase" in response.json()["message"]

    def test_invalid_email(self, client, admin_headers, engineering):
        response = client.post("/admin/employee", json=new_employee(email="not-an-email"), headers=admin_headers)
        assert response.status_code == 400

    def test_list_summaries(self, client, admin_headers, engineering, make_employee):
        make_employee(engineering, name="Alice", profile={"phone": "555-0101"})

        response = client.get("/admin/employee", headers=admin_headers)

        assert response.status_code == 200
        summaries = {s["name"]: s for s in response.json()}
        assert summaries["Alice"]["departmentName"] == "Engineering"
        assert summaries["Alice"]["profile"]["phone"] == "555-0101"
        assert summaries["Root"]["departmentName"] == "Administration"

    def test_get_by_email(self, client, admin_headers, engineering, make_employee):
        make_employee(engineering, name="Alice")

        response = client.get("/admin/employee/alice@acme.com", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["name"] == "Alice"

    def test_email_lookup_ignores_case(self, client, admin_headers, engineering):
        client.post("/admin/employee", json=new_employee(email="Bob@ACME.com"), headers=admin_headers)

        response = client.get("/admin/employee/Bob@ACME.com", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["name"] == "Bob"
        assert client.get("/admin/employee/bob@acme.com", headers=admin_headers).status_code == 200

    def test_duplicate_email_differing_in_case(self, client, admin_headers, engineering):
        client.post("/admin/employee", json=new_employee(), headers=admin_headers)

        response = client.post("/admin/employee", json=new_employee(name="Bobby", email="BOB@acme.com"), headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Email already registered"

    def test_get_unknown_email(self, client, admin_headers):
        response = client.get("/admin/employee/nobody@acme.com", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Employee not found"

    def test_update_moves_department_and_hashes_password(
        self, client, db_session, admin_headers, engineering, make_department, make_employee
    ):
        make_employee(engineering, name="Alice")
        make_department("Sales", "Sells things")

        response = client.put(
            "/admin/employee/Alice",
            json={"departmentName": "Sales", "password": "NewSecret1"},
            headers=admin_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Employee updated successfully"
        assert data["employee"]["departmentName"] == "Sales"

        stored = db_session.query(Employee).filter(Employee.name == "Alice").one()
        assert stored.hashed_password != "NewSecret1"
        assert stored.compare_password("NewSecret1")

    def test_update_unknown(self, client, admin_headers):
        response = client.put("/admin/employee/Nobody", json={"name": "Somebody"}, headers=admin_headers)
        assert response.status_code == 404

    def test_promote_to_admin(self, client, admin_headers, engineering, make_employee):
        make_employee(engineering, name="Alice")

        client.put("/admin/employee/Alice", json={"role": "admin"}, headers=admin_headers)
        login = client.post("/auth/login", json={"email": "alice@acme.com", "password": "Secret123"})
        token = login.json()["token"]

        me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json()["isAdmin"] is True

    def test_delete_removes_assigned_tasks(
        self, client, db_session, admin_headers, engineering, make_employee, auth_headers
    ):
        alice = make_employee(engineering, name="Alice")
        client.post(
            "/department/Engineering/task",
            json={"title": "Ship it", "description": "Release 1.0"},
            headers=auth_headers(alice)
        )

        response = client.delete("/admin/employee/Alice", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Employee deleted successfully"
        assert response.json()["employee"]["name"] == "Alice"
        db_session.expire_all()
        assert db_session.query(Task).count() == 0

    def test_delete_unknown(self, client, admin_headers):
        assert client.delete("/admin/employee/Nobody", headers=admin_headers).status_code == 404
