import pytest

from workbench.salary.personnel import Employee, Manager
from workbench.salary.projects import Project
from workbench.salary.records import Address, ContactInfo


@pytest.fixture
def employee():
    contact = ContactInfo("[phone]", "john.doe@example.com")
    address = Address("Minsk", "Lenina", 10)
    return Employee(1, "John", "Doe", "Developer", 50, contact, address)


def test_constructor(employee):
    assert employee.employee_id == 1
    assert employee.first_name == "John"
    assert employee.last_name == "Doe"
    assert employee.position == "Developer"
    assert employee.hourly_rate == 50
    assert employee.contact_info.phone == "[phone]"
    assert employee.contact_info.email == "john.doe@example.com"
    assert employee.address.city == "Minsk"
    assert employee.address.street == "Lenina"
    assert employee.address.house_number == 10


def test_update_hours_worked(employee):
    employee.update_hours_worked(160)
    assert employee.hours_worked == 160


def test_calculate_salary(employee):
    employee.update_hours_worked(160)
    assert employee.calculate_salary() == pytest.approx(8000)
    assert employee.salary == pytest.approx(8000)


def test_salary_starts_at_zero(employee):
    assert employee.salary == 0
    assert employee.calculate_salary() == 0


def test_add_project(employee):
    project = Project("New Project")
    employee.add_project(project)
    assert len(employee.projects) == 1
    assert employee.projects[0].name == "New Project"


def test_set_contact_info(employee):
    employee.contact_info = ContactInfo("[phone]", "john.new@example.com")
    assert employee.contact_info.phone == "[phone]"
    assert employee.contact_info.email == "john.new@example.com"


def test_set_address(employee):
    employee.address = Address("Minsk", "Pushkina", 20)
    assert employee.address.city == "Minsk"
    assert employee.address.street == "Pushkina"
    assert employee.address.house_number == 20


def test_contact_info_is_copied_on_construction():
    contact = ContactInfo("[phone]", "john.doe@example.com")
    emp = Employee(1, "John", "Doe", "Developer", 50, contact, Address("Minsk", "Lenina", 10))
    contact.update("[phone]", "other@example.com")
    assert emp.contact_info.email == "john.doe@example.com"


def test_manager_salary_includes_bonus():
    manager = Manager(
        3, "Alice", "Brown", "Manager", 60, 500,
        ContactInfo("[phone]", "alice.brown@example.com"),
        Address("Minsk", "Gorkogo", 20),
    )
    manager.update_hours_worked(160)
    assert manager.calculate_salary() == pytest.approx(10100)
    assert manager.salary == pytest.approx(10100)
    assert manager.bonus == 500