"""A walk through the salary model: payroll, payments, logins and projects."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from workbench.salary.auth import LoginSystem
from workbench.salary.organization import Company, Department, PayrollSystem
from workbench.salary.personnel import Employee
from workbench.salary.projects import Project, ProjectManager
from workbench.salary.records import Address, BankAccount, ContactInfo, Report, Role, Task
from workbench.salary.tracking import Attendance, Payment, TimeSheet

PASSWORD = "password"


def _run() -> None:
    emp1 = Employee(
        1, "John", "Doe", "Developer", 50,
        ContactInfo("[phone]", "john.doe@example.com"), Address("Minsk", "Lenina", 10),
    )
    emp2 = Employee(
        2, "Jane", "Smith", "Designer", 45,
        ContactInfo("[phone]", "jane.smith@example.com"), Address("Minsk", "Pushkina", 15),
    )
    pm1 = ProjectManager(
        3, "Alice", "Brown", "Manager", 60, 500,
        ContactInfo("[phone]", "alice.brown@example.com"), Address("Minsk", "Gorkogo", 20),
    )

    dept = Department("IT")
    for person in (emp1, emp2, pm1):
        dept.add_employee(person)

    company = Company("Tech Corp")
    company.add_department(dept)

    for person in (emp1, emp2, pm1):
        person.update_hours_worked(160)

    payroll = PayrollSystem(company)
    payroll.initialize()
    payroll.generate_report()

    timesheet = TimeSheet(emp1, "2024-11-25", 160)
    timesheet.fill_time_sheet(160)

    Payment(emp1, emp1.calculate_salary(), "2024-11-25").process_payment()

    logins = LoginSystem()
    logins.register_user("admin", PASSWORD)
    try:
        logins.register_user("admin", PASSWORD)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)

    print("Login successful" if logins.login("admin", "wrongpassword") else "Login failed")

    project = Project("New Website")
    project.add_task(Task("Design Landing Page", "2024-12-01"))
    project.add_task(Task("Develop Backend", "2024-12-15"))
    project.add_employee(emp1)
    project.add_employee(emp2)
    pm1.manage_project(project)

    print(f"Employee: {emp1.first_name} {emp1.last_name}")
    print(f"Phone: {emp1.contact_info.phone}, Email: {emp1.contact_info.email}")
    address = emp1.address
    print(f"Address: {address.city}, {address.street}, {address.house_number}")

    account = BankAccount("123456789", "Tech Bank")
    print(f"Account Number: {account.account_number}, Bank: {account.bank}")

    attendance = Attendance(emp1, "2024-11-25", True)
    print(
        f"Employee: {attendance.employee.first_name}, Date: {attendance.date}, "
        f"Present: {'Yes' if attendance.present else 'No'}"
    )

    role = Role("Admin", "Full Access")
    print(f"Role: {role.name}, Permissions: {role.permissions}")

    report = Report("Monthly", "Report Content")
    print(f"Report Type: {report.type}, Content: {report.content}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration; errors are reported on standard error."""
    try:
        _run()
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())