"""Payroll office model: staff, organisation, projects, records and a demo command."""

__all__ = [
    "records",
    "personnel",
    "projects",
    "auth",
    "tracking",
    "organization",
    "payroll_demo",
]