"""Small value records used across the salary model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Address:
    """A postal address."""

    city: str
    street: str
    house_number: int

    def update(self, city: str, street: str, house_number: int) -> None:
        """Replace every part of the address."""
        self.city = city
        self.street = street
        self.house_number = house_number


@dataclass
class ContactInfo:
    """A phone number and an e-mail address."""

    phone: str
    email: str

    def update(self, phone: str, email: str) -> None:
        """Replace both contact details."""
        self.phone = phone
        self.email = email


@dataclass
class BankAccount:
    """An account number held at a bank."""

    account_number: str
    bank: str

    def update(self, account_number: str, bank: str) -> None:
        """Replace the account number and the bank."""
        self.account_number = account_number
        self.bank = bank


@dataclass
class Report:
    """A typed piece of report content."""

    type: str
    content: str

    def update(self, type: str, content: str) -> None:  # noqa: A002
        """Replace the report type and content."""
        self.type = type
        self.content = content


@dataclass
class Role:
    """A named role with a description of its permissions."""

    name: str
    permissions: str

    def update(self, name: str, permissions: str) -> None:
        """Replace the role name and permissions."""
        self.name = name
        self.permissions = permissions


@dataclass
class Task:
    """A unit of work with a deadline; starts out not completed."""

    description: str
    deadline: str
    completed: bool = False