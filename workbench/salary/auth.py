"""A minimal in-memory user registry with login checks."""

from __future__ import annotations


class LoginSystem:
    """Registers users and checks their credentials."""

    def __init__(self) -> None:
        self._users: dict[str, str] = {}

    def register_user(self, username: str, password: str) -> None:
        """Add a user; raise ValueError if the username is taken."""
        if username in self._users:
            raise ValueError("User with this login already exists")
        self._users[username] = password

    def login(self, username: str, password: str) -> bool:
        """Return True when the username exists and the password matches."""
        return self._users.get(username) == password and username in self._users