import pytest

from workbench.salary.auth import LoginSystem


def test_register_and_login():
    system = LoginSystem()
    system.register_user("user1", "password")
    assert system.login("user1", "password") is True
    assert system.login("user1", "secret") is False
    assert system.login("nonexistentuser", "password") is False


def test_register_duplicate_user():
    system = LoginSystem()
    system.register_user("user1", "password")
    with pytest.raises(ValueError, match="already exists"):
        system.register_user("user1", "password")


def test_duplicate_registration_keeps_original():
    system = LoginSystem()
    system.register_user("admin", "password")
    with pytest.raises(ValueError):
        system.register_user("admin", "secret")
    assert system.login("admin", "password") is True
    assert system.login("admin", "secret") is False