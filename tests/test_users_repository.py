import sqlite3

import pytest

from rair.models import User
from rair.users_repository import UsersRepository

_SCHEMA = """
CREATE TABLE users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT NOT NULL UNIQUE,
    password TEXT NOT NULL,
    email TEXT NOT NULL,
    login_attempts INTEGER NOT NULL,
    verification_code TEXT NOT NULL,
    is_game_master INTEGER NOT NULL,
    max_characters INTEGER NOT NULL
);
"""


class _SqliteTransaction:
    def __init__(self, connection):
        self._connection = connection

    def execute(self, query):
        return self._connection.execute(query).fetchall()

    def escape(self, text):
        return text.replace("'", "''")


class _SqlitePool:
    def __init__(self):
        self._connection = sqlite3.connect(":memory:")
        self._connection.row_factory = sqlite3.Row
        self._connection.executescript(_SCHEMA)

    def create_transaction(self):
        return _SqliteTransaction(self._connection)


@pytest.fixture
def repo():
    return UsersRepository(_SqlitePool())


def _new_user():
    password = "password"
    return User(0, "user", password, "user@example.com", 0, "code", 0, 0)


def test_user_inserted_correctly(repo):
    transaction = repo.create_transaction()
    usr = _new_user()
    assert repo.insert_if_not_exists(usr, transaction) is True
    assert usr.id != 0

    usr2 = repo.get(usr.id, transaction)
    assert usr2 is not None
    assert usr2.id == usr.id
    assert usr2.username == usr.username
    assert usr2.password == usr.password
    assert usr2.email == usr.email
    assert usr2.login_attempts == usr.login_attempts
    assert usr2.is_game_master == usr.is_game_master
    assert usr2.max_characters == usr.max_characters
    assert usr2.verification_code == usr.verification_code

    old_id = usr.id
    assert repo.insert_if_not_exists(usr, transaction) is False
    assert usr.id == old_id


def test_update_user(repo):
    transaction = repo.create_transaction()
    usr = _new_user()
    repo.insert_if_not_exists(usr, transaction)
    assert usr.id != 0

    usr.username = "user2"
    usr.password = "secret"
    usr.email = "user2@example.com"
    usr.login_attempts = 5
    usr.is_game_master = 6
    usr.max_characters = 7
    repo.update(usr, transaction)

    usr2 = repo.get_by_username(usr.username, transaction)
    assert usr2 is not None
    assert usr2.id == usr.id
    assert usr2.username == usr.username
    assert usr2.password == usr.password
    assert usr2.email == usr.email
    assert usr2.login_attempts == usr.login_attempts
    assert usr2.is_game_master == usr.is_game_master
    assert usr2.max_characters == usr.max_characters


def test_get_missing_returns_none(repo):
    transaction = repo.create_transaction()
    assert repo.get(12345, transaction) is None
    assert repo.get_by_username("nobody", transaction) is None


def test_quotes_are_escaped(repo):
    transaction = repo.create_transaction()
    usr = _new_user()
    usr.username = "o'brien"
    assert repo.insert_if_not_exists(usr, transaction) is True
    found = repo.get_by_username("o'brien", transaction)
    assert found == usr