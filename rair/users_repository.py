"""Storage of user accounts."""

from __future__ import annotations

import logging
from typing import Any, Optional

from rair.models import User
from rair.repository import DatabaseTransaction, Repository

logger = logging.getLogger(__name__)


def _user_from_row(row: Any) -> User:
    return User(
        id=int(row["id"]),
        username=str(row["username"]),
        password=str(row["password"]),
        email=str(row["email"]),
        login_attempts=int(row["login_attempts"]),
        verification_code=str(row["verification_code"]),
        max_characters=int(row["max_characters"]),
        is_game_master=int(row["is_game_master"]),
    )


class UsersRepository(Repository[DatabaseTransaction]):
    """Reads and writes rows of the ``users`` table."""

    def insert_if_not_exists(self, usr: User, transaction: DatabaseTransaction) -> bool:
        """Insert ``usr`` and set its id; return False if it already exists."""
        esc = transaction.escape
        result = transaction.execute(
            "INSERT INTO users (username, password, email, login_attempts, verification_code, "
            "is_game_master, max_characters) VALUES ('{}', '{}', '{}', {}, '{}', {}, {}) "
            "ON CONFLICT DO NOTHING RETURNING id".format(
                esc(usr.username),
                esc(usr.password),
                esc(usr.email),
                usr.login_attempts,
                esc(usr.verification_code),
                usr.is_game_master,
                usr.max_characters,
            )
        )
        logger.debug("insert_if_not_exists contains %d entries", len(result))

        if not result:
            return False

        usr.id = int(result[0][0])
        return True

    def update(self, usr: User, transaction: DatabaseTransaction) -> None:
        """Write every field of ``usr`` to the row with its id."""
        esc = transaction.escape
        result = transaction.execute(
            "UPDATE users SET username = '{}', password = '{}', email = '{}', login_attempts = {}, "
            "verification_code = '{}', is_game_master = {}, max_characters = {} WHERE id = {}".format(
                esc(usr.username),
                esc(usr.password),
                esc(usr.email),
                usr.login_attempts,
                esc(usr.verification_code),
                usr.is_game_master,
                usr.max_characters,
                usr.id,
            )
        )
        logger.debug("update contains %d entries", len(result))

    def get(self, id: int, transaction: DatabaseTransaction) -> Optional[User]:
        """Return the user with this id, or None."""
        result = transaction.execute("SELECT * FROM users WHERE id = {}".format(int(id)))
        logger.debug("get contains %d entries", len(result))
        if not result:
            return None
        return _user_from_row(result[0])

    def get_by_username(self, username: str, transaction: DatabaseTransaction) -> Optional[User]:
        """Return the user with this username, or None."""
        result = transaction.execute(
            "SELECT * FROM users WHERE username = '{}'".format(transaction.escape(username))
        )
        logger.debug("get_by_username contains %d entries", len(result))
        if not result:
            return None
        return _user_from_row(result[0])