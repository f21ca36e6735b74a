"""Storage of bans on users and IP addresses."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Sequence

from rair.models import BannedUser, User
from rair.repository import DatabaseTransaction, Repository

logger = logging.getLogger(__name__)


def _column_values(usr: BannedUser, transaction: DatabaseTransaction) -> tuple:
    ip = "'" + transaction.escape(usr.ip) + "'" if usr.ip else "NULL"
    user_id = str(usr.user.id) if usr.user is not None else "NULL"
    until = str(usr.until) if usr.until is not None else "NULL"
    return ip, user_id, until


def _ban_from_lookup(result: Sequence[Any]) -> Optional[BannedUser]:
    if not result:
        return None
    row = result[0]
    ip = str(row["ip"]) if row["ip"] is not None else ""
    until = int(row["until"]) if row["until"] is not None else None
    return BannedUser(int(row["id"]), ip, User(), until)


class BannedUsersRepository(Repository[DatabaseTransaction]):
    """Reads and writes rows of the ``banned_users`` table.

    Ban end times are nanoseconds since the Unix epoch.
    """

    def insert_if_not_exists(self, usr: BannedUser, transaction: DatabaseTransaction) -> bool:
        """Insert the ban and set its id; return False if nothing was inserted."""
        ip, user_id, until = _column_values(usr, transaction)
        result = transaction.execute(
            "INSERT INTO banned_users (ip, user_id, until) VALUES ({}, {}, {}) RETURNING id".format(
                ip, user_id, until
            )
        )
        logger.debug("insert_if_not_exists contains %d entries", len(result))

        if not result:
            return False

        usr.id = int(result[0][0])
        return True

    def update(self, usr: BannedUser, transaction: DatabaseTransaction) -> None:
        """Write the ban's ip, user and end time to the table."""
        ip, user_id, until = _column_values(usr, transaction)
        result = transaction.execute(
            "UPDATE banned_users SET ip = {}, user_id = {}, until = {}".format(ip, user_id, until)
        )
        logger.debug("update contains %d entries", len(result))

    def get(self, id: int, transaction: DatabaseTransaction) -> Optional[BannedUser]:
        """Return the ban with this id, or None."""
        result = transaction.execute(
            "SELECT id, ip, user_id, until FROM banned_users WHERE id = {}".format(int(id))
        )
        logger.debug("get contains %d entries", len(result))

        if not result:
            return None

        row = result[0]
        ip = str(row["ip"]) if row["ip"] is not None else ""
        user = User(id=int(row["user_id"])) if row["user_id"] is not None else None
        until = int(row["until"]) if row["until"] is not None else None
        return BannedUser(int(row["id"]), ip, user, until)

    def is_username_or_ip_banned(
        self,
        username: Optional[str],
        ip: Optional[str],
        transaction: DatabaseTransaction,
    ) -> Optional[BannedUser]:
        """Return an active ban matching the username or the IP, or None."""
        if username is None and ip is None:
            logger.error("is_username_or_ip_banned called without arguments")
            return None

        now = time.time_ns()
        esc = transaction.escape

        if username is not None and ip is not None:
            query = (
                "SELECT bu.id as id, bu.ip, until FROM banned_users bu "
                "LEFT JOIN users u ON bu.user_id = u.id AND u.username = '{}' "
                "WHERE bu.until >= {} AND (u.id IS NOT NULL OR bu.ip = '{}')"
            ).format(esc(username), now, esc(ip))
        elif username is not None:
            query = (
                "SELECT bu.id as id, bu.ip, until FROM banned_users bu "
                "LEFT JOIN users u ON bu.user_id = u.id AND u.username = '{}' "
                "WHERE bu.until >= {} AND u.id IS NOT NULL"
            ).format(esc(username), now)
        else:
            query = (
                "SELECT bu.id as id, bu.ip, until FROM banned_users bu "
                "WHERE bu.until >= {} AND bu.ip = '{}'"
            ).format(now, esc(ip))

        result = transaction.execute(query)
        logger.debug("is_username_or_ip_banned contains %d entries", len(result))
        return _ban_from_lookup(result)