"""Storage of player characters."""

from __future__ import annotations

import enum
import logging
from typing import Any, List, Optional

from rair.models import DbCharacter, DbLocation
from rair.repository import DatabaseTransaction, Repository

logger = logging.getLogger(__name__)


class IncludedTables(enum.IntEnum):
    """Related tables to load together with a character."""

    NONE = 0
    STATS = 1
    LOCATION = 2
    ITEMS = 3
    ALL = 4


_CHARACTER_COLUMNS = (
    "p.id, p.user_id, p.location_id, p.slot, p.level, p.gold, p.character_name, "
    "p.allegiance, p.gender, p.alignment, p.class"
)
_SELECT_PLAIN = "SELECT {} FROM characters p ".format(_CHARACTER_COLUMNS)
_SELECT_WITH_LOCATION = (
    "SELECT {}, l.id, l.map_name, l.x, l.y FROM characters p "
    "INNER JOIN locations l ON l.id = p.location_id ".format(_CHARACTER_COLUMNS)
)

_INSERT = (
    "INSERT INTO characters (user_id, location_id, slot, level, gold, character_name, "
    "allegiance, gender, alignment, class) VALUES ({}, {}, {}, {}, {}, '{}', '{}', '{}', '{}', '{}') "
)


def _character_from_row(row: Any, with_location: bool) -> DbCharacter:
    character = DbCharacter(
        id=int(row[0]),
        user_id=int(row[1]),
        location_id=int(row[2]),
        slot=int(row[3]),
        level=int(row[4]),
        gold=int(row[5]),
        name=str(row[6]),
        allegiance=str(row[7]),
        gender=str(row[8]),
        alignment=str(row[9]),
        character_class=str(row[10]),
    )
    if with_location:
        character.loc = DbLocation(
            id=int(row[11]),
            map_name=str(row[12]),
            x=int(row[13]),
            y=int(row[14]),
        )
    return character


def _insert_values(character: DbCharacter, transaction: DatabaseTransaction) -> str:
    esc = transaction.escape
    return _INSERT.format(
        character.user_id,
        character.location_id,
        character.slot,
        character.level,
        character.gold,
        esc(character.name),
        esc(character.allegiance),
        esc(character.gender),
        esc(character.alignment),
        esc(character.character_class),
    )


def _select_for(includes: IncludedTables, where: str) -> Optional[str]:
    if includes == IncludedTables.NONE:
        return _SELECT_PLAIN + where
    if includes == IncludedTables.LOCATION:
        return _SELECT_WITH_LOCATION + where
    logger.debug("included_tables value %d not implemented", int(includes))
    return None


class CharactersRepository(Repository[DatabaseTransaction]):
    """Reads and writes rows of the ``characters`` table."""

    def _apply_upsert_result(self, character: DbCharacter, result: Any, action: str) -> bool:
        if not result:
            logger.error("%s contains %d entries", action, len(result))
            return False

        character.id = int(result[0][1])
        if int(result[0][0]) == 0:
            logger.debug("%s inserted db_character %d", action, character.id)
            return True

        logger.debug("%s did not insert db_character %d %s", action, character.id, character.name)
        return False

    def insert(self, character: DbCharacter, transaction: DatabaseTransaction) -> bool:
        """Insert ``character`` unless its slot is taken; return True if a row was created."""
        result = transaction.execute(
            _insert_values(character, transaction)
            + "ON CONFLICT (user_id, slot) DO NOTHING RETURNING xmax, id"
        )
        return self._apply_upsert_result(character, result, "insert")

    def insert_or_update_character(
        self, character: DbCharacter, transaction: DatabaseTransaction
    ) -> bool:
        """Insert ``character`` or update the one in its slot; return True if inserted."""
        esc = transaction.escape
        result = transaction.execute(
            _insert_values(character, transaction)
            + (
                "ON CONFLICT (user_id, slot) DO UPDATE SET user_id = {}, location_id = {}, level = {}, "
                "gold = {}, allegiance = '{}', gender = '{}', alignment = '{}', class = '{}' "
                "RETURNING xmax, id"
            ).format(
                character.user_id,
                character.location_id,
                character.level,
                character.gold,
                esc(character.allegiance),
                esc(character.gender),
                esc(character.alignment),
                esc(character.character_class),
            )
        )
        return self._apply_upsert_result(character, result, "insert_or_update_character")

    def update_character(self, character: DbCharacter, transaction: DatabaseTransaction) -> None:
        """Write the character's fields to the row with its id."""
        esc = transaction.escape
        transaction.execute(
            "UPDATE characters SET user_id = {}, location_id = {}, level = {}, gold = {}, "
            "allegiance = '{}', gender = '{}', alignment = '{}', class = '{}' WHERE id = {}".format(
                character.user_id,
                character.location_id,
                character.level,
                character.gold,
                esc(character.allegiance),
                esc(character.gender),
                esc(character.alignment),
                esc(character.character_class),
                character.id,
            )
        )
        logger.debug("updated db_character %d", character.id)

    def delete_character_by_slot(
        self, slot: int, user_id: int, transaction: DatabaseTransaction
    ) -> None:
        """Delete the user's character in the given slot."""
        transaction.execute(
            "DELETE FROM characters WHERE slot = {} AND user_id = {}".format(int(slot), int(user_id))
        )
        logger.debug("deleted db_character %d for user %d", slot, user_id)

    def get_character_by_name(
        self,
        name: str,
        user_id: int,
        includes: IncludedTables,
        transaction: DatabaseTransaction,
    ) -> Optional[DbCharacter]:
        """Return the user's character with this name, or None.

        Only ``NONE`` and ``LOCATION`` are supported for ``includes``.
        """
        query = _select_for(
            includes,
            "WHERE p.character_name = '{}' and p.user_id = {}".format(
                transaction.escape(name), int(user_id)
            ),
        )
        if query is None:
            return None

        result = transaction.execute(query)
        if not result:
            logger.debug("found no db_character by name %s", name)
            return None

        character = _character_from_row(result[0], includes == IncludedTables.LOCATION)
        logger.debug("found db_character by name %s with id %d", name, character.id)
        return character

    def get_character(
        self,
        id: int,
        user_id: int,
        includes: IncludedTables,
        transaction: DatabaseTransaction,
    ) -> Optional[DbCharacter]:
        """Return the user's character with this id, or None.

        Related tables are never loaded here, whatever ``includes`` says.
        """
        result = transaction.execute(
            _SELECT_PLAIN + "WHERE id = {} and user_id = {}".format(int(id), int(user_id))
        )
        if not result:
            logger.debug("found no db_character by id %d", id)
            return None

        logger.debug("found db_character by id %d", id)
        return _character_from_row(result[0], False)

    def get_character_by_slot(
        self,
        slot: int,
        user_id: int,
        includes: IncludedTables,
        transaction: DatabaseTransaction,
    ) -> Optional[DbCharacter]:
        """Return the user's character in this slot, or None.

        Only ``NONE`` and ``LOCATION`` are supported for ``includes``.
        """
        query = _select_for(
            includes, "WHERE slot = {} and user_id = {}".format(int(slot), int(user_id))
        )
        if query is None:
            return None

        result = transaction.execute(query)
        if not result:
            logger.debug("found no db_character by slot %d", slot)
            return None

        logger.debug("found db_character by slot %d for user %d", slot, user_id)
        return _character_from_row(result[0], includes == IncludedTables.LOCATION)

    def get_by_user_id(
        self,
        user_id: int,
        includes: IncludedTables,
        transaction: DatabaseTransaction,
    ) -> List[DbCharacter]:
        """Return every character of the user.

        Only ``NONE`` and ``LOCATION`` are supported for ``includes``;
        anything else gives an empty list.
        """
        query = _select_for(includes, "WHERE p.user_id = {}".format(int(user_id)))
        if query is None:
            return []

        result = transaction.execute(query)
        logger.debug("get_by_user_id contains %d entries", len(result))
        with_location = includes == IncludedTables.LOCATION
        return [_character_from_row(row, with_location) for row in result]