"""Storage of character stats."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from rair.models import CharacterStat
from rair.repository import DatabaseTransaction, Repository

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = "SELECT s.id, s.character_id, s.stat_name, s.value FROM character_stats s"


def _stat_from_row(row: Any) -> CharacterStat:
    return CharacterStat(
        id=int(row[0]),
        character_id=int(row[1]),
        name=str(row[2]),
        value=int(row[3]),
    )


class StatsRepository(Repository[DatabaseTransaction]):
    """Reads and writes rows of the ``character_stats`` table."""

    def insert(self, stat: CharacterStat, transaction: DatabaseTransaction) -> None:
        """Insert ``stat`` and set its id from the new row."""
        result = transaction.execute(
            "INSERT INTO character_stats (character_id, stat_name, value) VALUES ({}, '{}', {}) RETURNING id".format(
                stat.character_id, transaction.escape(stat.name), stat.value
            )
        )

        if not result:
            logger.error("insert contains %d entries", len(result))
            return

        stat.id = int(result[0][0])
        logger.debug("inserted stat %d", stat.id)

    def update(self, stat: CharacterStat, transaction: DatabaseTransaction) -> None:
        """Write the value of ``stat`` to the row with its id."""
        transaction.execute(
            "UPDATE character_stats SET value = {} WHERE id = {}".format(stat.value, stat.id)
        )
        logger.debug("updated stat %d", stat.id)

    def get(self, id: int, transaction: DatabaseTransaction) -> Optional[CharacterStat]:
        """Return the stat with this id, or None."""
        result = transaction.execute("{} WHERE s.id = {}".format(_SELECT_COLUMNS, int(id)))

        if not result:
            logger.error("found no stat by id %d", id)
            return None

        logger.debug("found stat by id %d", id)
        return _stat_from_row(result[0])

    def get_by_character_id(
        self, character_id: int, transaction: DatabaseTransaction
    ) -> List[CharacterStat]:
        """Return every stat belonging to the character."""
        result = transaction.execute(
            "{} WHERE s.character_id = {}".format(_SELECT_COLUMNS, int(character_id))
        )
        logger.debug("get_by_character_id contains %d entries", len(result))
        return [_stat_from_row(row) for row in result]