"""Storage of map locations."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from rair.models import DbLocation
from rair.repository import DatabaseTransaction, Repository

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = "SELECT l.id, l.map_name, l.x, l.y FROM locations l"


def _location_from_row(row: Any) -> DbLocation:
    return DbLocation(
        id=int(row[0]),
        map_name=str(row[1]),
        x=int(row[2]),
        y=int(row[3]),
    )


class LocationsRepository(Repository[DatabaseTransaction]):
    """Reads and writes rows of the ``locations`` table."""

    def insert(self, loc: DbLocation, transaction: DatabaseTransaction) -> None:
        """Insert ``loc`` and set its id from the new row."""
        result = transaction.execute(
            "INSERT INTO locations (map_name, x, y) VALUES ('{}', {}, {}) RETURNING id".format(
                transaction.escape(loc.map_name), loc.x, loc.y
            )
        )

        if not result:
            logger.error("insert contains %d entries", len(result))
            return

        loc.id = int(result[0][0])
        logger.debug("inserted location %d", loc.id)

    def update(self, loc: DbLocation, transaction: DatabaseTransaction) -> None:
        """Write the map name and coordinates of ``loc`` to the row with its id."""
        transaction.execute(
            "UPDATE locations SET map_name = '{}', x = {}, y = {} WHERE id = {}".format(
                transaction.escape(loc.map_name), loc.x, loc.y, loc.id
            )
        )
        logger.debug("updated location %d", loc.id)

    def get(self, id: int, transaction: DatabaseTransaction) -> Optional[DbLocation]:
        """Return the location with this id, or None."""
        result = transaction.execute("{} WHERE id = {}".format(_SELECT_COLUMNS, int(id)))

        if not result:
            logger.error("found no location by id %d", id)
            return None

        logger.debug("found location by id %d", id)
        return _location_from_row(result[0])

    def get_by_map_name(self, map_name: str, transaction: DatabaseTransaction) -> List[DbLocation]:
        """Return every location on the named map."""
        result = transaction.execute(
            "{} WHERE map_name = '{}'".format(_SELECT_COLUMNS, transaction.escape(map_name))
        )
        logger.debug("get_by_map_name contains %d entries", len(result))
        return [_location_from_row(row) for row in result]