import re

import pytest

from rair.locations_repository import LocationsRepository
from rair.models import DbLocation

_QUOTED = r"'((?:[^']|'')*)'"


def _unescape(text):
    return text.replace("''", "'")


class FakeLocationsTransaction:
    def __init__(self):
        self.rows = {}
        self.next_id = 1
        self.queries = []
        self.fail_inserts = False

    def escape(self, text):
        return text.replace("'", "''")

    def execute(self, query):
        self.queries.append(query)
        m = re.fullmatch(
            r"INSERT INTO locations \(map_name, x, y\) VALUES \(" + _QUOTED + r", (\d+), (\d+)\) RETURNING id",
            query,
        )
        if m:
            if self.fail_inserts:
                return []
            new_id = self.next_id
            self.next_id += 1
            self.rows[new_id] = [_unescape(m.group(1)), int(m.group(2)), int(m.group(3))]
            return [(new_id,)]
        m = re.fullmatch(
            r"UPDATE locations SET map_name = " + _QUOTED + r", x = (\d+), y = (\d+) WHERE id = (\d+)",
            query,
        )
        if m:
            row_id = int(m.group(4))
            if row_id in self.rows:
                self.rows[row_id] = [_unescape(m.group(1)), int(m.group(2)), int(m.group(3))]
            return []
        m = re.fullmatch(r"SELECT l\.id, l\.map_name, l\.x, l\.y FROM locations l WHERE id = (\d+)", query)
        if m:
            row_id = int(m.group(1))
            if row_id not in self.rows:
                return []
            return [(row_id, *self.rows[row_id])]
        m = re.fullmatch(
            r"SELECT l\.id, l\.map_name, l\.x, l\.y FROM locations l WHERE map_name = " + _QUOTED,
            query,
        )
        if m:
            name = _unescape(m.group(1))
            return [(row_id, *row) for row_id, row in self.rows.items() if row[0] == name]
        raise AssertionError("unexpected query: " + query)


class FakePool:
    def __init__(self):
        self.transaction = FakeLocationsTransaction()

    def create_transaction(self):
        return self.transaction


@pytest.fixture
def repo():
    return LocationsRepository(FakePool())


def test_location_inserted_correctly(repo):
    transaction = repo.create_transaction()
    loc = DbLocation(0, "load_map name", 10, 10)
    repo.insert(loc, transaction)
    assert loc.id != 0

    loc2 = repo.get(loc.id, transaction)
    assert loc2.id == loc.id
    assert loc2.map_name == loc.map_name
    assert loc2.x == loc.x
    assert loc2.y == loc.y


def test_update_location(repo):
    transaction = repo.create_transaction()
    loc = DbLocation(0, "load_map name", 10, 10)
    repo.insert(loc, transaction)
    assert loc.id != 0

    loc.map_name = "map2"
    loc.x = 11
    loc.y = 11
    repo.update(loc, transaction)

    loc2 = repo.get(loc.id, transaction)
    assert loc2.id == loc.id
    assert loc2.map_name == "map2"
    assert loc2.x == 11
    assert loc2.y == 11


def test_insert_query_text(repo):
    transaction = repo.create_transaction()
    repo.insert(DbLocation(0, "town", 3, 4), transaction)
    assert transaction.queries[-1] == "INSERT INTO locations (map_name, x, y) VALUES ('town', 3, 4) RETURNING id"


def test_get_missing_location_returns_none(repo):
    transaction = repo.create_transaction()
    assert repo.get(42, transaction) is None


def test_insert_without_result_keeps_id(repo):
    transaction = repo.create_transaction()
    transaction.fail_inserts = True
    loc = DbLocation(0, "map", 1, 2)
    repo.insert(loc, transaction)
    assert loc.id == 0


def test_map_name_with_quote_round_trips(repo):
    transaction = repo.create_transaction()
    loc = DbLocation(0, "o'brien's keep", 5, 6)
    repo.insert(loc, transaction)
    assert repo.get(loc.id, transaction).map_name == "o'brien's keep"


def test_get_by_map_name_returns_each_matching_row(repo):
    transaction = repo.create_transaction()
    first = DbLocation(0, "tutorial", 1, 2)
    other = DbLocation(0, "elsewhere", 9, 9)
    second = DbLocation(0, "tutorial", 3, 4)
    for loc in (first, other, second):
        repo.insert(loc, transaction)

    found = repo.get_by_map_name("tutorial", transaction)
    assert found == [first, second]


def test_get_by_map_name_without_matches_is_empty(repo):
    transaction = repo.create_transaction()
    repo.insert(DbLocation(0, "tutorial", 1, 2), transaction)
    assert repo.get_by_map_name("nowhere", transaction) == []