# rair

Building blocks for the server side of a multi-user dungeon game. It has:

- data models for the database rows (`rair.models`): `DbLocation`, `User`,
  `BannedUser`, `CharacterStat`, `CharacterItem`, `DbCharacter`
- server settings and per-connection state (`rair.settings`): `Config`,
  `PerSocketData`
- repositories that build SQL for users, bans, locations, character stats and
  characters, and run it through a transaction object you supply:
  `UsersRepository`, `BannedUsersRepository`, `LocationsRepository`,
  `StatsRepository`, `CharactersRepository`, all built on
  `rair.repository.Repository`
- small helpers: text decoding and case conversion (`rair.textutil`) and a
  scope guard (`rair.scope_guard`)

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Repositories

Each repository takes a database pool. The pool must have a
`create_transaction()` method; `Repository.create_transaction()` simply calls
it. The transaction it returns must have:

- `execute(sql)`, which returns a sequence of rows
- `escape(text)`, which returns the text made safe to put inside SQL quotes

Rows are read by position, and `UsersRepository` and `BannedUsersRepository`
also read columns by name, so their rows must support both.

```python
from rair.models import User
from rair.users_repository import UsersRepository

repo = UsersRepository(pool)
transaction = repo.create_transaction()

password = "password"
usr = User(id=0, username="user", password=password, email="user@example.com",
           login_attempts=0, verification_code="code",
           max_characters=0, is_game_master=0)
if repo.insert_if_not_exists(usr, transaction):
    print("new user id", usr.id)

same = repo.get_by_username("user", transaction)
```

Lookups return `None` when no row matches, and list lookups return an empty
list. Inserts write the new id back onto the model you passed in.

Ban end times (`BannedUser.until`) are nanoseconds since the Unix epoch;
`BannedUsersRepository.is_username_or_ip_banned(username, ip, transaction)`
looks for a ban that has not yet ended and returns `None` if both `username`
and `ip` are `None`.

Characters can be loaded with their location joined in:

```python
from rair.characters_repository import CharactersRepository, IncludedTables

chars = CharactersRepository(pool)
for character in chars.get_by_user_id(user_id, IncludedTables.LOCATION, transaction):
    print(character.name, character.loc)
```

Only `IncludedTables.NONE` and `IncludedTables.LOCATION` are acted on; the
other values make the lookups return `None` (or an empty list).
`get_character` by id never joins the location.

## Helpers

```python
from rair.textutil import ascii_lower, to_utf32, utf_to_upper
from rair.scope_guard import on_leaving_scope

to_utf32(b"\xe6\xbc\xa2")   # "漢"
ascii_lower("HeLLo")        # "hello"; only A-Z are changed
utf_to_upper("straße")      # "STRAßE"; characters whose upper form is
                            # more than one character are left as they are

with on_leaving_scope(lambda: print("done")) as guard:
    ...                     # "done" prints on leaving the block,
                            # unless guard.dismiss() was called
```

## What this package does not do

It holds no database driver and no schema: you provide the pool and
transaction objects that run the SQL. It has no network server, no
message handling, no game loop and no command-line program; `Config` and
`PerSocketData` only hold values.