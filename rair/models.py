"""Records stored in and loaded from the game database."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class DbLocation:
    """A position on a named map."""

    id: int = 0
    map_name: str = ""
    x: int = 0
    y: int = 0


@dataclass
class User:
    """An account that can own characters."""

    id: int = 0
    username: str = ""
    password: str = ""
    email: str = ""
    login_attempts: int = 0
    verification_code: str = ""
    max_characters: int = 0
    is_game_master: int = 0


@dataclass
class BannedUser:
    """A ban on an IP address and/or a user.

    ``until`` is the end of the ban in nanoseconds since the Unix epoch,
    or ``None`` when the ban has no end.
    """

    id: int = 0
    ip: str = ""
    user: Optional[User] = None
    until: Optional[int] = None


@dataclass
class CharacterStat:
    """A named numeric stat belonging to a character."""

    id: int = 0
    character_id: int = 0
    name: str = ""
    value: int = 0


@dataclass
class CharacterItem:
    """An item carried by a character."""

    id: int = 0
    name: str = ""


@dataclass
class DbCharacter:
    """A playable character owned by a user."""

    id: int = 0
    user_id: int = 0
    location_id: int = 0
    slot: int = 0
    level: int = 0
    gold: int = 0
    name: str = ""
    allegiance: str = ""
    gender: str = ""
    alignment: str = ""
    character_class: str = ""
    loc: Optional[DbLocation] = None
    stats: List[CharacterStat] = field(default_factory=list)
    items: List[CharacterItem] = field(default_factory=list)