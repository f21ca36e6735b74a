"""Server configuration and per-connection state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

WebSocket = TypeVar("WebSocket")


@dataclass
class Config:
    """Settings the server is started with."""

    address: str = ""
    port: int = 0
    debug_level: str = ""
    connection_string: str = ""
    tick_length: int = 0
    log_tick_times: bool = False
    use_ssl: bool = False


@dataclass
class PerSocketData(Generic[WebSocket]):
    """State kept for one open client connection."""

    connection_id: int = 0
    user_id: int = 0
    subscription_tier: int = 0
    is_tester: bool = False
    is_game_master: bool = False
    playing_character_slot: int = 0
    username: str = ""
    ws: Optional[WebSocket] = None