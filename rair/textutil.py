"""Text decoding and case conversion helpers."""

from __future__ import annotations

from typing import Union

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def to_utf32(data: Union[bytes, str]) -> str:
    """Decode UTF-8 bytes into a string of code points.

    Raises ``UnicodeDecodeError`` (a ``ValueError``) on malformed input.
    """
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8")


def ascii_lower(text: str) -> str:
    """Lower-case only the ASCII letters A-Z, leaving everything else."""
    return text.translate(_ASCII_LOWER)


def _map_chars(text: str, convert) -> str:
    # Character-by-character mapping: a character whose conversion would
    # expand to several characters is left unchanged.
    def one(ch: str) -> str:
        mapped = convert(ch)
        return mapped if len(mapped) == 1 else ch

    return "".join(one(ch) for ch in text)


def utf_to_upper(text: str) -> str:
    """Upper-case every character that has a single-character upper form."""
    return _map_chars(text, str.upper)


def utf_to_lower(text: str) -> str:
    """Lower-case every character that has a single-character lower form."""
    return _map_chars(text, str.lower)