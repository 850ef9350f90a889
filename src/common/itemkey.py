"""Parsing of agent item keys such as ``vfs.file.size[/var/log/syslog,lines]``."""
from __future__ import annotations

from typing import List, Tuple

from .errors import ItemKeyError

_KEY_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_.-")


def parse_item_key(text: str) -> Tuple[str, List[str]]:
    """Split an item key into its name and positional parameters.

    ``key`` yields no parameters and ``key[]`` yields a single empty one.
    Quoted parameters may contain commas and brackets; ``\\"`` is the only
    escape inside quotes.
    """

    pos = 0
    while pos < len(text) and text[pos] in _KEY_CHARS:
        pos += 1
    if pos == 0:
        raise ItemKeyError(text, "missing key name")
    name = text[:pos]
    if pos == len(text):
        return name, []
    if text[pos] != "[":
        raise ItemKeyError(text, f"unexpected character '{text[pos]}' at position {pos}")
    params, end = _parse_params(text, pos + 1)
    if end != len(text):
        raise ItemKeyError(text, "unexpected text after closing bracket")
    return name, params


def _parse_params(text: str, pos: int) -> Tuple[List[str], int]:
    params: List[str] = []
    while True:
        while pos < len(text) and text[pos] == " ":
            pos += 1
        if pos >= len(text):
            raise ItemKeyError(text, "missing closing bracket")
        if text[pos] == '"':
            value, pos = _parse_quoted(text, pos + 1)
            while pos < len(text) and text[pos] == " ":
                pos += 1
        elif text[pos] == "[":
            raise ItemKeyError(text, "nested parameter arrays are not supported")
        else:
            value, pos = _parse_unquoted(text, pos)
        params.append(value)
        if pos >= len(text):
            raise ItemKeyError(text, "missing closing bracket")
        if text[pos] == "]":
            return params, pos + 1
        if text[pos] != ",":
            raise ItemKeyError(text, f"unexpected character '{text[pos]}' at position {pos}")
        pos += 1


def _parse_quoted(text: str, pos: int) -> Tuple[str, int]:
    chars: List[str] = []
    while pos < len(text):
        ch = text[pos]
        if ch == "\\" and pos + 1 < len(text) and text[pos + 1] == '"':
            chars.append('"')
            pos += 2
            continue
        if ch == '"':
            return "".join(chars), pos + 1
        chars.append(ch)
        pos += 1
    raise ItemKeyError(text, "unterminated quoted parameter")


def _parse_unquoted(text: str, pos: int) -> Tuple[str, int]:
    start = pos
    while pos < len(text) and text[pos] not in ",]":
        if text[pos] == '"':
            raise ItemKeyError(text, f"unexpected quote at position {pos}")
        pos += 1
    return text[start:pos], pos
