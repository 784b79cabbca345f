"""Small text helpers used by the scene parser."""

from __future__ import annotations

import os
from collections.abc import Iterator

_BLANKS = " \t"


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [field for field in text.split(sep) if field]


def strip_chars(text: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def trim_spaces(text: str) -> str:
    """Remove spaces and tabs from both ends of ``text``."""
    return text.strip(_BLANKS)


def has_suffix(text: str, suffix: str) -> bool:
    """Tell whether the tails of ``text`` and ``suffix`` agree.

    The comparison runs from the end over the shorter of the two strings,
    so a text that is itself a tail of ``suffix`` also matches.
    Empty strings never match.
    """
    if not text or not suffix:
        return False
    common = min(len(text), len(suffix))
    return text[-common:] == suffix[-common:]


def read_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of a file, each keeping its trailing newline."""
    with open(path, "rb") as handle:
        for raw in handle:
            yield raw.decode("utf-8", errors="replace")