"""Small string helpers: delimiter splitting and repeated removal/replacement."""

from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

T = TypeVar("T")


def split(text: str, delim: str, converter: Optional[Callable[[str], T]] = None) -> List[T]:
    """Split ``text`` on a single-character delimiter and convert each piece.

    Empty pieces between delimiters are kept, but a trailing empty piece
    (text ending in the delimiter, or empty text) is dropped.
    """
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    pieces = text.split(delim)
    if pieces[-1] == "":
        pieces.pop()
    if converter is None:
        return list(pieces)
    return [converter(piece) for piece in pieces]


def remove_all(text: str, to_remove: str) -> str:
    """Remove ``to_remove`` repeatedly until it no longer occurs in ``text``.

    Removal restarts from the beginning each time, so occurrences formed
    by earlier removals are removed as well.
    """
    if not to_remove:
        raise ValueError("the text to remove must not be empty")
    while True:
        index = text.find(to_remove)
        if index < 0:
            return text
        text = text[:index] + text[index + len(to_remove):]


def replace_all(text: str, to_replace: str, replacement: str) -> str:
    """Replace ``to_replace`` repeatedly until it no longer occurs in ``text``."""
    if not to_replace:
        raise ValueError("the text to replace must not be empty")
    if to_replace in replacement:
        raise ValueError("the replacement contains the text being replaced")
    while True:
        index = text.find(to_replace)
        if index < 0:
            return text
        text = text[:index] + replacement + text[index + len(to_replace):]