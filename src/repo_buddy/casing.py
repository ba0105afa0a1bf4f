"""Identifier casing classification shared by every language analyzer."""

from __future__ import annotations

import re
from enum import Enum


class Casing(str, Enum):
    """Closed set of identifier casing styles."""

    UNKNOWN = "unknown"
    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "PascalCase"
    SNAKE_CASE = "snake_case"
    KEBAB_CASE = "kebab-case"
    UPPER_SNAKE_CASE = "UPPER_SNAKE_CASE"

    def __str__(self) -> str:
        return self.value


# Evaluated in order; the first match wins.
_CASING_RULES: tuple[tuple[re.Pattern[str], Casing], ...] = (
    (re.compile(r"^[A-Z0-9]+(_[A-Z0-9]+)+$"), Casing.UPPER_SNAKE_CASE),
    (re.compile(r"^[a-z][a-zA-Z0-9]*$"), Casing.CAMEL_CASE),
    (re.compile(r"^[A-Z][a-zA-Z0-9]*$"), Casing.PASCAL_CASE),
    (re.compile(r"^[a-z0-9]+(_[a-z0-9]+)*$"), Casing.SNAKE_CASE),
    (re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$"), Casing.KEBAB_CASE),
)


def classify_casing(name: str) -> Casing:
    """Classify an identifier's casing style.

    A lowercase word without separators (``"user"``) is camelCase and a
    capitalised one (``"User"``) is PascalCase, since those rules come first.

    >>> classify_casing("userName")
    <Casing.CAMEL_CASE: 'camelCase'>
    >>> classify_casing("MAX_RETRY")
    <Casing.UPPER_SNAKE_CASE: 'UPPER_SNAKE_CASE'>
    """
    for pattern, casing in _CASING_RULES:
        if pattern.fullmatch(name):
            return casing
    return Casing.UNKNOWN
