"""String-literal duplication within one file."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable

from ..models import DRYAnalysis, add_unique

# Literals whose content is this long or shorter are ignored.
MIN_LITERAL_LENGTH = 10
SCORE_PER_REPEAT = 0.1
_PREVIEW_LENGTH = 60

_QUOTED = re.compile(r'^[A-Za-z]*("""|\'\'\'|"|\'|`)(.*)\1$', re.DOTALL)


def unquote(literal: str) -> str:
    """Strip string prefixes (r, b, f, ...) and matching quotes from a literal."""
    match = _QUOTED.match(literal)
    if match is None:
        return literal
    return match.group(2)


def record_duplicates(literals: Iterable[str], dry: DRYAnalysis) -> None:
    """Add one block and 0.1 per extra occurrence for each repeated literal.

    Args:
        literals: Raw literal texts, quotes included, in source order
        dry: File-scoped duplication record to update
    """
    counts = Counter(
        content for content in (unquote(text) for text in literals)
        if len(content) > MIN_LITERAL_LENGTH
    )
    for content, count in counts.items():
        if count < 2:
            continue
        preview = content if len(content) <= _PREVIEW_LENGTH else content[:_PREVIEW_LENGTH] + "..."
        preview = preview.replace("\n", "\\n")
        add_unique(dry.duplicated_blocks, f'String literal "{preview}" repeated {count} times')
        dry.duplication_score += SCORE_PER_REPEAT * (count - 1)
