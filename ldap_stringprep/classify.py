"""Code point classification predicates.

WHY: The segmenter, the transforms and the pipeline each need to ask
"what kind of code point is this?" without caring where the answer comes
from. Funnelling every question through one small module keeps the large
tables out of the algorithmic code.

HOW: Range tables from tables.py are searched with ``bisect`` over their
start points. RFC 3454 tables that Python already ships in the stdlib
``stringprep`` module (B.2 case folding; A.1, C.3, C.4, C.5 and C.8 for
prohibition) are consulted there instead of being copied.

RULES:
- Every predicate takes a single character (a ``str`` of length 1).
- All functions are pure and hold no state; tables are read-only.
- ``case_fold`` returns None when B.2 has no mapping for the character.
"""

from __future__ import annotations

import bisect
import stringprep
from typing import Optional

from .tables import (
    COMBINING_MARK_RANGES,
    HYPHENS,
    MAP_TO_NOTHING_RANGES,
    MAP_TO_SPACE_RANGES,
    REPLACEMENT_CHARACTER,
    SPACE,
)

_COMBINING_MARK_STARTS = tuple(first for first, _ in COMBINING_MARK_RANGES)
_MAP_TO_SPACE_STARTS = tuple(first for first, _ in MAP_TO_SPACE_RANGES)
_MAP_TO_NOTHING_STARTS = tuple(first for first, _ in MAP_TO_NOTHING_RANGES)

_PROHIBITED_TABLES = (
    stringprep.in_table_a1,  # unassigned in Unicode 3.2
    stringprep.in_table_c3,  # private use
    stringprep.in_table_c4,  # non-character code points
    stringprep.in_table_c5,  # surrogate codes
    stringprep.in_table_c8,  # change display properties or deprecated
)


def in_ranges(code: int, starts: tuple[int, ...], ranges: tuple[tuple[int, int], ...]) -> bool:
    """True if ``code`` falls inside one of the sorted, disjoint ``ranges``.

    ``starts`` must be the first element of every range, in the same order.
    """
    i = bisect.bisect_right(starts, code) - 1
    return i >= 0 and code <= ranges[i][1]


def is_space(ch: str) -> bool:
    """True only for SPACE (U+0020)."""
    return ch == SPACE


def is_combining_mark(ch: str) -> bool:
    """True if ch is listed in RFC 4518 Appendix A."""
    return in_ranges(ord(ch), _COMBINING_MARK_STARTS, COMBINING_MARK_RANGES)


def is_hyphen(ch: str) -> bool:
    """True for the seven hyphen code points of RFC 4518 section 2.6.3."""
    return ord(ch) in HYPHENS


def maps_to_space(ch: str) -> bool:
    return in_ranges(ord(ch), _MAP_TO_SPACE_STARTS, MAP_TO_SPACE_RANGES)


def maps_to_nothing(ch: str) -> bool:
    return in_ranges(ord(ch), _MAP_TO_NOTHING_STARTS, MAP_TO_NOTHING_RANGES)


def case_fold(ch: str) -> Optional[str]:
    """Return the RFC 3454 B.2 mapping for ch, or None if it has none.

    The mapping may be longer than one character (e.g. "ß" -> "ss").
    """
    folded = stringprep.map_table_b2(ch)
    if folded == ch:
        return None
    return folded


def is_prohibited(ch: str) -> bool:
    """True if ch must not appear in a prepared string (RFC 4518 section 2.4)."""
    if ord(ch) == REPLACEMENT_CHARACTER:
        return True
    return any(table(ch) for table in _PROHIBITED_TABLES)
