"""LDAP internationalized string preparation (RFC 4518).

WHY: Directory servers and clients compare attribute values under matching
rules that ignore case (sometimes), insignificant spaces and, for telephone
numbers, hyphens. Comparing raw strings gets this wrong. This package
turns a value into a canonical string so that a plain ``==`` gives the
matching rule's answer.

HOW: prepare(value, rule, position) runs the six RFC 4518 steps:
transcode, map, normalize, prohibit, check bidi, and insignificant
character handling. The individual steps and the six handling transforms
are exported as well for callers that run their own pipeline.

RULES:
- prepare() is the main public API; values_match() is a thin wrapper.
- Rules are LDAP matching rule names ("caseIgnoreMatch", ...) or presets.
- position is None, "initial", "any" or "final".
- Everything is pure and thread-safe; no global state is modified.
"""

from __future__ import annotations

from typing import Union

from .core import (
    ProhibitedCharacterError,
    TranscodeError,
    check_bidi,
    check_prohibited,
    find_prohibited,
    is_value_prohibited,
    map_characters,
    normalize,
    prepare,
    transcode,
)
from .insignificant import (
    apply_numeric_string_handling,
    apply_space_handling,
    apply_space_handling_any,
    apply_space_handling_final,
    apply_space_handling_initial,
    apply_telephone_number_handling,
)
from .models import MatchingRule
from .presets import MATCHING_RULES, get_matching_rule
from .segment import split_words

__version__ = "0.1.0"

__all__ = [
    "prepare",
    "values_match",
    "transcode",
    "map_characters",
    "normalize",
    "check_prohibited",
    "find_prohibited",
    "is_value_prohibited",
    "check_bidi",
    "split_words",
    "apply_space_handling",
    "apply_space_handling_initial",
    "apply_space_handling_final",
    "apply_space_handling_any",
    "apply_numeric_string_handling",
    "apply_telephone_number_handling",
    "MatchingRule",
    "MATCHING_RULES",
    "get_matching_rule",
    "ProhibitedCharacterError",
    "TranscodeError",
]


def values_match(
    a: Union[str, bytes],
    b: Union[str, bytes],
    rule: Union[str, MatchingRule, None] = None,
) -> bool:
    """True if a and b prepare to the same string under rule.

    Raises whatever prepare() raises; a value that fails preparation
    cannot match anything, and the caller decides how to report that.
    """
    return prepare(a, rule) == prepare(b, rule)
