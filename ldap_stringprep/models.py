"""Data models for string preparation policies and matching rules.

WHY: The six insignificant-character transforms of RFC 4518 section 2.6
differ only in what they emit at three decision points: before the first
word, between words, and after the last word. Describing those choices as
data lets one scan serve all six, so the variants cannot drift apart.

HOW: ``Edge`` names what happens at a value edge. ``SpacePolicy`` bundles
both edges with the interior separator, the output for an empty word list,
and an optional per-word cleaner. ``MatchingRule`` ties an LDAP matching
rule name to its case folding flag and handling kind.

RULES:
- All models are frozen: policies and rules are shared, read-only constants.
- Edge.IF_ORIGINAL inspects the original value, never the word list.
- ``handling`` is one of "space", "numeric", "telephone".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


class Edge(Enum):
    """What to emit at the leading or trailing edge of a non-empty result."""

    NONE = "none"
    ALWAYS = "always"
    IF_ORIGINAL = "if_original"


@dataclass(frozen=True)
class SpacePolicy:
    """Output construction rules for one insignificant-character transform.

    Attributes:
        leading: Whether a SPACE precedes the first word.
        trailing: Whether a SPACE follows the last word.
        separator: Emitted between consecutive words.
        empty: The whole result when the value has no words.
        clean_word: Optional function applied to each word before joining.
    """

    leading: Edge
    trailing: Edge
    separator: str
    empty: str
    clean_word: Optional[Callable[[str], str]] = None


@dataclass(frozen=True)
class MatchingRule:
    """An LDAP matching rule as far as string preparation is concerned.

    Attributes:
        name: RFC 4517 rule name, e.g. "caseIgnoreMatch".
        case_fold: True if RFC 3454 B.2 case folding applies.
        handling: Insignificant character handling: "space", "numeric"
            or "telephone".
    """

    name: str
    case_fold: bool
    handling: str = "space"
