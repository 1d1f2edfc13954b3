"""The RFC 4518 six-step string preparation pipeline.

WHY: A value must pass through every preparation step, in order, before
insignificant character handling makes it byte-comparable. Each step is
exposed on its own so callers (and tests) can run part of the pipeline,
and prepare() strings them together for the common case.

HOW: Six steps, each a function from str to str:
  1. transcode()         bytes -> str (UTF-8); str passes through
  2. map_characters()    map to SPACE, map to nothing, optional case fold
  3. normalize()         Unicode NFKC
  4. check_prohibited()  raise ProhibitedCharacterError on a bad code point
  5. check_bidi()        identity; RFC 4518 requires no change here
  6. insignificant.apply_handling()  chosen by matching rule and position

RULES:
- prepare() never mutates its input and keeps no state between calls.
- Prohibited code points are rejected before step 6 runs.
- Numeric string and telephone number rules ignore the substring position;
  RFC 4518 applies the same handling to every fragment.
- Exceptions are ValueError subclasses so callers can catch bad input in
  one place.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Optional, Union

from . import config
from .classify import case_fold, is_prohibited, maps_to_nothing, maps_to_space
from .insignificant import apply_handling
from .models import MatchingRule
from .presets import get_matching_rule
from .tables import SPACE

logger = logging.getLogger(__name__)

SUBSTRING_POSITIONS = ("initial", "any", "final")


class TranscodeError(ValueError):
    """Raised when a byte string is not valid UTF-8.

    WHY: LDAP directory strings travel as UTF-8. An undecodable value
    cannot be prepared and must be rejected, not silently repaired.

    HOW: Raised by transcode() from the underlying UnicodeDecodeError.

    RULES:
    - The original UnicodeDecodeError is chained as __cause__
    """


class ProhibitedCharacterError(ValueError):
    """Raised when a value contains a prohibited code point.

    WHY: RFC 4518 section 2.4 says a value containing a prohibited code
    point fails to prepare, so no match can succeed against it.

    HOW: Raised by check_prohibited() for the first offending character.

    RULES:
    - character and index identify the first prohibited code point
    - The message uses the "U+XXXX 'c'" form
    """

    def __init__(self, character: str, index: int) -> None:
        self.character = character
        self.index = index
        super().__init__(
            "U+{:04X} {!r} is a prohibited character".format(ord(character), character)
        )


def transcode(value: Union[str, bytes]) -> str:
    """Step 1: return value as a str of Unicode code points.

    Raises:
        TranscodeError: If value is bytes that are not valid UTF-8.
        TypeError: If value is neither str nor bytes.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TranscodeError("Value is not valid UTF-8: {}".format(exc)) from exc
    raise TypeError("Expected str or bytes, got {}".format(type(value).__name__))


def map_characters(value: str, case_folding: bool = False) -> str:
    """Step 2: apply the RFC 4518 section 2.2 character mappings.

    Whitespace-like code points become SPACE, control and formatting code
    points are removed, and with ``case_folding`` the RFC 3454 B.2 table
    is applied to everything else.
    """
    out = []
    for ch in value:
        if maps_to_space(ch):
            out.append(SPACE)
            continue
        if maps_to_nothing(ch):
            continue
        if case_folding:
            folded = case_fold(ch)
            if folded is not None:
                out.append(folded)
                continue
        out.append(ch)
    return "".join(out)


def normalize(value: str) -> str:
    """Step 3: normalize to Unicode Normalization Form KC."""
    if unicodedata.is_normalized("NFKC", value):
        return value
    return unicodedata.normalize("NFKC", value)


def find_prohibited(value: str) -> Optional[int]:
    """Return the index of the first prohibited code point, or None."""
    for i, ch in enumerate(value):
        if is_prohibited(ch):
            return i
    return None


def is_value_prohibited(value: str) -> bool:
    """True if value contains any prohibited code point."""
    return find_prohibited(value) is not None


def check_prohibited(value: str) -> str:
    """Step 4: return value unchanged, or raise if it holds a prohibited code point.

    Raises:
        ProhibitedCharacterError: For the first prohibited code point.
    """
    index = find_prohibited(value)
    if index is not None:
        logger.debug("Rejecting value: prohibited U+%04X at index %d", ord(value[index]), index)
        raise ProhibitedCharacterError(value[index], index)
    return value


def check_bidi(value: str) -> str:
    """Step 5: bidirectional check. RFC 4518 section 2.5 makes this a no-op."""
    return value


def resolve_rule(rule: Union[str, MatchingRule, None]) -> MatchingRule:
    """Turn a rule name, a MatchingRule or None (configured default) into a MatchingRule."""
    if rule is None:
        return get_matching_rule(config.DEFAULT_MATCHING_RULE)
    if isinstance(rule, MatchingRule):
        return rule
    return get_matching_rule(rule)


def _handling_for(rule: MatchingRule, position: Optional[str]) -> str:
    if position is not None and position not in SUBSTRING_POSITIONS:
        raise ValueError(
            "Unknown substring position '{}'. Available: {}".format(
                position, ", ".join(SUBSTRING_POSITIONS)
            )
        )
    if rule.handling != "space":
        return rule.handling
    return position if position is not None else "value"


def prepare(
    value: Union[str, bytes],
    rule: Union[str, MatchingRule, None] = None,
    position: Optional[str] = None,
) -> str:
    """Run all six preparation steps and return the canonical string.

    WHY: This is the one call a directory server or client needs before
    comparing a stored value with an assertion value.

    HOW: Resolves the matching rule, then runs transcode -> map ->
    normalize -> prohibit -> bidi -> insignificant character handling.

    RULES:
    - position is None for attribute values and non-substring assertion
      values, or "initial" / "any" / "final" for substring fragments.
    - Two values match under a rule exactly when their prepared forms
      are equal.

    Args:
        value: The value as str, or UTF-8 encoded bytes.
        rule: Matching rule name or preset. None uses config.DEFAULT_MATCHING_RULE.
        position: Substring fragment position, or None.

    Returns:
        The prepared string.

    Raises:
        ValueError: Unknown rule name or position.
        TranscodeError: value is bytes that are not valid UTF-8.
        ProhibitedCharacterError: value contains a prohibited code point.
    """
    matching_rule = resolve_rule(rule)
    handling = _handling_for(matching_rule, position)
    logger.debug("Preparing value for %s (handling=%s)", matching_rule.name, handling)

    text = transcode(value)
    text = map_characters(text, matching_rule.case_fold)
    text = normalize(text)
    text = check_prohibited(text)
    text = check_bidi(text)
    return apply_handling(text, handling)
