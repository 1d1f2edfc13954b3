"""Insignificant character handling (RFC 4518 section 2.6).

WHY: LDAP matching must ignore leading, trailing and repeated spaces (and,
for telephone numbers, hyphens) while still distinguishing values that
differ in real content. The output of this module is built so that two
prepared values compare equal with ``==`` exactly when they match.

HOW: Every transform splits its input with segment.split_words() and hands
the words to one shared scan, ``_assemble()``. What the scan emits at the
leading edge, between words and at the trailing edge is looked up in
POLICIES, so the six entry points are one-liners:

  value      " " + "  ".join(words) + " "          empty -> "  "
  initial    " " + joined + (" " if value ends in SPACE)  empty -> " "
  final      (" " if value starts with SPACE) + joined + " "  empty -> " "
  any        conditional on both edges                  empty -> " "
  numeric    "".join(words)                             empty -> ""
  telephone  "".join(words without free hyphens)        empty -> ""

RULES:
- Interior words are always separated by exactly two SPACEs in the space
  variants, so a single SPACE only ever appears at the edges.
- Conditional edges inspect the ORIGINAL value, not the word list.
- A hyphen is kept only when the next code point is a combining mark.
- These functions do not check for prohibited code points; callers must
  run core.check_prohibited() first.
"""

from __future__ import annotations

from typing import Dict

from .classify import is_combining_mark, is_hyphen
from .models import Edge, SpacePolicy
from .segment import ends_with_space, split_words, starts_with_space
from .tables import SPACE

DOUBLE_SPACE = SPACE + SPACE


def remove_hyphens(word: str) -> str:
    """Drop every hyphen in word that is not followed by a combining mark.

    >>> remove_hyphens("1-800")
    '1800'
    """
    kept = []
    last = len(word) - 1
    for i, ch in enumerate(word):
        if is_hyphen(ch) and not (i < last and is_combining_mark(word[i + 1])):
            continue
        kept.append(ch)
    return "".join(kept)


POLICIES: Dict[str, SpacePolicy] = {
    "value": SpacePolicy(
        leading=Edge.ALWAYS, trailing=Edge.ALWAYS,
        separator=DOUBLE_SPACE, empty=DOUBLE_SPACE,
    ),
    "initial": SpacePolicy(
        leading=Edge.ALWAYS, trailing=Edge.IF_ORIGINAL,
        separator=DOUBLE_SPACE, empty=SPACE,
    ),
    "final": SpacePolicy(
        leading=Edge.IF_ORIGINAL, trailing=Edge.ALWAYS,
        separator=DOUBLE_SPACE, empty=SPACE,
    ),
    "any": SpacePolicy(
        leading=Edge.IF_ORIGINAL, trailing=Edge.IF_ORIGINAL,
        separator=DOUBLE_SPACE, empty=SPACE,
    ),
    "numeric": SpacePolicy(
        leading=Edge.NONE, trailing=Edge.NONE, separator="", empty="",
    ),
    "telephone": SpacePolicy(
        leading=Edge.NONE, trailing=Edge.NONE, separator="", empty="",
        clean_word=remove_hyphens,
    ),
}


def _edge(edge: Edge, original_has_space: bool) -> str:
    if edge is Edge.ALWAYS or (edge is Edge.IF_ORIGINAL and original_has_space):
        return SPACE
    return ""


def _assemble(value: str, policy: SpacePolicy) -> str:
    """Segment value and rebuild it according to policy."""
    words = split_words(value)
    if not words:
        return policy.empty
    if policy.clean_word is not None:
        words = [policy.clean_word(w) for w in words]
    return (
        _edge(policy.leading, starts_with_space(value))
        + policy.separator.join(words)
        + _edge(policy.trailing, ends_with_space(value))
    )


def apply_handling(value: str, handling: str) -> str:
    """Apply the transform named ``handling`` (a key of POLICIES) to value.

    Raises:
        ValueError: If handling is not a known transform name.
    """
    if handling not in POLICIES:
        raise ValueError(
            "Unknown handling '{}'. Available: {}".format(
                handling, ", ".join(POLICIES.keys())
            )
        )
    return _assemble(value, POLICIES[handling])


def apply_space_handling(value: str) -> str:
    """Attribute values and non-substring assertion values."""
    return _assemble(value, POLICIES["value"])


def apply_space_handling_initial(substr: str) -> str:
    """The initial fragment of a substring assertion."""
    return _assemble(substr, POLICIES["initial"])


def apply_space_handling_final(substr: str) -> str:
    """The final fragment of a substring assertion."""
    return _assemble(substr, POLICIES["final"])


def apply_space_handling_any(substr: str) -> str:
    """An any (middle) fragment of a substring assertion."""
    return _assemble(substr, POLICIES["any"])


def apply_numeric_string_handling(value: str) -> str:
    """numericString values: all boundary spaces are removed."""
    return _assemble(value, POLICIES["numeric"])


def apply_telephone_number_handling(value: str) -> str:
    """telephoneNumber values: boundary spaces and free hyphens are removed."""
    return _assemble(value, POLICIES["telephone"])
