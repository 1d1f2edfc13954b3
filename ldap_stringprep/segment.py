"""Word segmentation for insignificant space handling.

WHY: RFC 4518 section 2.6.1 defines a "space" as SPACE (U+0020) followed
by no combining marks. A SPACE that carries a combining mark is the base
character of a combining sequence and belongs to the text, so it must
never be treated as a separator. Every transform in insignificant.py
starts from the word list produced here.

HOW: One left-to-right pass with one code point of look-ahead. An index
is a boundary-space when it holds SPACE and the next code point is not a
combining mark. Words are the maximal runs between boundary-spaces.

RULES:
- Only U+0020 is tested. Other whitespace has already been mapped to SPACE.
- Words are never empty; an all-space or empty value yields [].
- A SPACE followed by a combining mark starts or continues a word.
- starts_with_space / ends_with_space look at the original value, not at
  the words, because a substring fragment's literal edges carry meaning.
"""

from __future__ import annotations

from typing import List, Tuple

from .classify import is_combining_mark, is_space


def is_boundary_space(value: str, index: int) -> bool:
    """True if value[index] is SPACE and is not followed by a combining mark."""
    if not is_space(value[index]):
        return False
    following = index + 1
    return following >= len(value) or not is_combining_mark(value[following])


def word_spans(value: str) -> List[Tuple[int, int]]:
    """Return half-open ``(start, end)`` index pairs for each word in value.

    A span starts at the first index that is not a boundary-space, which
    may be a SPACE carrying a combining mark, and ends at the next
    boundary-space or at the end of the value.
    """
    spans = []  # type: List[Tuple[int, int]]
    start = -1
    for i in range(len(value)):
        if is_boundary_space(value, i):
            if start != -1:
                spans.append((start, i))
                start = -1
        elif start == -1:
            start = i
    if start != -1:
        spans.append((start, len(value)))
    return spans


def split_words(value: str) -> List[str]:
    """Split value into words separated by boundary-spaces.

    >>> split_words("  foo  bar ")
    ['foo', 'bar']
    """
    return [value[start:end] for start, end in word_spans(value)]


def starts_with_space(value: str) -> bool:
    """True if value begins with a boundary-space."""
    return bool(value) and is_boundary_space(value, 0)


def ends_with_space(value: str) -> bool:
    """True if value ends with SPACE.

    A trailing SPACE has nothing after it, so it is always a boundary.
    """
    return bool(value) and is_space(value[-1])
