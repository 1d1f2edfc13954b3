"""Shared test fixtures for the ldap_stringprep test suite.

WHY: Many tests need the same awkward code points (combining marks,
exotic spaces, hyphen look-alikes). Spelling them once here keeps the
tests readable and avoids typos in escape sequences.

HOW: Module-level constants for the code points, plus a fixture that pins
the configured default matching rule for tests that rely on it.

RULES:
- Constants are plain str values; import them from conftest directly.
- Tests never depend on a developer's .env file: use default_rule.
"""

import pytest

from ldap_stringprep import config

# COMBINING ACUTE ACCENT, listed in RFC 4518 Appendix A
COMBINING_MARK = "\u0301"
# MUSICAL SYMBOL COMBINING STEM, a combining mark outside the BMP
COMBINING_MARK_ASTRAL = "\U0001D165"
NO_BREAK_SPACE = "\u00a0"
IDEOGRAPHIC_SPACE = "\u3000"
SOFT_HYPHEN = "\u00ad"
ZERO_WIDTH_SPACE = "\u200b"
REPLACEMENT_CHARACTER = "\ufffd"
PRIVATE_USE = "\ue000"

HYPHEN_CHARACTERS = [
    "-",  # HYPHEN-MINUS
    "\u058a",  # ARMENIAN HYPHEN
    "\u2010",  # HYPHEN
    "\u2011",  # NON-BREAKING HYPHEN
    "\u2212",  # MINUS SIGN
    "\ufe63",  # SMALL HYPHEN-MINUS
    "\uff0d",  # FULLWIDTH HYPHEN-MINUS
]


@pytest.fixture
def default_rule(monkeypatch):
    """Pin config.DEFAULT_MATCHING_RULE to caseExactMatch; returns a setter."""
    monkeypatch.setattr(config, "DEFAULT_MATCHING_RULE", "caseExactMatch")

    def _set(name):
        monkeypatch.setattr(config, "DEFAULT_MATCHING_RULE", name)

    return _set
