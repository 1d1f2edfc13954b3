"""Matching rule presets for string preparation.

WHY: Callers think in LDAP matching rules ("caseIgnoreMatch",
"telephoneNumberMatch"), not in preparation flags. RFC 4518 ties each rule
to two choices: whether characters are case folded (section 2.2) and which
insignificant character handling applies (section 2.6). Keeping that
mapping as a lookup table lets a caller select a rule by name.

HOW: Each preset is a frozen MatchingRule. MATCHING_RULES maps the
lower-cased rule name to its preset, so lookups ignore case the way LDAP
schema names do.

RULES:
- Case folding applies to case ignore, numeric string and telephone number
  rules; case exact rules keep case.
- Ordering and substring rules share the preparation of their equality rule.
- Presets are frozen constants. Never mutate them at runtime.
"""

from __future__ import annotations

from typing import Dict

from .models import MatchingRule

CASE_EXACT_MATCH = MatchingRule("caseExactMatch", case_fold=False)
CASE_IGNORE_MATCH = MatchingRule("caseIgnoreMatch", case_fold=True)
NUMERIC_STRING_MATCH = MatchingRule("numericStringMatch", case_fold=True, handling="numeric")
TELEPHONE_NUMBER_MATCH = MatchingRule("telephoneNumberMatch", case_fold=True, handling="telephone")

_ALL_RULES = (
    CASE_EXACT_MATCH,
    MatchingRule("caseExactOrderingMatch", case_fold=False),
    MatchingRule("caseExactSubstringsMatch", case_fold=False),
    MatchingRule("caseExactIA5Match", case_fold=False),
    CASE_IGNORE_MATCH,
    MatchingRule("caseIgnoreOrderingMatch", case_fold=True),
    MatchingRule("caseIgnoreSubstringsMatch", case_fold=True),
    MatchingRule("caseIgnoreIA5Match", case_fold=True),
    MatchingRule("caseIgnoreIA5SubstringsMatch", case_fold=True),
    NUMERIC_STRING_MATCH,
    MatchingRule("numericStringOrderingMatch", case_fold=True, handling="numeric"),
    MatchingRule("numericStringSubstringsMatch", case_fold=True, handling="numeric"),
    TELEPHONE_NUMBER_MATCH,
    MatchingRule("telephoneNumberSubstringsMatch", case_fold=True, handling="telephone"),
)

# Keyed by lower-cased rule name
MATCHING_RULES: Dict[str, MatchingRule] = {rule.name.lower(): rule for rule in _ALL_RULES}


def get_matching_rule(name: str) -> MatchingRule:
    """Look up a matching rule preset by name, ignoring case.

    Raises:
        ValueError: If no preset exists for name.
    """
    rule = MATCHING_RULES.get(name.lower())
    if rule is None:
        raise ValueError(
            "Unknown matching rule '{}'. Available: {}".format(
                name, ", ".join(r.name for r in _ALL_RULES)
            )
        )
    return rule
