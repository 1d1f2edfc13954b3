"""Configuration defaults and .env loading.

WHY: Applications embedding the library usually compare values under one
matching rule most of the time. Letting that default come from the
environment means deployments can switch it without code changes.

HOW: python-dotenv loads the .env file on import. Defaults are read with
os.getenv() into module-level constants.

RULES:
- LDAP_STRINGPREP_DEFAULT_RULE names a rule from presets.MATCHING_RULES
- Unset variables fall back to caseExactMatch (the most conservative rule)
- The name is validated when it is used, not on import
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the current working directory
load_dotenv()

DEFAULT_MATCHING_RULE = os.getenv("LDAP_STRINGPREP_DEFAULT_RULE", "caseExactMatch").strip()
"""Matching rule used when prepare() is called without one."""
