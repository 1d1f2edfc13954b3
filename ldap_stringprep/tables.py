"""Static code point tables for LDAP string preparation.

WHY: Every stage of RFC 4518 string preparation asks the same kinds of
membership questions: is this a combining mark, does it map to SPACE, does
it map to nothing, is it a hyphen. Keeping the answers as plain data, apart
from the logic that consults them, lets both humans and reviewers check the
tables against the RFC line by line.

HOW: Range tables are tuples of inclusive ``(first, last)`` code point
pairs, sorted and disjoint, so classify.py can answer membership with a
single bisect. The hyphen set is small enough to be a frozenset.

RULES:
- Tables are frozen constants, built once at import. Never mutate them.
- Range tables must stay sorted by ``first`` and must not overlap.
- Code points, not characters: every entry is an int.
- Tables from RFC 3454 that the stdlib ``stringprep`` module already ships
  (B.2, A.1, C.3, C.4, C.5, C.8) are not duplicated here.
"""

from __future__ import annotations

SPACE = " "
"""The only code point the segmenter treats as a word boundary."""

# ---------------------------------------------------------------------------
# RFC 4518 Appendix A: combining marks
# ---------------------------------------------------------------------------

COMBINING_MARK_RANGES: tuple[tuple[int, int], ...] = (
    (0x0300, 0x034F), (0x0360, 0x036F), (0x0483, 0x0486), (0x0488, 0x0489),
    (0x0591, 0x05A1), (0x05A3, 0x05B9), (0x05BB, 0x05BC), (0x05BF, 0x05BF),
    (0x05C1, 0x05C2), (0x05C4, 0x05C4), (0x064B, 0x0655), (0x0670, 0x0670),
    (0x06D6, 0x06DC), (0x06DE, 0x06E4), (0x06E7, 0x06E8), (0x06EA, 0x06ED),
    (0x0711, 0x0711), (0x0730, 0x074A), (0x07A6, 0x07B0), (0x0901, 0x0903),
    (0x093C, 0x093C), (0x093E, 0x094F), (0x0951, 0x0954), (0x0962, 0x0963),
    (0x0981, 0x0983), (0x09BC, 0x09BC), (0x09BE, 0x09C4), (0x09C7, 0x09C8),
    (0x09CB, 0x09CD), (0x09D7, 0x09D7), (0x09E2, 0x09E3), (0x0A02, 0x0A02),
    (0x0A3C, 0x0A3C), (0x0A3E, 0x0A42), (0x0A47, 0x0A48), (0x0A4B, 0x0A4D),
    (0x0A70, 0x0A71), (0x0A81, 0x0A83), (0x0ABC, 0x0ABC), (0x0ABE, 0x0AC5),
    (0x0AC7, 0x0AC9), (0x0ACB, 0x0ACD), (0x0B01, 0x0B03), (0x0B3C, 0x0B3C),
    (0x0B3E, 0x0B43), (0x0B47, 0x0B48), (0x0B4B, 0x0B4D), (0x0B56, 0x0B57),
    (0x0B82, 0x0B82), (0x0BBE, 0x0BC2), (0x0BC6, 0x0BC8), (0x0BCA, 0x0BCD),
    (0x0BD7, 0x0BD7), (0x0C01, 0x0C03), (0x0C3E, 0x0C44), (0x0C46, 0x0C48),
    (0x0C4A, 0x0C4D), (0x0C55, 0x0C56), (0x0C82, 0x0C83), (0x0CBE, 0x0CC4),
    (0x0CC6, 0x0CC8), (0x0CCA, 0x0CCD), (0x0CD5, 0x0CD6), (0x0D02, 0x0D03),
    (0x0D3E, 0x0D43), (0x0D46, 0x0D48), (0x0D4A, 0x0D4D), (0x0D57, 0x0D57),
    (0x0D82, 0x0D83), (0x0DCA, 0x0DCA), (0x0DCF, 0x0DD4), (0x0DD6, 0x0DD6),
    (0x0DD8, 0x0DDF), (0x0DF2, 0x0DF3), (0x0E31, 0x0E31), (0x0E34, 0x0E3A),
    (0x0E47, 0x0E4E), (0x0EB1, 0x0EB1), (0x0EB4, 0x0EB9), (0x0EBB, 0x0EBC),
    (0x0EC8, 0x0ECD), (0x0F18, 0x0F19), (0x0F35, 0x0F35), (0x0F37, 0x0F37),
    (0x0F39, 0x0F39), (0x0F3E, 0x0F3F), (0x0F71, 0x0F84), (0x0F86, 0x0F87),
    (0x0F90, 0x0F97), (0x0F99, 0x0FBC), (0x0FC6, 0x0FC6), (0x102C, 0x1032),
    (0x1036, 0x1039), (0x1056, 0x1059), (0x1712, 0x1714), (0x1732, 0x1734),
    (0x1752, 0x1753), (0x1772, 0x1773), (0x17B4, 0x17D3), (0x180B, 0x180D),
    (0x18A9, 0x18A9), (0x20D0, 0x20EA), (0x302A, 0x302F), (0x3099, 0x309A),
    (0xFB1E, 0xFB1E), (0xFE00, 0xFE0F), (0xFE20, 0xFE23), (0x1D165, 0x1D169),
    (0x1D16D, 0x1D172), (0x1D17B, 0x1D182), (0x1D185, 0x1D18B), (0x1D1AA, 0x1D1AD),
)

# ---------------------------------------------------------------------------
# RFC 4518 section 2.2: code points mapped to SPACE
# ---------------------------------------------------------------------------

# TAB, LF, VT, FF, CR and NEL, followed by every Zs, Zl and Zp code point.
MAP_TO_SPACE_RANGES: tuple[tuple[int, int], ...] = (
    (0x0009, 0x000D), (0x0020, 0x0020), (0x0085, 0x0085), (0x00A0, 0x00A0),
    (0x1680, 0x1680), (0x2000, 0x200A), (0x2028, 0x2029), (0x202F, 0x202F),
    (0x205F, 0x205F), (0x3000, 0x3000),
)

# ---------------------------------------------------------------------------
# RFC 4518 section 2.2: code points mapped to nothing
# ---------------------------------------------------------------------------

# Soft hyphens, joiners, variation selectors (FE00-FE0F per errata), the
# object replacement character, ZERO WIDTH SPACE and all Cc / Cf code points
# that are not already mapped to SPACE.
MAP_TO_NOTHING_RANGES: tuple[tuple[int, int], ...] = (
    (0x0000, 0x0008), (0x000E, 0x001F), (0x007F, 0x0084), (0x0086, 0x009F),
    (0x00AD, 0x00AD), (0x034F, 0x034F), (0x06DD, 0x06DD), (0x070F, 0x070F),
    (0x1806, 0x1806), (0x180B, 0x180E), (0x200B, 0x200F), (0x202A, 0x202E),
    (0x2060, 0x2063), (0x206A, 0x206F), (0xFE00, 0xFE0F), (0xFEFF, 0xFEFF),
    (0xFFF9, 0xFFFC), (0x1D173, 0x1D17A), (0xE0001, 0xE0001),
    (0xE0020, 0xE007F),
)

# ---------------------------------------------------------------------------
# RFC 4518 section 2.4: prohibited code points outside RFC 3454
# ---------------------------------------------------------------------------

REPLACEMENT_CHARACTER = 0xFFFD

# ---------------------------------------------------------------------------
# RFC 4518 section 2.6.3: hyphens
# ---------------------------------------------------------------------------

HYPHENS: frozenset[int] = frozenset({
    0x002D,  # HYPHEN-MINUS
    0x058A,  # ARMENIAN HYPHEN
    0x2010,  # HYPHEN
    0x2011,  # NON-BREAKING HYPHEN
    0x2212,  # MINUS SIGN
    0xFE63,  # SMALL HYPHEN-MINUS
    0xFF0D,  # FULLWIDTH HYPHEN-MINUS
})
