"""
Deterministic repair rules.

This file exists to make non-goals explicit and enforceable.
"""

TARGET_ENCODING = "utf-8"

# Only one option is recognised by fix_latin().
KNOWN_OPTIONS = frozenset({"bytes_only"})

ASCII_MAX = 0x7F
CONT_MIN, CONT_MAX = 0x80, 0xBF

# (lead byte low, lead byte high, continuation bytes), in match precedence order.
# The 5-byte form predates RFC 3629 and is accepted on purpose.
UTF8_LEADS = (
    (0xC0, 0xDF, 1),
    (0xE0, 0xEF, 2),
    (0xF0, 0xF7, 3),
    (0xF8, 0xFB, 4),
)
