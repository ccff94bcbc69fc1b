"""
Byte substitution table for legacy single bytes 0x80-0xFF.

Every byte defaults to the Latin-1 character with the same code point.
Bytes in 0x80-0x9F that CP1252 defines as printable characters are
overridden with the CP1252 character instead. 0x81, 0x8D, 0x8F, 0x90 and
0x9D are undefined in CP1252 and keep the Latin-1 default.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# From http://unicode.org/Public/MAPPINGS/VENDORS/MICSFT/WINDOWS/CP1252.TXT
CP1252_OVERRIDES: Mapping[int, bytes] = MappingProxyType({
    0x80: b"\xe2\x82\xac",  # EURO SIGN
    0x82: b"\xe2\x80\x9a",  # SINGLE LOW-9 QUOTATION MARK
    0x83: b"\xc6\x92",      # LATIN SMALL LETTER F WITH HOOK
    0x84: b"\xe2\x80\x9e",  # DOUBLE LOW-9 QUOTATION MARK
    0x85: b"\xe2\x80\xa6",  # HORIZONTAL ELLIPSIS
    0x86: b"\xe2\x80\xa0",  # DAGGER
    0x87: b"\xe2\x80\xa1",  # DOUBLE DAGGER
    0x88: b"\xcb\x86",      # MODIFIER LETTER CIRCUMFLEX ACCENT
    0x89: b"\xe2\x80\xb0",  # PER MILLE SIGN
    0x8A: b"\xc5\xa0",      # LATIN CAPITAL LETTER S WITH CARON
    0x8B: b"\xe2\x80\xb9",  # SINGLE LEFT-POINTING ANGLE QUOTATION MARK
    0x8C: b"\xc5\x92",      # LATIN CAPITAL LIGATURE OE
    0x8E: b"\xc5\xbd",      # LATIN CAPITAL LETTER Z WITH CARON
    0x91: b"\xe2\x80\x98",  # LEFT SINGLE QUOTATION MARK
    0x92: b"\xe2\x80\x99",  # RIGHT SINGLE QUOTATION MARK
    0x93: b"\xe2\x80\x9c",  # LEFT DOUBLE QUOTATION MARK
    0x94: b"\xe2\x80\x9d",  # RIGHT DOUBLE QUOTATION MARK
    0x95: b"\xe2\x80\xa2",  # BULLET
    0x96: b"\xe2\x80\x93",  # EN DASH
    0x97: b"\xe2\x80\x94",  # EM DASH
    0x98: b"\xcb\x9c",      # SMALL TILDE
    0x99: b"\xe2\x84\xa2",  # TRADE MARK SIGN
    0x9A: b"\xc5\xa1",      # LATIN SMALL LETTER S WITH CARON
    0x9B: b"\xe2\x80\xba",  # SINGLE RIGHT-POINTING ANGLE QUOTATION MARK
    0x9C: b"\xc5\x93",      # LATIN SMALL LIGATURE OE
    0x9E: b"\xc5\xbe",      # LATIN SMALL LETTER Z WITH CARON
    0x9F: b"\xc5\xb8",      # LATIN CAPITAL LETTER Y WITH DIAERESIS
})

_byte_map: Optional[Mapping[int, bytes]] = None
_byte_map_lock = threading.Lock()


def build_byte_map() -> Mapping[int, bytes]:
    """Build a fresh, read-only byte -> UTF-8 table for 0x80-0xFF."""
    table: Dict[int, bytes] = {i: chr(i).encode("utf-8") for i in range(0x80, 0x100)}
    table.update(CP1252_OVERRIDES)
    return MappingProxyType(table)


def ensure_byte_map() -> Mapping[int, bytes]:
    """
    Return the process-wide table, building it on first use.

    Safe to call before every repair; concurrent first callers build it once.
    """
    global _byte_map
    if _byte_map is None:
        with _byte_map_lock:
            if _byte_map is None:
                _byte_map = build_byte_map()
                logger.debug("built byte map: %d entries, %d cp1252 overrides",
                             len(_byte_map), len(CP1252_OVERRIDES))
    return _byte_map
