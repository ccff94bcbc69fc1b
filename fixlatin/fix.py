"""
Mixed-encoding repair.

Input may mix ASCII, UTF-8, Latin-1 and CP1252 in a single byte string.
The scanner walks it once, left to right:
- ASCII runs and well-formed UTF-8 sequences are copied verbatim
- any other byte is treated as Latin-1/CP1252 and replaced by its UTF-8 form

UTF-8 takes precedence over the legacy encodings, so two adjacent legacy
bytes that happen to look like a UTF-8 character are kept as that character.
The output is always UTF-8, possibly with the odd typo.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from .rules import ASCII_MAX, CONT_MAX, CONT_MIN, KNOWN_OPTIONS, TARGET_ENCODING, UTF8_LEADS
from .table import CP1252_OVERRIDES, ensure_byte_map

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class InvalidOptionError(ValueError):
    """Raised when fix_latin() is given an option it does not recognise."""


def check_options(options: Mapping[str, Any]) -> None:
    for name in options:
        if name not in KNOWN_OPTIONS:
            raise InvalidOptionError(f"Unknown option '{name}'")


def match_length(data: bytes, pos: int) -> int:
    """
    Length of the ASCII run or UTF-8 sequence starting at data[pos].

    Returns 0 when data[pos] starts neither, i.e. it is a legacy byte.
    """
    n = len(data)
    lead = data[pos]

    if lead <= ASCII_MAX:
        end = pos + 1
        while end < n and data[end] <= ASCII_MAX:
            end += 1
        return end - pos

    for low, high, conts in UTF8_LEADS:
        if low <= lead <= high:
            end = pos + 1 + conts
            if end > n:
                return 0
            for i in range(pos + 1, end):
                if not CONT_MIN <= data[i] <= CONT_MAX:
                    return 0
            return end - pos

    return 0


def _new_stats() -> Dict[str, int]:
    return {
        "ascii_bytes": 0,
        "utf8_sequences": 0,
        "substituted_bytes": 0,
        "cp1252_substitutions": 0,
    }


def _rewrite(data: bytes, byte_map: Mapping[int, bytes], stats: Optional[Dict[str, int]] = None) -> bytes:
    out = bytearray()
    pos = 0
    n = len(data)

    while pos < n:
        length = match_length(data, pos)
        if length:
            out += data[pos:pos + length]
            if stats is not None:
                if data[pos] <= ASCII_MAX:
                    stats["ascii_bytes"] += length
                else:
                    stats["utf8_sequences"] += 1
            pos += length
            continue

        byte = data[pos]
        out += byte_map[byte]
        if stats is not None:
            stats["substituted_bytes"] += 1
            if byte in CP1252_OVERRIDES:
                stats["cp1252_substitutions"] += 1
        pos += 1

    return bytes(out)


def fix_latin(data: Union[BytesLike, str, None], **options: Any) -> Union[str, bytes, None]:
    """
    Repair mixed-encoding input and return it as UTF-8.

    Options:
    - bytes_only: return UTF-8 ``bytes`` instead of ``str``.

    ``None`` is passed through. A ``str`` is already decoded text and is
    returned unchanged. The ``str`` result is decoded with the
    ``surrogateescape`` handler, so encoding it the same way always gives
    back exactly the ``bytes_only`` result.

    Raises InvalidOptionError for an unknown option name.
    """
    check_options(options)

    if data is None:
        return None
    if isinstance(data, str):
        return data

    fixed = _rewrite(bytes(data), ensure_byte_map())
    if options.get("bytes_only"):
        return fixed
    return fixed.decode(TARGET_ENCODING, errors="surrogateescape")


def fix_latin_report(data: bytes) -> tuple[bytes, Dict[str, Any]]:
    """
    Repair ``data`` and count what the scanner did.

    Returns the UTF-8 bytes and a report dict.
    """
    raw = bytes(data)
    stats = _new_stats()
    fixed = _rewrite(raw, ensure_byte_map(), stats)

    report: Dict[str, Any] = {
        "input_bytes": len(raw),
        "output_bytes": len(fixed),
        **stats,
        "changed": fixed != raw,
    }
    logger.debug(
        "fix_latin: %d -> %d bytes, %d substituted (%d cp1252)",
        report["input_bytes"], report["output_bytes"],
        stats["substituted_bytes"], stats["cp1252_substitutions"],
    )
    return fixed, report
