#!/usr/bin/env python3
"""
PACINSPECT HEX DECODER
----------------------
Decodes hexadecimal text into fixed-width integer arrays, reading from the
least-significant (rightmost) end.

    parse_hex("17afb88", 3)  ->  ("1", [0x7a, 0xfb, 0x88])
    parse_hex("17a", 4, 2)   ->  ("", [0x0000, 0x0000, 0x0000, 0x017a])

Digits that do not fit are left over as the remainder. Elements that run
out of digits are zero-filled. A non-hex character stops decoding; it and
everything to its left becomes the remainder.

Author: PacInspect Team
Date: 2026-10-19
"""

from typing import List, Optional, Tuple

SUPPORTED_WIDTHS = (1, 2, 4, 8, 16)


def parse_hex_digit(digit: str) -> Optional[int]:
    if "0" <= digit <= "9":
        return ord(digit) - ord("0")
    if "a" <= digit <= "f":
        return 0xA + ord(digit) - ord("a")
    if "A" <= digit <= "F":
        return 0xA + ord(digit) - ord("A")
    return None


def _parse_value(text: str, cursor: int, width: int) -> Tuple[int, int, bool]:
    """
    Reads up to `width * 2` digits leftwards from `cursor` (exclusive).
    Returns (value, new_cursor, stopped) where `stopped` flags a non-hex hit.
    """
    value = 0
    for digit_pos in range(width * 2):
        if cursor == 0:
            return value, cursor, False
        digit = parse_hex_digit(text[cursor - 1])
        if digit is None:
            return value, cursor, True
        value |= digit << (digit_pos * 4)
        cursor -= 1
    return value, cursor, False


def parse_hex(text: str, length: int, width: int = 1) -> Tuple[str, List[int]]:
    """
    Decodes `text` into `length` integers of `width` bytes each.

    Returns (remainder, values); values are ordered most-significant first.
    """
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f"Unsupported element width: {width} (expected one of {SUPPORTED_WIDTHS})")

    values = [0] * length
    cursor = len(text)
    for i in reversed(range(length)):
        values[i], cursor, stopped = _parse_value(text, cursor, width)
        if stopped:
            break
    return text[:cursor], values


def parse_hex_int(text: str, width: int = 16) -> Tuple[str, int]:
    """Decodes a single `width`-byte integer from the right end of `text`."""
    remainder, (value,) = parse_hex(text, 1, width)
    return remainder, value


def parse_hex_bytes(text: str, length: int) -> bytes:
    """Decodes a checksum-style hex string into exactly `length` bytes."""
    _, values = parse_hex(text, length)
    return bytes(values)
