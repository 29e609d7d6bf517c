#!/usr/bin/env python3
"""
PACINSPECT LOCATOR - The Field Finder
-------------------------------------
Scans forward through a LineScanner until it meets the requested field,
collecting that field's value lines as one slice of the original buffer.

Fields passed over on the way are discarded. Caching them is up to the
querier driving the scan.

Author: PacInspect Team
Date: 2026-10-19
"""

import re
from typing import Optional

from pacinspect.core.models import FieldName, Line
from pacinspect.query.scanner import LineScanner

# Group 1: the field tag between the percent signs
DELIMITER_PATTERN = re.compile(r'^%([^%\s]+)%$')


def delimiter_tag(line: Line) -> Optional[str]:
    """Returns the tag named by a delimiter line, or None for any other line."""
    match = DELIMITER_PATTERN.match(line.text)
    return match.group(1) if match else None


def _collect_value(lines: LineScanner) -> str:
    """
    Consumes the value lines following a delimiter and returns them as a
    single slice. Stops before a blank line, the next delimiter, or the end.
    """
    start = end = None
    while True:
        upcoming = lines.peek()
        if upcoming is None or upcoming.is_blank or delimiter_tag(upcoming) is not None:
            break
        next(lines)
        if start is None:
            start = upcoming.start
        end = upcoming.end

    if start is None:
        return ""
    return lines.text[start:end]


def locate(lines: LineScanner, field: FieldName) -> Optional[str]:
    """
    Advances `lines` up to and including the value of `field`.

    Returns the raw value when the field is found, "" when its delimiter has
    no value lines, and None once the lines run out. Never raises.
    """
    for line in lines:
        tag = delimiter_tag(line)
        if tag is None:
            continue
        value = _collect_value(lines)
        if tag == field.tag:
            return value
    return None
