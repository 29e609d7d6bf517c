#!/usr/bin/env python3
"""
PACINSPECT VALUE TYPES
----------------------
Typed representations of raw field values. Each decoder takes the raw text
returned by a querier and produces the semantic value, or None when the
text cannot be interpreted.

Author: PacInspect Team
Date: 2026-10-19
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, NewType, Optional

from pacinspect.values.hex import parse_hex_bytes

FileName = NewType("FileName", str)
Name = NewType("Name", str)
Base = NewType("Base", str)
Version = NewType("Version", str)
Description = NewType("Description", str)
Group = NewType("Group", str)
Url = NewType("Url", str)
License = NewType("License", str)
Architecture = NewType("Architecture", str)
Packager = NewType("Packager", str)
PgpSignature = NewType("PgpSignature", str)

# Group 1: package name, Group 2: comparison operator, Group 3: version
DEPENDENCY_PATTERN = re.compile(r'^([^<>=:\s]+)(?:\s*(<=|>=|=|<|>)\s*(\S+))?$')


@dataclass(frozen=True)
class Checksum:
    """Raw digest bytes decoded from a hex field."""
    digest: bytes

    def hex(self) -> str:
        return self.digest.hex()


@dataclass(frozen=True)
class Md5Sum(Checksum):
    pass


@dataclass(frozen=True)
class Sha256Sum(Checksum):
    pass


@dataclass(frozen=True)
class BuildDate:
    timestamp: int

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


@dataclass(frozen=True)
class Dependency:
    """
    One entry of a dependency-like list, e.g. `glib2>=2.80` or
    `gnome-control-center: for the settings panel`.
    """
    name: str
    operator: Optional[str] = None   # One of =, <, <=, >, >=
    version: Optional[str] = None
    reason: Optional[str] = None     # Only set for OPTDEPENDS entries

    def __str__(self) -> str:
        text = self.name
        if self.operator:
            text += f"{self.operator}{self.version}"
        if self.reason:
            text += f": {self.reason}"
        return text


def split_lines(raw: str) -> List[str]:
    """Splits a multi-line raw value into its non-empty entries."""
    return [line.rstrip("\r") for line in raw.split("\n") if line.strip()]


def decode_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def decode_build_date(raw: str) -> Optional[BuildDate]:
    timestamp = decode_int(raw)
    return BuildDate(timestamp) if timestamp is not None else None


def decode_md5(raw: str) -> Md5Sum:
    return Md5Sum(parse_hex_bytes(raw.strip(), 16))


def decode_sha256(raw: str) -> Sha256Sum:
    return Sha256Sum(parse_hex_bytes(raw.strip(), 32))


def decode_dependency(entry: str) -> Dependency:
    """
    Parses a single dependency entry. Entries that do not match the
    `name[op version][: reason]` shape keep their whole text as the name.
    """
    spec, sep, reason = entry.partition(": ")
    match = DEPENDENCY_PATTERN.match(spec.strip())
    if not match:
        return Dependency(name=entry.strip())

    name, operator, version = match.groups()
    return Dependency(
        name=name,
        operator=operator,
        version=version,
        reason=reason.strip() if sep else None,
    )


def decode_dependencies(raw: str) -> List[Dependency]:
    return [decode_dependency(entry) for entry in split_lines(raw)]
