#!/usr/bin/env python3
"""
PACINSPECT CORE MODELS
----------------------
Defines the fundamental data structures used across the PacInspect engine.
These models represent the lowest level of descriptor abstraction.

Author: PacInspect Team
Date: 2026-10-19
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Line:
    """
    A single line of a descriptor buffer.

    `start` and `end` are offsets into the original buffer, so a run of
    lines can be sliced back out of it without re-joining anything.
    """
    start: int      # Offset of the first character of the line
    end: int        # Offset just past the last character (line break excluded)
    text: str       # The line content without its line break

    @property
    def is_blank(self) -> bool:
        return not self.text


class FieldName(Enum):
    """
    The closed set of fields a pacman `desc` file may carry.

    Members are declared in the order pacman writes them. Each member knows
    its delimiter tag and its ordinal, which the field cache uses as a slot
    index.
    """
    FileName = "FILENAME"
    Name = "NAME"
    Base = "BASE"
    Version = "VERSION"
    Description = "DESC"
    Groups = "GROUPS"
    CompressedSize = "CSIZE"
    InstalledSize = "ISIZE"
    Md5Sum = "MD5SUM"
    Sha256Sum = "SHA256SUM"
    PgpSignature = "PGPSIG"
    Url = "URL"
    License = "LICENSE"
    Arch = "ARCH"
    BuildDate = "BUILDDATE"
    Packager = "PACKAGER"
    Depends = "DEPENDS"
    CheckDepends = "CHECKDEPENDS"
    MakeDepends = "MAKEDEPENDS"
    OptDepends = "OPTDEPENDS"
    Provides = "PROVIDES"
    Conflicts = "CONFLICTS"
    Replaces = "REPLACES"

    def __init__(self, tag: str):
        self.tag = tag
        # Members are registered one by one, so this is the declaration ordinal
        self.index = len(self.__class__.__members__)

    @property
    def delimiter(self) -> str:
        return f"%{self.tag}%"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["FieldName"]:
        """Returns the member for a delimiter tag, or None for unknown tags."""
        try:
            return cls(tag)
        except ValueError:
            return None

    def __lt__(self, other):
        if self.__class__ is not other.__class__:
            return NotImplemented
        return self.index < other.index

    def __le__(self, other):
        if self.__class__ is not other.__class__:
            return NotImplemented
        return self.index <= other.index

    def __gt__(self, other):
        if self.__class__ is not other.__class__:
            return NotImplemented
        return self.index > other.index

    def __ge__(self, other):
        if self.__class__ is not other.__class__:
            return NotImplemented
        return self.index >= other.index
