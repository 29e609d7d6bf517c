#!/usr/bin/env python3
"""
PACINSPECT FIELD CACHE
----------------------
A fixed table with one slot per FieldName, indexed by the field's ordinal.

Each slot is in one of three states:
    UNSEEN          no lookup has been attempted
    None            the lookup ran and the field was not found
    str             the lookup found the field (possibly "")

Author: PacInspect Team
Date: 2026-10-19
"""

from enum import Enum
from typing import List, Optional, Union

from pacinspect.core.models import FieldName


class _Unseen:
    """Sentinel for a slot that has never been decided."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSEEN"

    def __bool__(self) -> bool:
        return False


UNSEEN = _Unseen()

Slot = Union[_Unseen, None, str]


class SlotState(Enum):
    UNSEEN = "unseen"
    ABSENT = "absent"
    PRESENT = "present"


class FieldCache:
    """
    Tri-state memo table for field lookups.

    `set` overwrites unconditionally. Callers that treat a decided slot as
    final must check `get` first and skip the scan.
    """

    __slots__ = ("_slots",)

    def __init__(self):
        self._slots: List[Slot] = [UNSEEN] * len(FieldName)

    def get(self, field: FieldName) -> Slot:
        return self._slots[field.index]

    def set(self, field: FieldName, value: Optional[str]):
        self._slots[field.index] = value

    def state(self, field: FieldName) -> SlotState:
        slot = self._slots[field.index]
        if slot is UNSEEN:
            return SlotState.UNSEEN
        if slot is None:
            return SlotState.ABSENT
        return SlotState.PRESENT

    def is_decided(self, field: FieldName) -> bool:
        return self._slots[field.index] is not UNSEEN

    def __repr__(self) -> str:
        decided = {f.tag: self._slots[f.index] for f in FieldName if self.is_decided(f)}
        return f"FieldCache({decided})"
