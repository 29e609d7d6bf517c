#!/usr/bin/env python3
"""
PACINSPECT MEMO QUERIER
-----------------------
Scans the buffer at most once over its lifetime and remembers every
answer it gives.

ORDERING PRECONDITION:
    The scan position only moves forward, and fields passed over while
    looking for another field are dropped. A field that sits before the
    current position and was never queried therefore reads as absent,
    even though it exists in the buffer. Results are only reliable when
    fields are queried in the order they appear in the file (pacman writes
    them in FieldName declaration order). Once the buffer is exhausted,
    every field not yet asked for is recorded as absent on first query.

Author: PacInspect Team
Date: 2026-10-19
"""

import logging
from typing import Optional

from pacinspect.core.models import FieldName
from pacinspect.query.base import Query
from pacinspect.query.cache import UNSEEN, FieldCache
from pacinspect.query.locator import locate
from pacinspect.query.scanner import LineScanner

logger = logging.getLogger("pacinspect.query")


class MemoQuerier(Query):
    """
    Caching querier with a persistent, forward-only scan position.
    Not safe for concurrent use: `query_raw_text` mutates the cursor and
    the cache in place.
    """

    def __init__(self, text: str):
        self.text = text
        self._lines = LineScanner(text)
        self._cache = FieldCache()
        self.scans = 0  # Number of lookups that had to touch the buffer

    @property
    def lines_consumed(self) -> int:
        return self._lines.consumed

    @property
    def cache(self) -> FieldCache:
        return self._cache

    def query_raw_text(self, field: FieldName) -> Optional[str]:
        cached = self._cache.get(field)
        if cached is not UNSEEN:
            logger.debug("Cache hit for %s", field.tag)
            return cached

        self.scans += 1
        value = locate(self._lines, field)
        self._cache.set(field, value)
        logger.debug(
            "Scanned for %s from offset %d: %s",
            field.tag, self._lines.position, "found" if value is not None else "absent",
        )
        return value
