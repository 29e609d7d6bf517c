#!/usr/bin/env python3
"""
PACINSPECT FORGETFUL QUERIER
----------------------------
Rescans the buffer from the top for every query. Correct for any query
order, at the cost of one scan per lookup.

Author: PacInspect Team
Date: 2026-10-19
"""

import logging
from typing import Optional

from pacinspect.core.models import FieldName
from pacinspect.query.base import Query
from pacinspect.query.locator import locate
from pacinspect.query.scanner import LineScanner

logger = logging.getLogger("pacinspect.query")


class ForgetfulQuerier(Query):
    """
    Stateless querier. Holds only the buffer, so sharing one instance
    between threads is safe.
    """

    def __init__(self, text: str):
        self.text = text

    def query_raw_text(self, field: FieldName) -> Optional[str]:
        value = locate(LineScanner(self.text), field)
        logger.debug("Forgetful scan for %s: %s", field.tag, "found" if value is not None else "absent")
        return value
