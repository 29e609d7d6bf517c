#!/usr/bin/env python3
"""
PACINSPECT ENGINE - The Librarian
---------------------------------
The InspectEngine reads pacman `desc` descriptors from a local package
database (or a single file), queries their fields and turns each one into
a plain report. Problems with a file end up in its report; they never stop
a directory scan.

Author: PacInspect Team
Date: 2026-10-19
"""

import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Type

from pacinspect.core.models import FieldName
from pacinspect.query.base import Query, plain_value
from pacinspect.query.forgetful import ForgetfulQuerier
from pacinspect.query.memo import MemoQuerier

logger = logging.getLogger("pacinspect.engine")

DEFAULT_DB_PATH = "/var/lib/pacman/local"
DESC_FILE_NAME = "desc"
REQUIRED_FIELDS = (FieldName.Name, FieldName.Version)

STRATEGIES: Dict[str, Type[Query]] = {
    "memo": MemoQuerier,
    "forgetful": ForgetfulQuerier,
}


class InspectEngine:
    """
    Coordinates file loading and field querying for a package database.

    Defaults to the forgetful strategy: real descriptors often skip
    optional fields, and a memo querier reads every field after a missing
    one as absent.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH, strategy: str = "forgetful"):
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown query strategy '{strategy}' (expected one of {sorted(STRATEGIES)})")
        self.db_path = Path(db_path).resolve()
        self.strategy = strategy
        self.querier_class = STRATEGIES[strategy]

    def open_querier(self, text: str) -> Query:
        return self.querier_class(text)

    def inspect_text(self, text: str, fields: Optional[List[FieldName]] = None) -> Dict[str, Any]:
        """
        Queries `fields` (every known field by default) from a descriptor buffer.
        Fields are always asked for in declaration order.
        """
        querier = self.open_querier(text)
        wanted = set(fields) if fields else set(FieldName)

        # Required fields ride along so a memo querier still sees them in file order
        typed_values = {}
        for field in sorted(wanted | set(REQUIRED_FIELDS)):
            typed_values[field] = querier.typed(field)

        collected: Dict[str, Any] = {
            field.tag.lower(): plain_value(value)
            for field, value in typed_values.items()
            if field in wanted and value is not None
        }
        missing = [f.tag for f in REQUIRED_FIELDS if typed_values[f] is None]
        return {
            "name": typed_values[FieldName.Name],
            "version": typed_values[FieldName.Version],
            "fields": collected,
            "missing": missing,
        }

    def inspect_file(self, file_path: str, fields: Optional[List[FieldName]] = None) -> Dict[str, Any]:
        """
        Loads and inspects a single descriptor. Relative paths resolve
        against the database directory.
        """
        full_path = Path(file_path)
        if not full_path.is_absolute():
            full_path = (self.db_path / file_path).resolve()
        if full_path.is_dir():
            full_path = full_path / DESC_FILE_NAME

        if not full_path.exists():
            return self._file_error(file_path, "FILE_NOT_FOUND", f"Path missing: {full_path}")

        try:
            text = full_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {full_path}: {str(e)}")
            return self._file_error(file_path, "ENGINE_ERROR", str(e))

        if not text.strip():
            return self._file_error(file_path, "EMPTY_FILE", "Descriptor is empty")

        inspected = self.inspect_text(text, fields)
        return {
            "file_path": str(file_path),
            "status": "OK" if not inspected["missing"] else "INCOMPLETE",
            "success": not inspected["missing"],
            "strategy": self.strategy,
            "timestamp": time.time(),
            **inspected,
        }

    def scan_directory(self, max_depth: int = 2, fields: Optional[List[FieldName]] = None,
                       progress_callback: Optional[Callable[[int, int], None]] = None) -> List[Dict[str, Any]]:
        """
        Inspects every `desc` file under the database directory, skipping
        symlinks and anything nested deeper than `max_depth`.
        """
        if not self.db_path.is_dir():
            logger.error(f"Database directory not found: {self.db_path}")
            return []

        try:
            max_depth = int(max_depth)
        except (ValueError, TypeError):
            logger.warning(f"Invalid max_depth '{max_depth}'. Falling back to default: 2")
            max_depth = 2

        all_files = sorted(
            f for f in self.db_path.rglob(DESC_FILE_NAME)
            if f.is_file() and not f.is_symlink()
            and len(f.relative_to(self.db_path).parts) <= max_depth
        )
        logger.info(f"Found {len(all_files)} descriptors under {self.db_path}")

        reports = []
        total_files = len(all_files)
        for processed, file_path in enumerate(all_files, 1):
            rel_path = str(file_path.relative_to(self.db_path))
            reports.append(self.inspect_file(rel_path, fields))
            if progress_callback:
                progress_callback(processed, total_files)

        return reports

    def generate_summary(self, reports: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Aggregates scan results into headline counts."""
        if not reports:
            return {
                "total_files": 0, "success_rate": 0, "successful": 0,
                "incomplete": 0, "empty": 0, "system_errors": 0,
            }

        total = len(reports)
        successful = sum(1 for r in reports if r.get("success", False))
        incomplete = sum(1 for r in reports if r.get("status") == "INCOMPLETE")
        empty = sum(1 for r in reports if r.get("status") == "EMPTY_FILE")
        system_errors = sum(1 for r in reports if r.get("status") in ("ENGINE_ERROR", "FILE_NOT_FOUND"))

        return {
            "total_files": total,
            "success_rate": successful / total,
            "successful": successful,
            "incomplete": incomplete,
            "empty": empty,
            "system_errors": system_errors,
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        }

    def _file_error(self, path: str, status: str, error: str) -> Dict[str, Any]:
        return {
            "file_path": str(path), "status": status, "error": error,
            "success": False, "name": None, "version": None,
            "fields": {}, "missing": [f.tag for f in REQUIRED_FIELDS],
        }
