#!/usr/bin/env python3
"""
PACINSPECT EXPORTER - YAML Rendering
------------------------------------
Turns inspection reports into YAML documents, one per package, with the
identity fields first.

Author: PacInspect Team
Date: 2026-10-19
"""

import io
from typing import Any, Dict, List, Union

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from pacinspect.core.models import FieldName


class DescExporter:
    """
    The Reconstructor: converts report field maps into YAML strings.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096
        self.preferred_order = ["name", "version", "base", "desc", "url"]
        self.declared_order = [f.tag.lower() for f in FieldName]

    def _sort_key(self, key: str) -> tuple:
        if key in self.preferred_order:
            return (0, self.preferred_order.index(key))
        if key in self.declared_order:
            return (1, self.declared_order.index(key))
        return (2, key)

    def _to_commented(self, data: Any) -> Any:
        """Recursively rebuilds plain data as ordered round-trip nodes."""
        if isinstance(data, dict):
            ordered = CommentedMap()
            for key in sorted(data, key=self._sort_key):
                ordered[key] = self._to_commented(data[key])
            return ordered
        if isinstance(data, list):
            return CommentedSeq(self._to_commented(item) for item in data)
        return data

    def export_fields(self, fields: Dict[str, Any], title: str = "") -> str:
        """Exports a single field map. `title` becomes a header comment."""
        doc = self._to_commented(fields)
        if title:
            doc.yaml_set_start_comment(title)
        stream = io.StringIO()
        self.yaml.dump(doc, stream)
        return stream.getvalue()

    def export(self, reports: Union[Dict[str, Any], List[Dict[str, Any]]]) -> str:
        """
        Exports reports into a single string. Includes explicit doc separators for multi-doc.
        """
        stream = io.StringIO()
        docs = reports if isinstance(reports, list) else [reports]

        written = 0
        for report in docs:
            fields = report.get("fields")
            if not fields:
                continue
            if written > 0:
                stream.write("---\n")
            stream.write(self.export_fields(fields, title=str(report.get("file_path", ""))))
            written += 1

        return stream.getvalue()
