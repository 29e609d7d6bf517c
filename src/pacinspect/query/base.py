#!/usr/bin/env python3
"""
PACINSPECT QUERY INTERFACE
--------------------------
Shared surface of every querier: a single raw lookup that each strategy
implements, and typed accessors layered on top of it.

Author: PacInspect Team
Date: 2026-10-19
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, TypeVar

from pacinspect.core.models import FieldName
from pacinspect.values import types as values

T = TypeVar("T")


def _first_line(raw: str) -> str:
    return raw.split("\n", 1)[0].rstrip("\r")


class Query(ABC):
    """
    Abstract querier over one descriptor buffer.

    Every accessor returns None when the field is absent. A field whose
    delimiter is present but has no value lines reads as "" (or an empty
    list for list-valued fields).
    """

    @abstractmethod
    def query_raw_text(self, field: FieldName) -> Optional[str]:
        """Returns the raw text of `field`, or None when it is absent."""

    def _decode(self, field: FieldName, decoder: Callable[[str], T]) -> Optional[T]:
        raw = self.query_raw_text(field)
        if raw is None:
            return None
        return decoder(raw)

    # --- Single-line strings ---

    def file_name(self) -> Optional[values.FileName]:
        return self._decode(FieldName.FileName, lambda raw: values.FileName(_first_line(raw)))

    def name(self) -> Optional[values.Name]:
        return self._decode(FieldName.Name, lambda raw: values.Name(_first_line(raw)))

    def base(self) -> Optional[values.Base]:
        return self._decode(FieldName.Base, lambda raw: values.Base(_first_line(raw)))

    def version(self) -> Optional[values.Version]:
        return self._decode(FieldName.Version, lambda raw: values.Version(_first_line(raw)))

    def description(self) -> Optional[values.Description]:
        return self._decode(FieldName.Description, lambda raw: values.Description(_first_line(raw)))

    def url(self) -> Optional[values.Url]:
        return self._decode(FieldName.Url, lambda raw: values.Url(_first_line(raw)))

    def packager(self) -> Optional[values.Packager]:
        return self._decode(FieldName.Packager, lambda raw: values.Packager(_first_line(raw)))

    def pgp_signature(self) -> Optional[values.PgpSignature]:
        return self._decode(FieldName.PgpSignature, lambda raw: values.PgpSignature(_first_line(raw)))

    # --- Numbers & checksums ---

    def compressed_size(self) -> Optional[int]:
        return self._decode(FieldName.CompressedSize, values.decode_int)

    def installed_size(self) -> Optional[int]:
        return self._decode(FieldName.InstalledSize, values.decode_int)

    def build_date(self) -> Optional[values.BuildDate]:
        return self._decode(FieldName.BuildDate, values.decode_build_date)

    def md5_sum(self) -> Optional[values.Md5Sum]:
        return self._decode(FieldName.Md5Sum, values.decode_md5)

    def sha256_sum(self) -> Optional[values.Sha256Sum]:
        return self._decode(FieldName.Sha256Sum, values.decode_sha256)

    # --- Lists ---

    def groups(self) -> Optional[List[values.Group]]:
        return self._decode(FieldName.Groups, lambda raw: [values.Group(g) for g in values.split_lines(raw)])

    def license(self) -> Optional[List[values.License]]:
        return self._decode(FieldName.License, lambda raw: [values.License(l) for l in values.split_lines(raw)])

    def architecture(self) -> Optional[List[values.Architecture]]:
        return self._decode(FieldName.Arch, lambda raw: [values.Architecture(a) for a in values.split_lines(raw)])

    def depends(self) -> Optional[List[values.Dependency]]:
        return self._decode(FieldName.Depends, values.decode_dependencies)

    def check_depends(self) -> Optional[List[values.Dependency]]:
        return self._decode(FieldName.CheckDepends, values.decode_dependencies)

    def make_depends(self) -> Optional[List[values.Dependency]]:
        return self._decode(FieldName.MakeDepends, values.decode_dependencies)

    def opt_depends(self) -> Optional[List[values.Dependency]]:
        return self._decode(FieldName.OptDepends, values.decode_dependencies)

    def provides(self) -> Optional[List[values.Dependency]]:
        return self._decode(FieldName.Provides, values.decode_dependencies)

    def conflicts(self) -> Optional[List[values.Dependency]]:
        return self._decode(FieldName.Conflicts, values.decode_dependencies)

    def replaces(self) -> Optional[List[values.Dependency]]:
        return self._decode(FieldName.Replaces, values.decode_dependencies)

    # --- Bulk ---

    def typed(self, field: FieldName) -> Any:
        """Returns the typed value of any known field."""
        return getattr(self, ACCESSORS[field])()

    def to_dict(self) -> Dict[str, Any]:
        """
        Collects every present field, in declaration order, as plain
        serializable values keyed by lowercase tag.
        """
        result: Dict[str, Any] = {}
        for field in FieldName:
            value = self.typed(field)
            if value is None:
                continue
            result[field.tag.lower()] = plain_value(value)
        return result


ACCESSORS: Dict[FieldName, str] = {
    FieldName.FileName: "file_name",
    FieldName.Name: "name",
    FieldName.Base: "base",
    FieldName.Version: "version",
    FieldName.Description: "description",
    FieldName.Groups: "groups",
    FieldName.CompressedSize: "compressed_size",
    FieldName.InstalledSize: "installed_size",
    FieldName.Md5Sum: "md5_sum",
    FieldName.Sha256Sum: "sha256_sum",
    FieldName.PgpSignature: "pgp_signature",
    FieldName.Url: "url",
    FieldName.License: "license",
    FieldName.Arch: "architecture",
    FieldName.BuildDate: "build_date",
    FieldName.Packager: "packager",
    FieldName.Depends: "depends",
    FieldName.CheckDepends: "check_depends",
    FieldName.MakeDepends: "make_depends",
    FieldName.OptDepends: "opt_depends",
    FieldName.Provides: "provides",
    FieldName.Conflicts: "conflicts",
    FieldName.Replaces: "replaces",
}


def plain_value(value: Any) -> Any:
    if isinstance(value, list):
        return [plain_value(item) for item in value]
    if isinstance(value, values.Checksum):
        return value.hex()
    if isinstance(value, values.BuildDate):
        return value.timestamp
    if isinstance(value, values.Dependency):
        return str(value)
    return value
