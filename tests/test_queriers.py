"""
PACINSPECT QUERIER TESTS
------------------------
Both strategies against the same buffers. The memo querier's ordering
sensitivity is asserted explicitly, not worked around.
"""

from pathlib import Path

import pytest

from pacinspect.core.models import FieldName
from pacinspect.query.cache import SlotState
from pacinspect.query.forgetful import ForgetfulQuerier
from pacinspect.query.locator import delimiter_tag
from pacinspect.query.memo import MemoQuerier
from pacinspect.query.scanner import LineScanner
from pacinspect.values.types import Dependency

SCENARIO = "%NAME%\nfoo\n\n%VERSION%\n1.0\n\n"
TEXT = (Path(__file__).parent / "fixtures" / "gnome-shell.desc").read_text()


def file_order(text):
    """Known fields in the order their delimiters appear in `text`."""
    tags = [delimiter_tag(line) for line in LineScanner(text)]
    return [FieldName.from_tag(t) for t in tags if t and FieldName.from_tag(t)]


# =============================================================================
# Scenario
# =============================================================================

def test_forgetful_any_order():
    querier = ForgetfulQuerier(SCENARIO)
    assert querier.query_raw_text(FieldName.Version) == "1.0"
    assert querier.query_raw_text(FieldName.Name) == "foo"


def test_memo_in_file_order():
    querier = MemoQuerier(SCENARIO)
    assert querier.query_raw_text(FieldName.Name) == "foo"
    assert querier.query_raw_text(FieldName.Version) == "1.0"


def test_memo_cannot_look_backward():
    """
    ORDERING PRECONDITION: A field passed over before it was ever queried
    reads as absent from then on.
    """
    querier = MemoQuerier(SCENARIO)
    assert querier.query_raw_text(FieldName.Version) == "1.0"
    assert querier.query_raw_text(FieldName.Name) is None
    assert querier.cache.state(FieldName.Name) is SlotState.ABSENT


def test_memo_exhaustion_marks_later_fields_absent():
    querier = MemoQuerier(SCENARIO)
    assert querier.query_raw_text(FieldName.Base) is None
    assert querier.query_raw_text(FieldName.Version) is None


def test_memo_to_dict_stops_at_first_missing_field():
    """
    The fixture has no PGPSIG, so the declaration-order walk of to_dict
    exhausts the buffer there and everything after it reads as absent.
    """
    memo = MemoQuerier(TEXT).to_dict()
    assert list(memo) == [
        "filename", "name", "base", "version", "desc", "groups",
        "csize", "isize", "md5sum", "sha256sum",
    ]
    assert "depends" in ForgetfulQuerier(TEXT).to_dict()


# =============================================================================
# Properties
# =============================================================================

def test_equivalence_when_queried_in_file_order():
    fields = file_order(TEXT)
    forgetful = ForgetfulQuerier(TEXT)
    memo = MemoQuerier(TEXT)
    for field in fields:
        assert memo.query_raw_text(field) == forgetful.query_raw_text(field), field


@pytest.mark.parametrize("querier_class", [ForgetfulQuerier, MemoQuerier])
@pytest.mark.parametrize("field", list(FieldName))
def test_idempotence(querier_class, field):
    querier = querier_class(TEXT)
    assert querier.query_raw_text(field) == querier.query_raw_text(field)


def test_cache_finality():
    querier = MemoQuerier(TEXT)
    first = querier.query_raw_text(FieldName.Name)
    consumed = querier.lines_consumed

    assert querier.query_raw_text(FieldName.Name) == first
    assert querier.scans == 1
    assert querier.lines_consumed == consumed

    assert querier.query_raw_text(FieldName.PgpSignature) is None
    assert querier.query_raw_text(FieldName.PgpSignature) is None
    assert querier.scans == 2


def test_one_pass_bound():
    total_lines = len(list(LineScanner(TEXT)))
    querier = MemoQuerier(TEXT)
    for field in file_order(TEXT):
        assert querier.query_raw_text(field) is not None
    assert querier.lines_consumed <= total_lines


def test_empty_value_is_not_absent():
    text = "%NAME%\n\n%VERSION%\n1\n"
    assert ForgetfulQuerier(text).query_raw_text(FieldName.Name) == ""
    assert MemoQuerier(text).query_raw_text(FieldName.Name) == ""
    assert ForgetfulQuerier(text).groups() is None


# =============================================================================
# Typed accessors
# =============================================================================

class TestTypedAccess:

    def setup_method(self):
        self.querier = ForgetfulQuerier(TEXT)

    def test_strings(self):
        assert self.querier.name() == "gnome-shell"
        assert self.querier.file_name() == "gnome-shell-1:46.2-1-x86_64.pkg.tar.zst"
        assert self.querier.version() == "1:46.2-1"
        assert self.querier.description() == "Next generation desktop shell"
        assert self.querier.url() == "https://wiki.gnome.org/Projects/GnomeShell"
        assert self.querier.pgp_signature() is None

    def test_lists(self):
        assert self.querier.architecture() == ["x86_64"]
        assert self.querier.groups() == ["gnome"]
        assert self.querier.license() == ["GPL-2.0-or-later"]

    def test_numbers(self):
        assert self.querier.compressed_size() == 2398821
        assert self.querier.installed_size() == 11788503
        assert self.querier.build_date().timestamp == 1717009023

    def test_checksums(self):
        md5 = self.querier.md5_sum()
        assert len(md5.digest) == 16
        assert md5.hex() == "17e9d1b0f2b37b1bb6a2d60ec1fdbc3e"
        assert len(self.querier.sha256_sum().digest) == 32

    def test_dependencies(self):
        depends = self.querier.depends()
        assert depends[0] == Dependency(name="accountsservice")
        assert Dependency(name="gjs", operator=">=", version="1.80") in depends
        assert self.querier.opt_depends()[0].reason == "System settings"
        assert self.querier.provides() == [Dependency("libgnome-shell.so", "=", "46-64")]
        assert self.querier.replaces() is None

    def test_to_dict_is_plain(self):
        data = self.querier.to_dict()
        assert data["name"] == "gnome-shell"
        assert data["md5sum"] == "17e9d1b0f2b37b1bb6a2d60ec1fdbc3e"
        assert data["builddate"] == 1717009023
        assert "gjs>=1.80" in data["depends"]
        assert "pgpsig" not in data
