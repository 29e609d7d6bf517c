"""
PACINSPECT LOCATOR TESTS
------------------------
Field discovery from a forward-only cursor, including the empty/absent
distinction and truncated input.
"""

import pytest

from pacinspect.core.models import FieldName, Line
from pacinspect.query.locator import delimiter_tag, locate
from pacinspect.query.scanner import LineScanner

SCENARIO = "%NAME%\nfoo\n\n%VERSION%\n1.0\n\n"


@pytest.mark.parametrize("text, expected", [
    ("%NAME%", "NAME"),
    ("%CHECKDEPENDS%", "CHECKDEPENDS"),
    ("%XDATA%", "XDATA"),
    ("%%", None),
    ("% NAME%", None),
    ("%NAME% ", None),
    ("NAME", None),
    ("", None),
])
def test_delimiter_tag(text, expected):
    assert delimiter_tag(Line(0, len(text), text)) == expected


def test_finds_requested_field():
    assert locate(LineScanner(SCENARIO), FieldName.Version) == "1.0"


def test_absent_field_exhausts_lines():
    lines = LineScanner(SCENARIO)
    assert locate(lines, FieldName.Base) is None
    assert lines.exhausted


def test_stops_right_after_found_value():
    lines = LineScanner(SCENARIO)
    assert locate(lines, FieldName.Name) == "foo"
    assert lines.consumed == 2
    assert locate(lines, FieldName.Version) == "1.0"


def test_passed_fields_are_dropped():
    lines = LineScanner(SCENARIO)
    assert locate(lines, FieldName.Version) == "1.0"
    assert locate(lines, FieldName.Name) is None


def test_empty_value_is_present_not_absent():
    """
    EMPTY VS ABSENT: A delimiter without value lines reads as "".
    """
    assert locate(LineScanner("%NAME%\n\n%VERSION%\n1\n"), FieldName.Name) == ""


def test_truncated_trailing_delimiter_reads_empty():
    assert locate(LineScanner("%NAME%\nfoo\n\n%VERSION%"), FieldName.Version) == ""
    assert locate(LineScanner("%NAME%\nfoo\n\n%VERSION%\n"), FieldName.Version) == ""


def test_next_delimiter_ends_value_without_being_consumed():
    lines = LineScanner("%NAME%\n%VERSION%\n1\n")
    assert locate(lines, FieldName.Name) == ""
    assert locate(lines, FieldName.Version) == "1"


def test_multiline_value_is_one_slice():
    text = "%DEPENDS%\nglibc\ngjs>=1.80\n\n%OPTDEPENDS%\nfoo\n"
    assert locate(LineScanner(text), FieldName.Depends) == "glibc\ngjs>=1.80"


def test_multiline_value_keeps_original_line_breaks():
    text = "%DEPENDS%\r\nglibc\r\ngjs\r\n\r\n"
    assert locate(LineScanner(text), FieldName.Depends) == "glibc\r\ngjs"


def test_unknown_fields_are_skipped():
    text = "%XDATA%\npkgtype=pkg\n\n%NAME%\nfoo\n"
    assert locate(LineScanner(text), FieldName.Name) == "foo"


def test_value_lines_outside_any_block_are_ignored():
    text = "stray\n\n%NAME%\nfoo\n"
    assert locate(LineScanner(text), FieldName.Name) == "foo"
