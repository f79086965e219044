from datetime import datetime

import pytest

from worktime.core.enums import Direction
from worktime.core.exceptions import ParseError
from worktime.logs.parser import parse_access_log, parse_timestamp


def test_parse_keeps_valid_lines_in_order():
    content = "E1\t2024-02-01 08:00:00\tdoor\t0\nE1\t2024-02-01 17:00:00\tdoor\t1\n"

    result = parse_access_log(content)

    assert [e.direction for e in result.entries] == [Direction.IN, Direction.OUT]
    assert result.entries[0].employee_id == "E1"
    assert result.entries[0].timestamp == datetime(2024, 2, 1, 8, 0)
    assert result.skipped_lines == 0
    assert result.warnings == []


def test_parse_skips_bad_lines_with_line_numbers():
    content = "\n".join(
        [
            "E1\t2024-02-01 08:00:00\tx\t0",
            "E1\t2024-02-01 17:00:00\tx\t1",
            "E2\t2024-02-01 09:00:00",
            "E2\t2024-02-01 09:00:00\tx\t0",
            "E2\t2024-02-01 18:00:00\tx\t7",
            "E2\t2024-02-02 18:00:00\tx\t1",
        ]
    )

    result = parse_access_log(content)

    assert len(result.entries) == 4
    assert result.skipped_lines == 2
    assert len(result.warnings) == 2
    assert result.warnings[0].startswith("Line 3:")
    assert "fields" in result.warnings[0]
    assert result.warnings[1].startswith("Line 5:")
    assert "'7'" in result.warnings[1]


def test_blank_lines_are_ignored_silently():
    content = "\n\nE1\t2024-02-01 08:00:00\tx\t0\n   \n\r\nE1\t2024-02-01 17:00:00\tx\t1\n"

    result = parse_access_log(content)

    assert len(result.entries) == 2
    assert result.skipped_lines == 0


def test_missing_employee_and_bad_timestamp_are_skipped():
    content = "\n".join(
        [
            " \t2024-02-01 08:00:00\tx\t0",
            "E1\tnot-a-date\tx\t0",
            "E1\t2024-02-01 08:00:00\tx\t0",
        ]
    )

    result = parse_access_log(content)

    assert len(result.entries) == 1
    assert result.warnings[0] == "Line 1: missing employee ID"
    assert result.warnings[1] == "Line 2: invalid timestamp 'not-a-date'"


def test_fields_are_trimmed():
    result = parse_access_log("  E7  \t 2024-02-01 08:00:00 \tx\t 1 ")

    assert result.entries[0].employee_id == "E7"
    assert result.entries[0].direction == Direction.OUT


@pytest.mark.parametrize("content", ["", "   \n\n", "E1\tbad\tx\t0\nE2\t2024-02-01 08:00\tx\t9"])
def test_no_valid_entries_raises(content):
    with pytest.raises(ParseError, match="no valid entries"):
        parse_access_log(content)


def test_parse_timestamp_keeps_wall_clock_of_offset():
    assert parse_timestamp("2024-02-01T08:30:00+02:00") == datetime(2024, 2, 1, 8, 30)


def test_parse_timestamp_rejects_garbage():
    assert parse_timestamp("") is None
    assert parse_timestamp("yesterday-ish") is None


@pytest.mark.parametrize("word", ["now", "today", "NOW", "tomorrow"])
def test_clock_words_are_not_timestamps(word):
    assert parse_timestamp(word) is None


def test_clock_word_line_is_skipped():
    result = parse_access_log("E1\tnow\tx\t0\nE1\t2024-02-01 08:00:00\tx\t1")

    assert len(result.entries) == 1
    assert result.entries[0].timestamp == datetime(2024, 2, 1, 8, 0)
    assert result.warnings == ["Line 1: invalid timestamp 'now'"]
