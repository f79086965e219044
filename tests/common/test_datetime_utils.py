from datetime import datetime

import pytest

from worktime.common import datetime_utils
from worktime.common.validators import require_hhmm, require_month, require_non_empty
from worktime.core.exceptions import ValidationError


def test_month_dates_respects_leap_years():
    assert len(datetime_utils.month_dates("2024-02")) == 29
    assert len(datetime_utils.month_dates("1900-02")) == 28
    assert len(datetime_utils.month_dates("2000-02")) == 29


@pytest.mark.parametrize("value", ["2024-13", "2024", "", "Feb 2024"])
def test_invalid_month(value):
    with pytest.raises(ValidationError):
        datetime_utils.parse_month(value)


def test_require_month_normalises():
    assert require_month("2024-2") == "2024-02"


def test_require_hhmm():
    assert require_hhmm("8:05", "start_time") == "08:05"
    with pytest.raises(ValidationError):
        require_hhmm("", "start_time")
    with pytest.raises(ValidationError):
        require_hhmm("24:00", "start_time")


def test_require_non_empty_trims():
    assert require_non_empty("  Ann ", "name") == "Ann"
    with pytest.raises(ValidationError):
        require_non_empty("   ", "name")


def test_current_month(monkeypatch):
    monkeypatch.setattr(datetime_utils, "now_local", lambda: datetime(2024, 7, 3, 12, 0))
    assert datetime_utils.current_month() == "2024-07"
