import pytest

from worktime.export.formatter import export_csv, export_filename, format_duration, warning_labels
from worktime.records.model import DailyRecord, MonthlyRecord


@pytest.mark.parametrize("minutes,expected", [(0, "0:00"), (45, "0:45"), (90, "1:30"), (125, "2:05"), (6000, "100:00")])
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


def test_warning_labels_fixed_order():
    day = DailyRecord(
        date="2024-02-01",
        arrival="08:00",
        departure="17:00",
        missing_out=True,
        has_multiple_logs=True,
        manually_edited=True,
    )
    assert warning_labels(day) == ["Missing OUT", "Multiple logs", "Manually edited"]
    assert warning_labels(DailyRecord(date="2024-02-01")) == []


def test_export_rows_totals_and_separators():
    e1 = MonthlyRecord.build(
        employee_id="E1",
        month="2024-02",
        daily_records=[
            DailyRecord(date="2024-02-01", arrival="08:00", departure="17:00", worked_minutes=540),
            DailyRecord(date="2024-02-02"),
            DailyRecord(
                date="2024-02-03",
                arrival="08:00",
                departure="17:45",
                worked_minutes=585,
                missing_in=True,
                has_multiple_logs=True,
            ),
        ],
    )
    e2 = MonthlyRecord.build(
        employee_id="E2",
        month="2024-02",
        daily_records=[DailyRecord(date="2024-02-01", arrival="09:00", worked_minutes=0, manually_edited=True)],
    )

    assert export_csv([e1, e2]) == (
        "Employee ID,Date,Arrival,Departure,Worked Hours,Warnings\n"
        "E1,2024-02-01,08:00,17:00,9:00,\n"
        "E1,2024-02-03,08:00,17:45,9:45,Missing IN; Multiple logs\n"
        "E1,TOTAL,,,18:45,\n"
        "\n"
        "E2,2024-02-01,09:00,,0:00,Manually edited\n"
        "E2,TOTAL,,,0:00,\n"
        "\n"
    )


def test_export_of_nothing_is_just_the_header():
    assert export_csv([]) == "Employee ID,Date,Arrival,Departure,Worked Hours,Warnings\n"


def test_export_filename():
    assert export_filename("2024-02") == "work-time-2024-02.csv"
