"""Example: use the core directly (no Flask, no database).

Usage: python examples/example_usage.py access_log.txt 2024-02
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src" / "worktime"))

from worktime.core.exceptions import ParseError
from worktime.export.formatter import export_csv
from worktime.logs.parser import parse_access_log
from worktime.records.generator import generate_monthly_records
from worktime.shifts.model import ShiftDefaults


def main(argv: list[str]) -> int:
    if len(argv) != 3:
        print(__doc__)
        return 2

    content = Path(argv[1]).read_text(encoding="utf-8-sig")
    try:
        result = parse_access_log(content)
    except ParseError as e:
        print(f"Cannot read {argv[1]}: {e}", file=sys.stderr)
        return 1

    for warning in result.warnings:
        print(warning, file=sys.stderr)

    records = generate_monthly_records(result.entries, argv[2], ShiftDefaults())
    sys.stdout.write(export_csv(records))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
