from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..core.enums import Direction


@dataclass(frozen=True)
class LogEntry:
    """Domain entity: a single badge punch."""

    employee_id: str
    timestamp: datetime
    direction: Direction


@dataclass(frozen=True)
class ParseResult:
    entries: list[LogEntry]
    skipped_lines: int = 0
    warnings: list[str] = field(default_factory=list)
