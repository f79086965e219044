from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Display name attached to a badge employee ID."""

    employee_id: str
    name: str
    updated_at: Optional[datetime] = None
