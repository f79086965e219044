from __future__ import annotations

from typing import Protocol, Sequence

from .model import LogEntry


class LogRepository(Protocol):
    """Repository interface for the uploaded access log.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def replace_all(self, entries: Sequence[LogEntry]) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[LogEntry]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
