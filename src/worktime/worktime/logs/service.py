from __future__ import annotations

import logging

from .model import ParseResult
from .parser import parse_access_log
from .repository import LogRepository

logger = logging.getLogger(__name__)


class LogService:
    def __init__(self, logs: LogRepository):
        self._logs = logs

    def upload(self, content: str) -> ParseResult:
        """Parse an access log and make it the current log set.

        A ParseError leaves the stored logs untouched.
        """

        result = parse_access_log(content)
        self._logs.replace_all(result.entries)

        if result.skipped_lines:
            logger.warning(
                "Loaded %d log entries, %d lines skipped",
                len(result.entries),
                result.skipped_lines,
            )
        else:
            logger.info("Loaded %d log entries", len(result.entries))
        return result

    def count(self) -> int:
        return self._logs.count()
