class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ParseError(DomainError):
    """Raised when an access log yields no usable entry at all."""


class RegenerationRequired(DomainError):
    """Raised when a month already has records and overwriting was not confirmed."""

    def __init__(self, month: str):
        super().__init__(f"Records for {month} already exist; regenerating discards manual edits")
        self.month = month
