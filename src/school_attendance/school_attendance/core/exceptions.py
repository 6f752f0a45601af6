class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid (bad year, month, date or range)."""


class HolidayProviderError(DomainError):
    """Raised when the Hebrew calendar computation fails for a year.

    Holiday resolution is a soft dependency: callers log and continue.
    """
