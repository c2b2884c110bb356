"""Custom exceptions for simplecli.

This module defines a hierarchy of exceptions for different error types:
- SimpleCliError: Base exception for all simplecli errors
- InputClosed: The input stream has no more lines
- ContractViolation: A caller passed arguments no prompt can satisfy
- EmptyCandidates: An empty candidate list was given for a choice
- InvalidPageSize: Pagination was requested with a non-positive page size
- RetryLimitExceeded: A configured retry limit ran out
- ConfigurationError: Configuration related errors
"""

from typing import Any


class SimpleCliError(Exception):
    """Base exception for all simplecli errors.

    All simplecli-specific exceptions inherit from this class, allowing
    callers to catch all simplecli errors with a single except clause.
    """

    pass


class InputClosed(SimpleCliError):
    """The input stream yielded no further lines.

    Raised by every blocking read once end-of-input is reached. The
    current prompt is abandoned without retrying.
    """

    def __init__(self, message: str = "Input stream closed"):
        super().__init__(message)


class ContractViolation(SimpleCliError, ValueError):
    """Caller-side misuse, reported before any I/O happens."""

    pass


class EmptyCandidates(ContractViolation):
    """A choice was requested from an empty list of candidates."""

    def __init__(self, message: str = "At least one candidate is required"):
        super().__init__(message)


class InvalidPageSize(ContractViolation):
    """Pagination was requested with a page size that is not positive.

    Attributes:
        page_size: The rejected value
    """

    def __init__(self, page_size: Any):
        super().__init__(f"Page size must be a positive integer, got {page_size!r}")
        self.page_size = page_size


class RetryLimitExceeded(SimpleCliError):
    """Too many invalid answers in a row while a retry limit is set.

    Attributes:
        attempts: Number of rejected attempts
    """

    def __init__(self, attempts: int):
        super().__init__(f"Gave up after {attempts} invalid attempts")
        self.attempts = attempts


class ConfigurationError(SimpleCliError):
    """Configuration related errors.

    Raised when a config file or environment override holds a value
    the engine cannot use, such as:
    - A negative retry limit
    - A non-positive page size
    """

    pass
