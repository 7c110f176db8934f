# =============================================================================
# core/errors.py  —  Exception Hierarchy
# =============================================================================
#
# Only LOCAL problems are raised to callers of the core:
#   - UnknownTool        → the agent asked for a tool we don't have
#   - ConfigurationError → the environment is broken at startup
#
# Dispatcher faults (DispatchError and friends) are raised by the dispatcher
# but caught by the router and rendered as a "Network/Connection Error"
# result.  Remote-side outcomes (402, 400, 5xx bodies) are never exceptions;
# they are verdicts (see core/models.py).
# =============================================================================

from typing import Optional


class AifaisError(Exception):
    """Base class for every error raised by this package."""


class UnknownTool(AifaisError, LookupError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Tool not found: {name}")
        self.name = name


class ConfigurationError(AifaisError, ValueError):
    """Raised when an environment setting cannot be parsed."""


# -----------------------------------------------------------------------------
# Dispatcher faults
# -----------------------------------------------------------------------------
class DispatchError(AifaisError):
    """Base class for failures where no usable HTTP response was obtained."""


class TransientNetworkError(DispatchError):
    """A single retryable failure: a transport error or a 5xx response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MaxRetriesExceeded(DispatchError):
    """Every attempt failed transiently.

    The last TransientNetworkError is chained as ``__cause__``.
    """

    def __init__(self, url: str, attempts: int, last_error: Optional[Exception] = None):
        message = f"Max retries reached ({attempts} attempts to {url})"
        if last_error is not None:
            message = f"{message}; last error: {last_error}"
        super().__init__(message)
        self.url = url
        self.attempts = attempts
        self.last_error = last_error


class TransportFailureError(DispatchError):
    """A transport failure that retrying cannot fix (bad URL, bad scheme)."""
