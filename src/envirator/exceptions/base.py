"""Base exception classes for envirator.

All envirator exceptions carry structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging

Missing variables and load failures are not raised during normal
resolution; they are reported through the logger and end the process via
the configured terminator. These classes cover invalid configuration and
callers that opt into exception-based termination.
"""

from typing import Any, Dict, Optional


class EnviratorError(Exception):
    """Base exception for all envirator errors.

    Attributes:
        code: Machine-readable error code (e.g., "INVALID_OPTION")
        message: Human-readable error message
        details: Optional additional context
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(EnviratorError):
    """Raised when Envirator options are invalid.

    The message may be passed as the only positional argument.
    """

    def __init__(
        self, message: str, code: str = "INVALID_OPTION", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)


class LoadError(EnviratorError):
    """Wraps a failure to read or parse an env file."""

    def __init__(self, path: str, cause: BaseException):
        super().__init__(
            code="LOAD_FAILED",
            message=f"failed to load '{path}': {cause}",
            details={"path": path, "cause": type(cause).__name__},
        )
        self.path = path
        self.cause = cause


class TerminationError(EnviratorError):
    """Raised in place of process exit by RaisingTerminator.

    Attributes:
        exit_code: The status the process would have exited with
    """

    def __init__(self, exit_code: int, message: Optional[str] = None):
        super().__init__(
            code="TERMINATED",
            message=message or f"process terminated with exit code {exit_code}",
            details={"exit_code": exit_code},
        )
        self.exit_code = exit_code
