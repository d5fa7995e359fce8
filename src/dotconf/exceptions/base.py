"""Base exception classes for dotconf.

Every dotconf exception carries structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging
"""

from typing import Any, Dict, Optional


class DotconfError(Exception):
    """Base exception for all dotconf errors.

    Attributes:
        code: Machine-readable error code (e.g., "UNKNOWN_PATH_ALIAS")
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
        """Convert exception to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DotconfError):
    """Raised when bootstrap configuration is invalid or incomplete.

    Used by the path resolver for unknown aliases.
    """

    pass


class BindingResolutionError(DotconfError):
    """Raised when the container is asked for a name nothing was bound to."""

    def __init__(
        self, name: str, code: str = "BINDING_NOT_FOUND", details: Optional[Dict[str, Any]] = None
    ):
        """Initialize resolution error.

        Args:
            name: Display name of the binding that could not be resolved
            code: Error code (default: "BINDING_NOT_FOUND")
            details: Additional context
        """
        self.name = name
        super().__init__(
            code=code,
            message=f"No binding registered for '{name}'",
            details=details,
        )
