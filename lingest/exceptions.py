"""
Lingest Exception Hierarchy

Centralized exception classes for structured error handling across the codebase.
All lingest-specific exceptions inherit from LingestError.

Usage:
    from lingest.exceptions import LingestError, RootAccessError

    try:
        result = process_directory(request)
    except RootAccessError as e:
        logger.error(f"Ingest failed: {e}")
"""


class LingestError(Exception):
    """Base exception for all lingest errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(LingestError):
    """Error in lingest configuration."""

    pass


class ConfigFileError(ConfigurationError):
    """Project config file could not be parsed or has the wrong shape."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, details)
        self.path = path


# =============================================================================
# Ingest Errors
# =============================================================================


class IngestError(LingestError):
    """Base class for ingestion errors."""

    pass


class RootAccessError(IngestError):
    """Root directory does not exist or cannot be listed."""

    def __init__(self, message: str, root: str | None = None, reason: str | None = None):
        details = {}
        if root:
            details["root"] = root
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.root = root
        self.reason = reason


# =============================================================================
# Output Errors
# =============================================================================


class OutputError(LingestError):
    """Base class for errors writing the output artifact."""

    pass


class OutputExistsError(OutputError):
    """Output file already exists and overwriting was not requested."""

    pass


class OutputWriteError(OutputError):
    """Output file could not be written."""

    pass
