"""
Custom exception definitions.

This module defines the exception hierarchy for Rosalina-specific errors.
Core synthesis raises InvalidRequestError and MalformedTreeError; the host
layer adds PersistenceError and ConfigurationError.
"""

from typing import Optional


class RosalinaError(Exception):
    """
    Base exception for all Rosalina-related errors.

    This is the root exception class for all Rosalina-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize Rosalina error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class InvalidRequestError(RosalinaError):
    """
    Raised when a document path cannot be turned into a type name.

    No declaration tree is built and no file is produced for the request.
    """

    def __init__(self, document_path: str, reason: str = ""):
        """
        Initialize invalid request error.

        Args:
            document_path: The offending document path
            reason: Optional explanation
        """
        message = f"Invalid document path '{document_path}'"
        if reason:
            message += f": {reason}"

        super().__init__(message, {"document_path": document_path})
        self.document_path = document_path
        self.reason = reason


class MalformedTreeError(RosalinaError):
    """
    Raised when a declaration tree fails structural validation.

    The builder never produces such a tree; seeing this error means a tree
    was assembled by hand or the builder has a bug. It is not retried.
    """

    def __init__(self, message: str, node: str = ""):
        """
        Initialize malformed tree error.

        Args:
            message: Error description
            node: Name of the offending node, when it has one
        """
        details = {"node": node} if node else {}
        super().__init__(message, details)
        self.node = node


class PersistenceError(RosalinaError):
    """
    Raised when a generated file cannot be written.

    The rendered text is kept on the exception so a caller can retry the
    write without rebuilding the tree.
    """

    def __init__(self, path: str, reason: str = "", text: str = ""):
        """
        Initialize persistence error.

        Args:
            path: Target file path
            reason: Underlying OS error message
            text: Text that was being written
        """
        message = f"Failed to write generated file '{path}'"
        if reason:
            message += f": {reason}"

        super().__init__(message, {"path": path})
        self.path = path
        self.reason = reason
        self.text = text


class ConfigurationError(RosalinaError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, message: str, config_file: str = ""):
        details = {"config_file": config_file} if config_file else {}
        super().__init__(message, details)
        self.config_file = config_file
