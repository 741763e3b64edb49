"""
Utils package for Rosalina.

This module provides the ambient pieces shared by the host tools:
exceptions, logging and configuration.
"""

from .exceptions import (
    RosalinaError,
    InvalidRequestError,
    MalformedTreeError,
    PersistenceError,
    ConfigurationError,
)
from .logging import get_logger, setup_logging, RosalinaLogger

__all__ = [
    # Exceptions
    "RosalinaError",
    "InvalidRequestError",
    "MalformedTreeError",
    "PersistenceError",
    "ConfigurationError",
    # Logging
    "get_logger",
    "setup_logging",
    "RosalinaLogger",
]
