"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
Rosalina package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the Rosalina package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    # Determine log level
    if level is None:
        level = os.environ.get("ROSALINA_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    # Configure root logger for rosalina
    logger = logging.getLogger("rosalina")
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(f"rosalina.{name}")


class RosalinaLogger:
    """
    Status reporting for code-behind generation.

    Host-side components use this to tell the operator what happens around
    each synthesis call. The core itself never logs.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_generation_start(self, document_path: str) -> None:
        self.logger.info(f"Generating UI code behind for {document_path}")

    def log_generation_done(self, output_path: str) -> None:
        self.logger.info(f"Done generating: {output_path}")

    def log_generation_failed(self, document_path: str, reason: str) -> None:
        self.logger.error(f"Failed to generate UI code behind for {document_path}: {reason}")

    def log_invalid_identifier(self, type_name: str, document_path: str) -> None:
        """
        Warn that a document name will not compile as a C# class name.

        Args:
            type_name: Type name derived from the document
            document_path: Document the name came from
        """
        self.logger.warning(
            f"'{type_name}' is not a valid C# identifier; "
            f"the code generated for {document_path} will not compile"
        )

    def log_skipped(self, path: str, reason: str) -> None:
        self.logger.warning(f"Skipping {path}: {reason}")


# Initialize logging on module import
setup_logging()
