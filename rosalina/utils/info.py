"""
Package information utility.

This module provides a command-line utility for displaying
information about the Rosalina installation and environment.
"""

import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict

import rosalina
from .config import get_config
from .exceptions import ConfigurationError


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return 'Not installed'


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to Rosalina.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'jinja2_version': _distribution_version("Jinja2"),
        'pyyaml_version': _distribution_version("PyYAML"),
    }


def get_rosalina_info() -> Dict[str, Any]:
    """
    Get Rosalina-specific information.

    Returns:
        Dictionary containing Rosalina information
    """
    info = {
        'version': rosalina.__version__,
        'author': rosalina.__author__,
    }

    try:
        config = get_config()
    except ConfigurationError as e:
        info['config_error'] = str(e)
        return info

    banner = config.banner()
    info['config_file'] = str(config.config_file)
    info['config_file_exists'] = config.config_file.exists()
    info['tool_name'] = banner.tool_name
    info['banner_version'] = banner.version
    info['document_extension'] = config.generator.document_extension
    return info


def print_info() -> None:
    """Print formatted information about Rosalina and the system."""
    print("Rosalina UI Code-Behind Generator")
    print("=" * 40)

    rosalina_info = get_rosalina_info()
    print(f"\nRosalina Version: {rosalina_info['version']}")
    print(f"Author: {rosalina_info['author']}")

    if 'config_error' in rosalina_info:
        print(f"Configuration Error: {rosalina_info['config_error']}")
    else:
        state = "found" if rosalina_info['config_file_exists'] else "not found, using defaults"
        print(f"Configuration: {rosalina_info['config_file']} ({state})")
        print(f"Banner: {rosalina_info['tool_name']} {rosalina_info['banner_version']}")
        print(f"Document Extension: {rosalina_info['document_extension']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Jinja2 Version: {system_info['jinja2_version']}")
    print(f"PyYAML Version: {system_info['pyyaml_version']}")


def main() -> None:
    """Main entry point for the rosalina-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
