"""
Package information utility.

This module provides a command-line utility for displaying
information about the Subcrate installation and its configuration.
"""

import platform
import sys
from typing import Any, Dict

import jinja2
import yaml

import subcrate
from subcrate.utils.config import get_config


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to Subcrate.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'architecture': platform.architecture(),
        'pyyaml_version': yaml.__version__,
        'jinja2_version': getattr(jinja2, '__version__', 'unknown'),
    }


def get_subcrate_info() -> Dict[str, Any]:
    """
    Get Subcrate-specific information.

    Returns:
        Dictionary containing Subcrate information
    """
    info = {
        'version': subcrate.__version__,
        'author': subcrate.__author__,
    }

    try:
        config = get_config()
        info['config_file'] = str(config.config_file)
        info['config'] = config.to_dict()
    except subcrate.SubcrateError as e:
        info['config_error'] = str(e)

    return info


def print_info() -> None:
    """Print formatted information about Subcrate and the system."""
    print("Subcrate Package Naming Toolkit")
    print("=" * 40)

    subcrate_info = get_subcrate_info()
    print(f"\nSubcrate Version: {subcrate_info['version']}")
    print(f"Author: {subcrate_info['author']}")

    if 'config_error' in subcrate_info:
        print(f"Configuration Error: {subcrate_info['config_error']}")
    else:
        naming = subcrate_info['config']['naming']
        print(f"Configuration File: {subcrate_info['config_file']}")
        print(f"Namespace Delimiter: {naming['delimiter']!r}")
        print(f"Max Namespace Depth: {naming['max_depth']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Architecture: {system_info['architecture'][0]}")
    print(f"PyYAML Version: {system_info['pyyaml_version']}")
    print(f"Jinja2 Version: {system_info['jinja2_version']}")


def main() -> None:
    """Main entry point for the subcrate-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
