"""
Package information utility.

This module provides a command-line utility for displaying
information about the Enumerant installation and environment.
"""

import sys
import platform
from typing import Dict, Any

import enumerant


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to Enumerant.

    Returns:
        Dictionary containing system information
    """
    import jinja2
    import yaml

    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'jinja2_version': jinja2.__version__,
        'yaml_version': yaml.__version__,
    }


def get_enumerant_info() -> Dict[str, Any]:
    """
    Get Enumerant-specific information.

    Returns:
        Dictionary containing Enumerant information
    """
    from enumerant.codegen.config import SUPPORTED_DIALECTS, create_default_config

    defaults = create_default_config()
    return {
        'version': enumerant.__version__,
        'author': enumerant.__author__,
        'dialects': list(SUPPORTED_DIALECTS),
        'capability': defaults.capability_name,
        'default_target': defaults.target_dialect,
    }


def print_info() -> None:
    """Print formatted information about Enumerant and the system."""
    print("Enumerant Variant Iterator Generator")
    print("=" * 40)

    enumerant_info = get_enumerant_info()
    print(f"\nEnumerant Version: {enumerant_info['version']}")
    print(f"Author: {enumerant_info['author']}")
    print(f"Capability: {enumerant_info['capability']}")
    print(f"Dialects: {', '.join(enumerant_info['dialects'])} (default: {enumerant_info['default_target']})")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Jinja2 Version: {system_info['jinja2_version']}")
    print(f"PyYAML Version: {system_info['yaml_version']}")


def main() -> None:
    """Main entry point for the enumerant-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
