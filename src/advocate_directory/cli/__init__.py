"""
Command-line interface for the advocate directory (``advocates``).
"""

from advocate_directory.cli.app import app

__all__ = ["app"]
