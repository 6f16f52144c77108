"""Installer for the Swift Code Reviewer skill."""

__version__ = "1.2.0"
