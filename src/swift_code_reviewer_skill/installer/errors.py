"""Installer exceptions."""

from pathlib import Path


class InstallerError(Exception):
    """Base class for installer failures."""


class PackageRootNotFoundError(InstallerError):
    """No ancestor of the start directory contains the manifest file."""

    def __init__(self, manifest_file: str, start: Path):
        self.manifest_file = manifest_file
        self.start = start
        super().__init__(f"Could not find {manifest_file} in package (searched upward from {start})")


class CopyCycleError(InstallerError):
    """A directory was reached twice while copying, through a symlink loop."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Symlink cycle detected at {path}")
