"""Skill bundle installer."""

from .errors import CopyCycleError, InstallerError, PackageRootNotFoundError
from .manager import InstallResult, SkillInstaller, UninstallResult
from .sync import copy_recursive, find_package_root, remove_path

__all__ = [
    "CopyCycleError",
    "InstallResult",
    "InstallerError",
    "PackageRootNotFoundError",
    "SkillInstaller",
    "UninstallResult",
    "copy_recursive",
    "find_package_root",
    "remove_path",
]
