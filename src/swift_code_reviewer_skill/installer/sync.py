"""Filesystem primitives: locating the bundle and copying it."""

import shutil
from pathlib import Path

from ..utils.logging import get_logger
from .errors import CopyCycleError, PackageRootNotFoundError

logger = get_logger(__name__)


def find_package_root(start: Path, manifest_file: str) -> Path:
    """Walk up from ``start`` to the first directory containing ``manifest_file``."""
    start = start.resolve()
    current = start
    while not (current / manifest_file).exists():
        parent = current.parent
        if parent == current:
            raise PackageRootNotFoundError(manifest_file, start)
        current = parent

    logger.debug(f"Found {manifest_file} in {current}")
    return current


def copy_recursive(src: Path, dest: Path, _visited: set[Path] | None = None) -> None:
    """Copy ``src`` to ``dest``, descending into directories.

    Files are copied byte for byte and overwrite whatever is at ``dest``.
    Symlinks are followed; a directory reached twice raises CopyCycleError.
    """
    if not src.is_dir():
        shutil.copyfile(src, dest)
        logger.debug(f"Copied file {src} -> {dest}")
        return

    visited = set() if _visited is None else _visited
    real = src.resolve()
    if real in visited:
        raise CopyCycleError(src)
    visited.add(real)

    dest.mkdir(parents=True, exist_ok=True)
    for entry in src.iterdir():
        copy_recursive(entry, dest / entry.name, visited)

    visited.discard(real)


def remove_path(path: Path) -> bool:
    """Delete ``path`` whether it is a directory tree, a file or a symlink.

    Symlinks are unlinked, never followed. Returns False when nothing was there.
    """
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)
    else:
        return False
    return True
