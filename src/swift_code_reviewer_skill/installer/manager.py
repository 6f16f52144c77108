"""Install and uninstall the skill bundle into the agent's skills directory."""

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from ..config import Settings
from ..skills.metadata import SkillMetadata, load_skill_metadata
from ..utils.logging import get_logger
from .sync import copy_recursive, find_package_root, remove_path

logger = get_logger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent


@dataclass
class InstallResult:
    """Outcome of an install."""

    target_dir: Path
    package_root: Path
    copied: list[str] = field(default_factory=list)
    updated: bool = False
    created_skills_dir: bool = False
    metadata: SkillMetadata | None = None


@dataclass
class UninstallResult:
    """Outcome of an uninstall."""

    target_dir: Path
    removed: bool


class SkillInstaller:
    """Mirrors the manifested parts of the package root into the target directory."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def locate_package_root(self) -> Path:
        """Find the directory holding the manifest file."""
        start = self.settings.package_root or PACKAGE_DIR
        return find_package_root(start, self.settings.manifest_file)

    def install(self) -> InstallResult:
        """Install the bundle, replacing any previous installation wholesale.

        Raises PackageRootNotFoundError before any filesystem change when the
        manifest cannot be found. OSErrors from copying are not handled.
        """
        settings = self.settings
        package_root = self.locate_package_root()
        target_dir = settings.target_dir

        created_skills_dir = not settings.skills_dir.exists()
        if created_skills_dir:
            logger.debug(f"Creating skills directory: {settings.skills_dir}")
        settings.skills_dir.mkdir(parents=True, exist_ok=True)

        logger.debug(f"Clearing any existing installation at {target_dir}")
        updated = remove_path(target_dir)

        target_dir.mkdir(parents=True)

        result = InstallResult(
            target_dir=target_dir,
            package_root=package_root,
            updated=updated,
            created_skills_dir=created_skills_dir,
        )

        for name in settings.files_to_copy:
            src = package_root / name
            if not src.exists():
                logger.debug(f"Skipping missing file: {name}")
                continue
            shutil.copyfile(src, target_dir / name)
            result.copied.append(name)

        for name in settings.dirs_to_copy:
            src = package_root / name
            if not src.exists():
                logger.debug(f"Skipping missing directory: {name}")
                continue
            copy_recursive(src, target_dir / name)
            result.copied.append(f"{name}/")

        result.metadata = load_skill_metadata(target_dir / settings.manifest_file)
        logger.debug(f"Installed {len(result.copied)} entries into {target_dir}")
        return result

    def uninstall(self) -> UninstallResult:
        """Remove the installed bundle; a missing installation is a no-op."""
        target_dir = self.settings.target_dir
        removed = remove_path(target_dir)
        logger.debug(f"Removed {target_dir}" if removed else f"Nothing installed at {target_dir}")
        return UninstallResult(target_dir=target_dir, removed=removed)
