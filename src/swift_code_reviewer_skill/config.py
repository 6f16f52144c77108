"""Configuration management for the Swift Code Reviewer skill installer."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SKILL_NAME = "swift-code-reviewer-skill"
MANIFEST_FILE = "SKILL.md"
DOCS_URL = "https://github.com/Viniciuscarvalho/swift-code-reviewer-skill"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Installer settings, overridable through SWIFT_REVIEWER_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="SWIFT_REVIEWER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Install location
    home_dir: Path = Field(default_factory=Path.home)
    config_dir_name: str = ".claude"
    skill_name: str = SKILL_NAME

    # Bundle contents
    manifest_file: str = MANIFEST_FILE
    files_to_copy: tuple[str, ...] = (
        MANIFEST_FILE,
        "README.md",
        "LICENSE",
        "CONTRIBUTING.md",
        "CHANGELOG.md",
    )
    dirs_to_copy: tuple[str, ...] = ("references",)

    # Where the upward search for the manifest starts; None means the package directory
    package_root: Path | None = None

    # Logging
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def skills_dir(self) -> Path:
        """Directory holding every installed skill."""
        return self.home_dir / self.config_dir_name / "skills"

    @property
    def target_dir(self) -> Path:
        """Directory this skill is installed into."""
        return self.skills_dir / self.skill_name


def load_settings(env_file: Path | None = None) -> Settings:
    """Build settings from SWIFT_REVIEWER_* variables, plus ``env_file`` when it exists.

    Raises pydantic.ValidationError when a value is invalid.
    """
    overrides = {"_env_file": env_file} if env_file and env_file.is_file() else {}
    return Settings(**overrides)
