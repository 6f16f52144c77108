"""Tests for configuration module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from swift_code_reviewer_skill.config import Settings, load_settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_settings(self, monkeypatch):
        """Test default settings values."""
        monkeypatch.delenv("SWIFT_REVIEWER_HOME_DIR", raising=False)
        settings = Settings()

        assert settings.home_dir == Path.home()
        assert settings.config_dir_name == ".claude"
        assert settings.skill_name == "swift-code-reviewer-skill"
        assert settings.manifest_file == "SKILL.md"
        assert settings.files_to_copy == (
            "SKILL.md",
            "README.md",
            "LICENSE",
            "CONTRIBUTING.md",
            "CHANGELOG.md",
        )
        assert settings.dirs_to_copy == ("references",)
        assert settings.package_root is None

    def test_derived_paths(self, temp_dir):
        """Test skills and target directories are built from the home directory."""
        settings = Settings(home_dir=temp_dir)

        assert settings.skills_dir == temp_dir / ".claude" / "skills"
        assert settings.target_dir == temp_dir / ".claude" / "skills" / "swift-code-reviewer-skill"

    def test_custom_skill_name(self, temp_dir):
        """Test overriding the skill name changes the target directory."""
        settings = Settings(home_dir=temp_dir, skill_name="other-skill", config_dir_name=".agent")

        assert settings.target_dir == temp_dir / ".agent" / "skills" / "other-skill"

    def test_load_settings_from_env(self, temp_dir, monkeypatch):
        """Test loading settings from environment variables."""
        monkeypatch.setenv("SWIFT_REVIEWER_HOME_DIR", str(temp_dir))
        monkeypatch.setenv("SWIFT_REVIEWER_LOG_LEVEL", "DEBUG")

        settings = load_settings()
        assert settings.home_dir == temp_dir
        assert settings.log_level == "DEBUG"

    def test_load_settings_from_env_file(self, temp_dir):
        """Test loading settings from an explicit .env file."""
        env_file = temp_dir / ".env"
        env_file.write_text("SWIFT_REVIEWER_SKILL_NAME=from-env-file\n")

        settings = load_settings(env_file)
        assert settings.skill_name == "from-env-file"

    def test_load_settings_missing_env_file(self, temp_dir):
        """Test a missing .env file falls back to defaults."""
        settings = load_settings(temp_dir / "missing.env")
        assert settings.skill_name == "swift-code-reviewer-skill"

    def test_log_level_normalized(self):
        """Test lower-case log levels are accepted."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        """Test unknown log levels fail validation."""
        with pytest.raises(ValidationError):
            Settings(log_level="bogus")

    def test_invalid_log_level_from_env(self, monkeypatch):
        """Test an unknown level in the environment fails at load time."""
        monkeypatch.setenv("SWIFT_REVIEWER_LOG_LEVEL", "bogus")

        with pytest.raises(ValidationError):
            load_settings()
