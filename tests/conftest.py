"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

SAMPLE_SKILL_MD = """---
name: swift-code-reviewer
description: Reviews Swift code for testing
version: 0.0.1
---

# Swift Code Reviewer

Test instructions.
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def package_root(temp_dir):
    """Create a sample skill bundle with SKILL.md and a references directory."""
    root = temp_dir / "pkg"
    (root / "references" / "nested").mkdir(parents=True)
    (root / "SKILL.md").write_text(SAMPLE_SKILL_MD, encoding="utf-8")
    (root / "README.md").write_text("# Readme\n", encoding="utf-8")
    (root / "references" / "a.md").write_text("# A\n", encoding="utf-8")
    (root / "references" / "nested" / "b.md").write_text("# B\n", encoding="utf-8")
    return root


@pytest.fixture
def home_dir(temp_dir):
    """Create a fake home directory."""
    home = temp_dir / "home"
    home.mkdir()
    return home


@pytest.fixture
def sample_settings(home_dir, package_root):
    """Create settings pointing at the fake home and sample bundle."""
    from swift_code_reviewer_skill.config import Settings

    return Settings(home_dir=home_dir, package_root=package_root)
