"""Front matter reader for the bundled SKILL.md."""

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from ..utils.logging import get_logger

logger = get_logger(__name__)

FRONTMATTER_PATTERN = re.compile(r"^---\s*\n(.*?)\n---\s*\n", re.DOTALL)


@dataclass
class SkillMetadata:
    """Name, description and any extra keys declared in SKILL.md front matter."""

    name: str
    description: str
    extra: dict = field(default_factory=dict)

    @property
    def summary(self) -> str:
        """One-line description, trimmed for console output."""
        first_line = self.description.strip().splitlines()[0] if self.description.strip() else ""
        return first_line[:80] + "..." if len(first_line) > 80 else first_line


def parse_skill_metadata(content: str, source: str = "SKILL.md") -> SkillMetadata | None:
    """Parse front matter from SKILL.md text.

    Returns None when the front matter is missing, is not valid YAML, is not
    a mapping, or lacks ``name`` or ``description``.
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        logger.warning(f"No frontmatter found in {source}")
        return None

    try:
        frontmatter = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.warning(f"Invalid YAML frontmatter in {source}: {e}")
        return None

    if not isinstance(frontmatter, dict):
        logger.warning(f"Frontmatter must be a mapping in {source}")
        return None

    name = frontmatter.get("name")
    description = frontmatter.get("description")
    if not name or not description:
        logger.warning(f"Missing required fields (name, description) in {source}")
        return None

    extra = {k: v for k, v in frontmatter.items() if k not in {"name", "description"}}
    return SkillMetadata(name=str(name), description=str(description), extra=extra)


def load_skill_metadata(skill_file: Path) -> SkillMetadata | None:
    """Read and parse the front matter of a SKILL.md file."""
    if not skill_file.is_file():
        logger.warning(f"Skill file not found: {skill_file}")
        return None

    try:
        content = skill_file.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.warning(f"{skill_file} is not valid UTF-8")
        return None

    return parse_skill_metadata(content, source=str(skill_file))
