"""Skill bundle metadata."""

from .metadata import SkillMetadata, load_skill_metadata, parse_skill_metadata

__all__ = ["SkillMetadata", "load_skill_metadata", "parse_skill_metadata"]
