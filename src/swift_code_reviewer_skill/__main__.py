"""Allow running as ``python -m swift_code_reviewer_skill``."""

from .cli import app

app()
