"""Load, lint, index and search ``skills/<name>/SKILL.md`` corpora."""

__version__ = "0.1.0"
