"""Parse skills with YAML frontmatter."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional

import yaml

from skill_corpus.constants import SKILL_FILENAME
from skill_corpus.skills.models import Skill, SkillMetadata
from skill_corpus.utils import read_text

_FRONTMATTER_RE = re.compile(r"^---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


def split_frontmatter(
    text: str,
) -> tuple[Optional[dict[str, Any]], str, Optional[str]]:
    """Split ``text`` into (frontmatter mapping, body, error).

    A mapping is ``None`` when there is no frontmatter block or the block is
    not a valid YAML mapping; in the latter case ``error`` says why.
    """
    match = _FRONTMATTER_RE.match(text)
    if not match:
        if text.startswith("---"):
            return None, text, "frontmatter block is not closed"
        return None, text, None

    content = text[match.end() :]
    try:
        raw = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        return None, content, f"invalid YAML ({exc.__class__.__name__})"

    if raw is None:
        return {}, content, None
    if not isinstance(raw, dict):
        return None, content, "frontmatter is not a mapping"
    return raw, content, None


def parse_skill(path: Path) -> Skill:
    text = read_text(path)
    name = path.parent.name if path.name == SKILL_FILENAME else path.stem

    raw, content, error = split_frontmatter(text)
    has_frontmatter = raw is not None or error is not None
    fields = raw or {}

    metadata = SkillMetadata(
        name=_as_text(fields.get("name")),
        description=_as_text(fields.get("description")),
        extra={
            key: value
            for key, value in fields.items()
            if key not in ("name", "description")
        },
    )
    return Skill(
        name=name,
        source_path=path,
        metadata=metadata,
        content=content,
        text=text,
        has_frontmatter=has_frontmatter,
        frontmatter_error=error,
        frontmatter=dict(fields),
    )


def _as_text(value: Any) -> str:
    # Scalars only; lists and mappings are reported by the frontmatter check.
    if value is None or isinstance(value, (list, dict)):
        return ""
    return str(value).strip()
