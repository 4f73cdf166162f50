"""Skill index for retrieval by name, description and headings."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Iterable

from skill_corpus.categories import CategoryCatalog
from skill_corpus.corpus import SkillCorpus
from skill_corpus.errors import InvalidIndexError, InvalidJsonFormatError
from skill_corpus.skills.markdown import find_urls, parse_markdown
from skill_corpus.skills.models import Skill
from skill_corpus.utils import read_json, write_json

logger = logging.getLogger(__name__)

NAME_WEIGHT = 5
DESCRIPTION_WEIGHT = 3
LANGUAGE_WEIGHT = 2
HEADING_WEIGHT = 1


@dataclass(frozen=True)
class SkillIndexEntry:
    name: str
    description: str
    category: str
    path: str
    line_count: int
    url_count: int = 0
    headings: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SearchHit:
    entry: SkillIndexEntry
    score: int


def index_entry(skill: Skill, root: Path, catalog: CategoryCatalog) -> SkillIndexEntry:
    document = parse_markdown(skill.content, first_line=skill.body_offset)
    try:
        path = skill.source_path.relative_to(root)
    except ValueError:
        path = skill.source_path
    return SkillIndexEntry(
        name=skill.name,
        description=skill.metadata.description,
        category=catalog.categorize(skill.name),
        path=str(path),
        line_count=skill.line_count,
        url_count=len(find_urls(skill.text)),
        headings=document.section_titles,
        languages=document.languages,
    )


def build_index(corpus: SkillCorpus, catalog: CategoryCatalog) -> list[SkillIndexEntry]:
    entries = [
        index_entry(skill, corpus.root, catalog) for skill in corpus.skills.list_skills()
    ]
    logger.debug("indexed %d skills", len(entries))
    return sorted(entries, key=lambda item: item.name)


def write_index(entries: Iterable[SkillIndexEntry], path: Path) -> None:
    write_json(path, {"skills": [entry.as_dict() for entry in entries]})


def load_index(path: Path) -> list[SkillIndexEntry]:
    try:
        payload = read_json(path)
    except json.JSONDecodeError as exc:
        raise InvalidJsonFormatError(path, exc.msg) from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("skills"), list):
        raise InvalidIndexError(path, "expected an object with a 'skills' list")

    entries: list[SkillIndexEntry] = []
    for position, item in enumerate(payload["skills"]):
        if not isinstance(item, dict):
            raise InvalidIndexError(path, f"entry {position} is not an object")
        try:
            entries.append(SkillIndexEntry(**item))
        except TypeError as exc:
            raise InvalidIndexError(path, f"entry {position}: {exc}") from exc
    return entries


def search(
    entries: Iterable[SkillIndexEntry], query: str, limit: int = 10
) -> list[SearchHit]:
    terms = [term for term in query.lower().split() if term]
    if not terms:
        return []

    hits: list[SearchHit] = []
    for entry in entries:
        score = _score(entry, terms)
        if score > 0:
            hits.append(SearchHit(entry=entry, score=score))

    hits.sort(key=lambda hit: (-hit.score, hit.entry.name))
    return hits[:limit]


def _score(entry: SkillIndexEntry, terms: list[str]) -> int:
    name = entry.name.lower()
    description = entry.description.lower()
    headings = [heading.lower() for heading in entry.headings]
    languages = {language.lower() for language in entry.languages}

    score = 0
    for term in terms:
        if term in name:
            score += NAME_WEIGHT
        if term in description:
            score += DESCRIPTION_WEIGHT
        if term in languages:
            score += LANGUAGE_WEIGHT
        if any(term in heading for heading in headings):
            score += HEADING_WEIGHT
    return score
