"""Structural Markdown scanning for skill bodies.

Only the parts a skill document contract cares about are extracted: ATX
headings with their GitHub-style anchors, fenced code blocks, inline links
and URLs. Fenced block contents are opaque; nothing inside a fence counts
as a heading or a link.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

_FENCE_OPEN_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
_FENCE_CLOSE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*$")
_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?[ \t]*$")
_CLOSING_HASHES_RE = re.compile(r"(?:^|[ \t]+)#+$")
_LINK_RE = re.compile(r"(?<!!)\[([^\]]*)\]\(\s*<?([^)\s>]*)>?(?:\s+\"[^\"]*\")?\s*\)")
_INLINE_CODE_RE = re.compile(r"`[^`]*`")
_URL_RE = re.compile(r"https?://[^\s)>\]\"'`]+")
_SLUG_DROP_RE = re.compile(r"[^\w\- ]", re.UNICODE)

TOC_TITLES = ("table of contents", "contents", "toc")


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    anchor: str
    line: int


@dataclass(frozen=True)
class CodeBlock:
    language: str
    info: str
    start_line: int
    end_line: Optional[int]
    content: str

    @property
    def closed(self) -> bool:
        return self.end_line is not None


@dataclass(frozen=True)
class Link:
    text: str
    target: str
    line: int

    @property
    def is_internal(self) -> bool:
        return self.target.startswith("#")

    @property
    def anchor(self) -> str:
        return self.target[1:] if self.is_internal else ""


@dataclass
class MarkdownDocument:
    headings: list[Heading] = field(default_factory=list)
    code_blocks: list[CodeBlock] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    urls: list[str] = field(default_factory=list)
    unclosed_fence_line: Optional[int] = None

    @property
    def anchors(self) -> set[str]:
        return {heading.anchor for heading in self.headings}

    @property
    def internal_links(self) -> list[Link]:
        return [link for link in self.links if link.is_internal]

    @property
    def section_titles(self) -> list[str]:
        return [heading.text for heading in self.headings]

    @property
    def languages(self) -> list[str]:
        seen: list[str] = []
        for block in self.code_blocks:
            if block.language and block.language not in seen:
                seen.append(block.language)
        return seen

    def has_section(self, title: str) -> bool:
        needle = title.lower()
        return any(needle in heading.text.lower() for heading in self.headings)

    def table_of_contents(self) -> list[Link]:
        """Links inside the first "Table of Contents" section."""
        for index, heading in enumerate(self.headings):
            if heading.text.strip().lower() not in TOC_TITLES:
                continue
            end: Optional[int] = None
            for later in self.headings[index + 1 :]:
                if later.level <= heading.level:
                    end = later.line
                    break
            return [
                link
                for link in self.links
                if link.line > heading.line and (end is None or link.line < end)
            ]
        return []


def find_urls(text: str) -> list[str]:
    return [url.rstrip(".,;:") for url in _URL_RE.findall(text)]


def slugify(text: str) -> str:
    """GitHub-compatible heading anchor, without the duplicate suffix."""
    plain = _LINK_RE.sub(lambda match: match.group(1), text)
    slug = plain.strip().lower()
    slug = _SLUG_DROP_RE.sub("", slug)
    return slug.replace(" ", "-")


def parse_markdown(text: str, first_line: int = 1) -> MarkdownDocument:
    document = MarkdownDocument()
    document.urls = find_urls(text)

    anchor_counts: dict[str, int] = {}
    fence: Optional[tuple[str, int, str, int]] = None
    fence_lines: list[str] = []

    for offset, line in enumerate(text.splitlines()):
        number = first_line + offset

        if fence is not None:
            marker, width, info, start = fence
            close = _FENCE_CLOSE_RE.match(line)
            if close and close.group(1)[0] == marker and len(close.group(1)) >= width:
                document.code_blocks.append(_code_block(info, start, number, fence_lines))
                fence = None
                fence_lines = []
            else:
                fence_lines.append(line)
            continue

        opening = _FENCE_OPEN_RE.match(line)
        if opening:
            run, info = opening.group(1), opening.group(2).strip()
            # Backtick fences cannot carry backticks in their info string.
            if not (run[0] == "`" and "`" in info):
                fence = (run[0], len(run), info, number)
                continue

        heading = _HEADING_RE.match(line)
        if heading:
            title = _CLOSING_HASHES_RE.sub("", heading.group(2) or "").strip()
            base = slugify(title)
            seen = anchor_counts.get(base, 0)
            anchor_counts[base] = seen + 1
            anchor = base if seen == 0 else f"{base}-{seen}"
            document.headings.append(
                Heading(level=len(heading.group(1)), text=title, anchor=anchor, line=number)
            )

        _scan_links(document, line, number)

    if fence is not None:
        _, _, info, start = fence
        document.code_blocks.append(_code_block(info, start, None, fence_lines))
        document.unclosed_fence_line = start

    return document


def _code_block(
    info: str, start: int, end: Optional[int], lines: list[str]
) -> CodeBlock:
    language = info.split()[0].lower() if info else ""
    # Attribute-style info strings such as ``{.python}``.
    language = language.strip("{}.")
    return CodeBlock(
        language=language,
        info=info,
        start_line=start,
        end_line=end,
        content="\n".join(lines),
    )


def _scan_links(document: MarkdownDocument, line: str, number: int) -> None:
    searchable = _INLINE_CODE_RE.sub("", line)
    for match in _LINK_RE.finditer(searchable):
        document.links.append(
            Link(text=match.group(1).strip(), target=match.group(2), line=number)
        )
