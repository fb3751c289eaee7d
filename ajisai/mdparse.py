"""Markdown helpers: YAML front matter and first-level headings."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import Any, Iterable

import yaml
from markdown_it import MarkdownIt
from markdown_it.token import Token

_DELIMITER = "---"
_TEXT_TOKENS = frozenset({"text", "text_special", "code_inline"})

_markdown = MarkdownIt("commonmark")


class FrontMatterError(ValueError):
    """The front matter could not be parsed."""


@dataclass
class ParsedMarkdown:
    """Front matter metadata and the markdown that follows it."""

    front_matter: dict[str, Any] = field(default_factory=dict)
    content: str = ""


def _split_front_matter(text: str) -> tuple[str | None, str]:
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _DELIMITER:
        return None, text
    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() == _DELIMITER:
            return "".join(lines[1:index]), "".join(lines[index + 1 :])
    return None, text


def parse_markdown_with_metadata(content: bytes | str) -> ParsedMarkdown:
    """Split YAML front matter from markdown content.

    Without front matter the metadata is an empty dict and the content is
    returned whole. Invalid YAML raises FrontMatterError.
    """
    text = content.decode("utf-8") if isinstance(content, (bytes, bytearray)) else content
    raw, rest = _split_front_matter(text)
    if raw is None:
        return ParsedMarkdown(front_matter={}, content=text)
    try:
        loaded = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"invalid front matter: {exc}") from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise FrontMatterError("front matter must be a mapping")
    return ParsedMarkdown(front_matter=loaded, content=rest)


def _inline_text(tokens: Iterable[Token]) -> str:
    parts = []
    for token in tokens:
        if token.type in _TEXT_TOKENS:
            parts.append(token.content)
        elif token.children:
            parts.append(_inline_text(token.children))
    return "".join(parts)


def extract_h1_heading(content: str) -> str:
    """Return the plain text of the first level-one heading, or ""."""
    tokens = _markdown.parse(content)
    for current, following in pairwise(tokens):
        if current.type == "heading_open" and current.tag == "h1":
            return _inline_text(following.children or [])
    return ""