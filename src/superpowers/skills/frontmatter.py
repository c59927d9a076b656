"""
Header metadata parsing for SKILL.md files.

A skill document may start with a metadata block delimited by ``---``
lines:

    ---
    name: brainstorming
    description: Use when refining a rough idea into a design
    ---

    # Brainstorming
    ...

Only simple ``key: value`` lines are recognized. This is not a
YAML parser: skill descriptions routinely contain colons and other
characters that a YAML loader rejects.
"""

from __future__ import annotations

import pathlib as _pathlib
import re as _re

import superpowers.skills.types as types

FRONTMATTER_MARKER = "---"

_KEY_VALUE_RE = _re.compile(r"^([A-Za-z0-9_-]+):\s*(.*?)\s*$")

_SURFACED_KEYS = frozenset({"name", "description"})


def split_frontmatter(content: str) -> tuple[list[str] | None, str]:
    """
    Split a document into its metadata block lines and body.

    Args:
        content: Raw document text.

    Returns:
        Tuple of (block lines without terminators, body). The block is None
        when the document has no metadata block, in which case the body is
        the input unchanged. An opening marker with no closing marker counts
        as no block.
    """
    lines = content.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FRONTMATTER_MARKER:
        return None, content

    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONTMATTER_MARKER:
            block = [line.rstrip("\r\n") for line in lines[1:index]]
            return block, "".join(lines[index + 1 :])

    # Unterminated block
    return None, content


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_metadata(content: str) -> types.SkillMetadata:
    """
    Parse name and description from a document's metadata block.

    Unknown keys are ignored. Missing keys, empty values, and documents
    without a block all yield None fields.
    """
    block, _ = split_frontmatter(content)
    if block is None:
        return types.SkillMetadata()

    fields: dict[str, str] = {}
    for line in block:
        match = _KEY_VALUE_RE.match(line)
        if not match:
            continue
        key, value = match.group(1), _unquote(match.group(2))
        if key in _SURFACED_KEYS and value:
            fields[key] = value

    return types.SkillMetadata(**fields)


def extract_metadata(file_path: _pathlib.Path) -> types.SkillMetadata:
    """
    Read a skill document and extract its metadata.

    Raises:
        OSError: If the file cannot be read.
    """
    content = file_path.read_text(encoding="utf-8")
    return parse_metadata(content)


def strip_metadata(content: str) -> str:
    """
    Remove the leading metadata block from a document.

    Everything after the closing marker line is preserved verbatim,
    including leading blank lines. Documents without a (complete) block are
    returned unchanged.

    Only the first block is removed. A body that itself starts with a
    ``---`` line pair (e.g. two thematic breaks) keeps it verbatim, so a
    second call would strip that pair too; stripping is idempotent only for
    bodies that do not open with ``---``.
    """
    _, body = split_frontmatter(content)
    return body
