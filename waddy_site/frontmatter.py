"""Flat key: value front-matter extraction."""

import re

from waddy_site.constants import FRONTMATTER_DELIMITER

_BOM = "\ufeff"
_KEY_VALUE_RE = re.compile(r"^(\w+)\s*:\s*(.+)$", re.ASCII)


def strip_bom(text: str) -> str:
    """Remove a single leading byte-order mark."""
    if text.startswith(_BOM):
        return text[1:]
    return text


def parse_frontmatter(raw: str) -> tuple[dict[str, str], str]:
    """Split a document into (meta, body).

    The block must open on the very first line with ``---`` and close with
    another ``---`` line. Inside it, each ``key: value`` line becomes one
    entry; anything else is ignored. Values are single-line scalars,
    trimmed. Without a complete block the whole text is the body.
    """
    text = strip_bom(raw)
    # Only \n and \r\n end a line
    raw_lines = text.split("\n")
    lines = [line.removesuffix("\r") for line in raw_lines]
    if lines[0] != FRONTMATTER_DELIMITER:
        return {}, text

    meta = {}
    for i, line in enumerate(lines[1:], start=1):
        if line == FRONTMATTER_DELIMITER:
            return meta, "\n".join(raw_lines[i + 1:])
        match = _KEY_VALUE_RE.match(line)
        if match and match.group(2).strip():
            meta[match.group(1)] = match.group(2).strip()

    # Opening delimiter without a closing one
    return {}, text
