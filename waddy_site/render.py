"""Inline HTML rendering, table rendering and plain-text stripping."""

import re

from waddy_site.constants import (
    IMAGE_INLINE_LABEL,
    TABLE_FIRST_COLUMN,
    TABLE_LABEL,
)

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")
_CODE_RE = re.compile(r"`([^`]+)`")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
_INLINE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)|\*\*(.+?)\*\*")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_SEPARATOR_CELL_RE = re.compile(r"^[-:]+$")


def escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def render_inline(text: str) -> str:
    """Escape text for HTML, then turn **bold** and ![alt](src) into markup.

    Every fragment that ends up in a generated page goes through here.
    """
    return _INLINE_RE.sub(_inline_markup, escape_html(text))


def _image_tag(match: re.Match) -> str:
    return f'<img src="{match.group(2)}" alt="{match.group(1)}" />'


def _inline_markup(match: re.Match) -> str:
    # Images and bold are matched in one pass; alt text stays literal
    if match.group(3) is None:
        return _image_tag(match)
    return f"<strong>{_IMAGE_RE.sub(_image_tag, match.group(3))}</strong>"


def split_table_row(row: str) -> list[str]:
    """Split a pipe-delimited row into trimmed cells.

    "|a|b|" -> ["a", "b"]; only the empty cells produced by boundary pipes
    are dropped.
    """
    cells = [cell.strip() for cell in row.strip().split("|")]
    if cells and cells[0] == "":
        cells = cells[1:]
    if cells and cells[-1] == "":
        cells = cells[:-1]
    return cells


def parse_table_rows(rows: list[str]) -> list[list[str]]:
    """Split rows into cells, dropping empty rows and header separators."""
    parsed = []
    for row in rows:
        cells = split_table_row(row)
        if not cells:
            continue
        if all(_SEPARATOR_CELL_RE.match(cell) for cell in cells):
            continue
        parsed.append(cells)
    return parsed


def render_table(rows: list[str]) -> str:
    """Render raw Markdown table rows as an HTML table.

    The first remaining row is the header. Returns "" when nothing is left
    after dropping separators.
    """
    parsed = parse_table_rows(rows)
    if not parsed:
        return ""

    header, body = parsed[0], parsed[1:]
    head_html = "".join(f"<th>{render_inline(cell)}</th>" for cell in header)
    parts = ['<table class="talk-table">', f"<thead><tr>{head_html}</tr></thead>"]
    if body:
        parts.append("<tbody>")
        for cells in body:
            row_html = "".join(f"<td>{render_inline(cell)}</td>" for cell in cells)
            parts.append(f"<tr>{row_html}</tr>")
        parts.append("</tbody>")
    parts.append("</table>")
    return "\n".join(parts)


def table_to_speech(rows: list[str]) -> str:
    """Summarize a table as one narration sentence.

    Body rows become "header: cell" pairs joined per row; a lone header row
    is read out as-is.
    """
    parsed = parse_table_rows(rows)
    if not parsed:
        return ""
    if len(parsed) == 1:
        return f"{TABLE_LABEL}: {' / '.join(parsed[0])}"

    header = [
        cell or (TABLE_FIRST_COLUMN if idx == 0 else f"列{idx + 1}")
        for idx, cell in enumerate(parsed[0])
    ]
    summarized = "；".join(
        "、".join(
            f"{name}: {row[idx] if idx < len(row) else ''}".strip()
            for idx, name in enumerate(header)
        )
        for row in parsed[1:]
    )
    return f"{TABLE_LABEL}: {summarized}"


def strip_markdown(text: str) -> str:
    """Reduce Markdown to plain text for narration.

    Images become a short label, links keep their text, emphasis and code
    markers are dropped and whitespace runs collapse to one space.
    """
    if not text:
        return ""

    def _image(match):
        alt, src = match.group(1), match.group(2)
        return f"{IMAGE_INLINE_LABEL}({alt or src})"

    text = _IMAGE_RE.sub(_image, text)
    text = _LINK_RE.sub(r"\1", text)
    text = _BOLD_RE.sub(r"\1", text)
    text = _ITALIC_RE.sub(r"\1", text)
    text = _CODE_RE.sub(r"\1", text)
    return re.sub(r"\s+", " ", text).strip()
