"""Build the diary pages from dated Markdown entries."""

import logging
import os
import re
from datetime import date

import markdown

from waddy_site.constants import (
    DIARY_DIR,
    DIARY_PAGE,
    HINA_DIARY_DIR,
    HINA_DIARY_PAGE,
    MARKDOWN_EXTENSIONS,
    WEEKDAYS,
)
from waddy_site.models import DiaryEntry
from waddy_site.render import render_inline
from waddy_site.sources import list_markdown, read_source, write_output
from waddy_site.templates import diary_page, hina_diary_page

logger = logging.getLogger(__name__)

_FILENAME_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})_(.+)$")
_TITLE_LINE_RE = re.compile(r"^#[^\r\n]+[\r\n]+")


def parse_filename(file_name: str) -> tuple[str, str] | None:
    """("YYYY-MM-DD", title) from "YYYY-MM-DD_title.md", else None."""
    base = os.path.splitext(os.path.basename(file_name))[0]
    match = _FILENAME_RE.match(base)
    if not match:
        return None
    try:
        date.fromisoformat(match.group(1))
    except ValueError:
        return None
    return match.group(1), match.group(2)


def entry_body_html(raw: str) -> str:
    """Markdown body to HTML, dropping the leading "# title" line.

    The title comes from the file name instead.
    """
    body = _TITLE_LINE_RE.sub("", raw, count=1).strip()
    return markdown.markdown(body, extensions=MARKDOWN_EXTENSIONS)


def read_entries(source_dir: str) -> list[DiaryEntry]:
    """Entries newest first; badly named files are skipped with a warning."""
    entries = []
    for name in list_markdown(source_dir):
        parsed = parse_filename(name)
        if parsed is None:
            logger.warning("skip: %s (invalid name format)", name)
            continue
        entry_date, title = parsed
        html = entry_body_html(read_source(os.path.join(source_dir, name)))
        entries.append(DiaryEntry(date=entry_date, title=title, html=html))
    entries.sort(key=lambda e: e.date, reverse=True)
    return entries


def weekday_label(entry_date: str) -> str:
    return WEEKDAYS[date.fromisoformat(entry_date).weekday()]


def render_entry(entry: DiaryEntry, with_weekday: bool = False) -> str:
    date_text = entry.date
    if with_weekday:
        date_text = f"{entry.date}（{weekday_label(entry.date)}）"
    return f"""          <li>
            <p class="entry-date">{date_text}</p>
            <h3 class="entry-title">{render_inline(entry.title)}</h3>
            {entry.html}
          </li>"""


def _build(root: str, source: str, page: str, shell, with_weekday: bool) -> str | None:
    source_dir = os.path.join(root, source)
    entries = read_entries(source_dir)
    if not entries:
        logger.warning("No diary entries found in %s", source_dir)
        return None

    items = "\n".join(render_entry(e, with_weekday=with_weekday) for e in entries)
    out_path = write_output(os.path.join(root, page), shell(items))
    print(f"✓ {page} generated ({len(entries)} entries)")
    return out_path


def build_diary_page(root: str) -> str | None:
    return _build(root, DIARY_DIR, DIARY_PAGE, diary_page, with_weekday=False)


def build_hina_diary_page(root: str) -> str | None:
    """diary-hina.html; dates carry the weekday, e.g. 2024-01-01（月）."""
    return _build(root, HINA_DIARY_DIR, HINA_DIARY_PAGE, hina_diary_page, with_weekday=True)
