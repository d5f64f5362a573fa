"""Build the visual-novel review page from galge/*.md."""

import logging
import os
import unicodedata

import markdown

from waddy_site.constants import (
    GALGE_DIR,
    GALGE_META_LABELS,
    GALGE_PAGE,
    MARKDOWN_EXTENSIONS,
)
from waddy_site.frontmatter import parse_frontmatter
from waddy_site.models import ReviewEntry
from waddy_site.render import render_inline
from waddy_site.sources import list_markdown, read_source, write_output
from waddy_site.templates import galge_page

logger = logging.getLogger(__name__)


def title_sort_key(title: str) -> str:
    """Width- and case-folded title with katakana read as hiragana.

    Kanji keep code-point order.
    """
    folded = unicodedata.normalize("NFKC", title).casefold()
    return "".join(chr(ord(c) - 0x60) if "\u30a1" <= c <= "\u30f6" else c for c in folded)


def read_reviews(source_dir: str) -> list[ReviewEntry]:
    """Reviews sorted by title (the file name without .md)."""
    reviews = []
    for name in list_markdown(source_dir):
        meta, body = parse_frontmatter(read_source(os.path.join(source_dir, name)))
        if not meta:
            logger.warning("No front-matter in %s, details omitted", name)
        html = markdown.markdown(body.strip(), extensions=MARKDOWN_EXTENSIONS)
        reviews.append(ReviewEntry(title=os.path.splitext(name)[0], meta=meta, html=html))
    reviews.sort(key=lambda r: (title_sort_key(r.title), r.title))
    return reviews


def render_details_card(meta: dict[str, str]) -> str:
    items = [
        f"<li>{label}: {render_inline(meta[key])}</li>"
        for key, label in GALGE_META_LABELS
        if meta.get(key)
    ]
    if not items:
        return ""
    return f'<article class="guide-card"><h3>諸元</h3><ul>{"".join(items)}</ul></article>'


def render_review(review: ReviewEntry) -> str:
    return f"""      <section class="panel">
        <h2>{render_inline(review.title)}</h2>
        <div class="guide-grid">
          {render_details_card(review.meta)}
          <article class="guide-card">
            <h3>感想</h3>
            {review.html}
          </article>
        </div>
      </section>"""


def build_galge_page(root: str) -> str | None:
    source_dir = os.path.join(root, GALGE_DIR)
    reviews = read_reviews(source_dir)
    if not reviews:
        logger.warning("No review files found in %s", source_dir)
        return None

    cards = "\n\n".join(render_review(r) for r in reviews)
    out_path = write_output(os.path.join(root, GALGE_PAGE), galge_page(cards))
    print(f"✓ {GALGE_PAGE} generated ({len(reviews)} entries)")
    return out_path
