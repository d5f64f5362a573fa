"""Assemble dialogue transcripts into dialogue.html."""

import logging
import os

from waddy_site.channels import speaker_class
from waddy_site.constants import DIALOGUE_DIR, DIALOGUE_PAGE, RECORDED_LABEL
from waddy_site.models import Block, Document, Section
from waddy_site.render import render_inline, render_table
from waddy_site.sources import read_documents, write_output
from waddy_site.templates import dialogue_page

logger = logging.getLogger(__name__)


def sort_newest_first(documents: list[Document]) -> list[Document]:
    """Order by front-matter date, newest first.

    Plain string comparison, so dates must be zero-padded ISO dates.
    Documents with equal dates keep their input order.
    """
    return sorted(documents, key=lambda doc: doc.date, reverse=True)


def render_block(block: Block) -> str:
    if block.type == "speech":
        body = "<br>\n".join(render_inline(p) for p in block.lines)
        cls = speaker_class(block.speaker)
        name = render_inline(block.speaker)
        return f'<div class="talk-{cls}"><span class="talk-name">{name}</span>：{body}</div>'
    if block.type == "image":
        return f'<div class="talk-image">{render_inline(block.lines[0])}</div>'
    if block.type == "table":
        return render_table(block.lines)
    if block.type == "quote":
        body = "<br>\n".join(render_inline(line) for line in block.lines)
        return f'<blockquote class="talk-quote">{body}</blockquote>'
    body = "<br>\n".join(render_inline(line) for line in block.lines)
    return f'<p class="talk-text">{body}</p>'


def render_section(section: Section) -> str:
    parts = [f'<div class="section-divider">― {render_inline(section.title)} ―</div>']
    for block in section.blocks:
        html = render_block(block)
        if html:
            parts.append(html)
    return "\n".join(parts)


def render_document(document: Document) -> str:
    """Header, sections and recording-date footer for one transcript."""
    title = document.meta.get("title", "")
    subtitle = document.meta.get("subtitle", "")
    parts = ['<article class="dialogue">']
    if title:
        parts.append(f'<h2 class="dialogue-title">{render_inline(title)}</h2>')
    if subtitle:
        parts.append(f'<p class="dialogue-subtitle">{render_inline(subtitle)}</p>')
    for section in document.sections:
        parts.append(render_section(section))
    if document.date:
        parts.append(
            f'<div class="dialogue-date">{render_inline(document.date)} {RECORDED_LABEL}</div>'
        )
    parts.append("</article>")
    return "\n".join(parts)


def render_transcripts(documents: list[Document]) -> str:
    """Full dialogue.html text for the given documents."""
    content = "\n\n".join(render_document(doc) for doc in sort_newest_first(documents))
    return dialogue_page(content)


def build_dialogue_page(root: str) -> str | None:
    """Build dialogue.html from dialogue/*.md under root.

    Returns the written path, or None when there is nothing to build.
    """
    documents = read_documents(os.path.join(root, DIALOGUE_DIR))
    if not documents:
        logger.warning("No dialogue files found in %s", os.path.join(root, DIALOGUE_DIR))
        return None

    out_path = write_output(os.path.join(root, DIALOGUE_PAGE), render_transcripts(documents))
    section_count = sum(len(doc.sections) for doc in documents)
    print(f"✓ {DIALOGUE_PAGE} generated ({section_count} sections)")
    return out_path
