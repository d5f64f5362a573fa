"""Source directory scanning and whole-file output writes."""

import logging
import os

from waddy_site.frontmatter import parse_frontmatter, strip_bom
from waddy_site.models import Document
from waddy_site.parser import parse_dialogue

logger = logging.getLogger(__name__)


def list_markdown(source_dir: str) -> list[str]:
    """Sorted *.md file names in source_dir.

    A missing directory raises FileNotFoundError; callers let it abort
    the build.
    """
    return sorted(name for name in os.listdir(source_dir) if name.endswith(".md"))


def read_source(path: str) -> str:
    """Read a UTF-8 source file without its byte-order mark."""
    with open(path, encoding="utf-8") as f:
        return strip_bom(f.read())


def write_output(path: str, text: str) -> str:
    """Write a generated file in one piece. Returns the path."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


def clean_generated(output_dir: str, suffix: str) -> list[str]:
    """Delete every file ending in suffix from output_dir.

    Creates the directory if needed. Returns the deleted file names.
    """
    os.makedirs(output_dir, exist_ok=True)
    deleted = []
    for name in sorted(os.listdir(output_dir)):
        path = os.path.join(output_dir, name)
        if name.endswith(suffix) and os.path.isfile(path):
            os.remove(path)
            deleted.append(name)
    if deleted:
        logger.debug("Removed %d stale file(s) from %s", len(deleted), output_dir)
    return deleted


def read_documents(source_dir: str) -> list[Document]:
    """Parse every transcript in source_dir, in file-name order.

    A file without front-matter is kept with empty metadata.
    """
    documents = []
    for name in list_markdown(source_dir):
        meta, body = parse_frontmatter(read_source(os.path.join(source_dir, name)))
        if not meta:
            logger.warning("No front-matter in %s, using empty metadata", name)
        documents.append(Document(name=name, meta=meta, sections=parse_dialogue(body)))
    return documents
