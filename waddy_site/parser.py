"""Parse dialogue transcripts into sections of classified blocks.

Dialect:
  ## Section title
  **Speaker**: first paragraph
  continuation lines belong to the open speech block
  ![alt](src) on its own line is an image
  | a | b | rows form a table
  > lines are quotes
  anything else is free text
"""

import re
from dataclasses import dataclass, field

from waddy_site.models import Block, Section

_HEADING_RE = re.compile(r"^##\s+(\S.*)$")
_SPEAKER_RE = re.compile(r"^\*\*(.+?)\*\*:\s*(.*)$")
_IMAGE_LINE_RE = re.compile(r"^!\[.*\]\(.*\)$")

# Kinds whose consecutive lines merge into the open block of the same kind
_MERGING = ("table", "quote")


@dataclass
class _ParseState:
    sections: list[Section] = field(default_factory=list)
    block: Block | None = None

    @property
    def section(self) -> Section | None:
        return self.sections[-1] if self.sections else None

    def flush(self) -> None:
        if self.block is not None and self.section is not None:
            self.section.blocks.append(self.block)
        self.block = None

    def open(self, block: Block) -> None:
        self.flush()
        self.block = block


def classify_line(line: str) -> tuple[str, str]:
    """Classify one raw line. Returns (kind, payload).

    Kinds in precedence order: heading, speaker, blank, image, table,
    quote, line (anything else; continuation or free text depending on
    what is open).
    """
    match = _HEADING_RE.match(line)
    if match:
        return "heading", match.group(1).strip()
    if _SPEAKER_RE.match(line):
        return "speaker", line
    trimmed = line.strip()
    if not trimmed:
        return "blank", ""
    if _IMAGE_LINE_RE.match(trimmed):
        return "image", trimmed
    if trimmed.startswith("|"):
        return "table", trimmed
    if trimmed.startswith(">"):
        return "quote", re.sub(r"^>\s*", "", trimmed)
    return "line", trimmed


def _step(state: _ParseState, line: str) -> _ParseState:
    kind, payload = classify_line(line)

    if kind == "heading":
        state.flush()
        state.sections.append(Section(title=payload))
        return state

    if kind == "speaker":
        match = _SPEAKER_RE.match(line)
        speaker = match.group(1).strip()
        first = match.group(2).strip()
        if not speaker:
            state.open(Block(type="text", lines=[line.strip()]))
            return state
        state.open(Block(type="speech", speaker=speaker, lines=[first] if first else []))
        return state

    if kind == "blank":
        state.flush()
        return state

    # Body content outside any section has nowhere to go
    if state.section is None:
        return state

    if kind == "line":
        if state.block is not None and state.block.type in ("speech", "text"):
            state.block.lines.append(payload)
        else:
            state.open(Block(type="text", lines=[payload]))
        return state

    if kind in _MERGING and state.block is not None and state.block.type == kind:
        state.block.lines.append(payload)
        return state

    state.open(Block(type=kind, lines=[payload]))
    if kind == "image":
        state.flush()
    return state


def parse_dialogue(body: str) -> list[Section]:
    """Split a transcript body into sections of blocks, in source order."""
    state = _ParseState()
    for line in re.split(r"\r?\n", body):
        state = _step(state, line)
    state.flush()
    return state.sections


def _plain(line: str) -> str:
    """Indent a stored plain line that would otherwise read as a marker."""
    if _HEADING_RE.match(line) or _SPEAKER_RE.match(line):
        return " " + line
    return line


def format_dialogue(sections: list[Section]) -> str:
    """Write sections back out in the transcript dialect.

    Blocks are separated by blank lines, so parsing the result yields the
    same sections again.
    """
    chunks = []
    for section in sections:
        chunks.append(f"## {section.title}")
        for block in section.blocks:
            if block.type == "speech":
                head = f"**{block.speaker}**:"
                if block.lines:
                    head += " " + block.lines[0]
                chunks.append("\n".join([head] + [_plain(line) for line in block.lines[1:]]))
            elif block.type == "quote":
                chunks.append("\n".join(f"> {line}" for line in block.lines))
            elif block.type == "text":
                chunks.append("\n".join(_plain(line) for line in block.lines))
            else:
                chunks.append("\n".join(block.lines))
    return "\n\n".join(chunks) + "\n" if chunks else ""
