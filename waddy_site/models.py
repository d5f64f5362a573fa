"""Data models for parsed sources and generated scripts."""

from dataclasses import dataclass, field


@dataclass
class Block:
    type: str                    # "speech", "image", "table", "quote" or "text"
    lines: list[str] = field(default_factory=list)   # paragraphs, rows or raw lines
    speaker: str = ""            # speech blocks only

    @property
    def text(self) -> str:
        return " ".join(self.lines)


@dataclass
class Section:
    title: str
    blocks: list[Block] = field(default_factory=list)


@dataclass
class Document:
    name: str                    # source file name
    meta: dict[str, str]
    sections: list[Section] = field(default_factory=list)

    @property
    def date(self) -> str:
        return self.meta.get("date", "")


@dataclass
class SceneLine:
    say: str
    speaker: str                 # channel, "left" or "right"
    pause_sec: float | None = None


@dataclass
class Scene:
    id: str
    lines: list[SceneLine] = field(default_factory=list)


@dataclass
class DiaryEntry:
    date: str                    # YYYY-MM-DD
    title: str
    html: str


@dataclass
class ReviewEntry:
    title: str
    meta: dict[str, str]
    html: str
