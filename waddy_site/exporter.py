"""Export dialogue transcripts as per-episode video-tool YAML scripts."""

import logging
import os
import re
import unicodedata

import yaml

from waddy_site.channels import load_voice_settings, speaker_to_channel
from waddy_site.constants import (
    AVATAR_IDLE_MOTION,
    AVATAR_VRM,
    CHILD_CHANNEL,
    DEFAULT_CHANNEL,
    DIALOGUE_DIR,
    FALLBACK_SLUG,
    IMAGE_LABEL,
    PAUSE_HEADING_SEC,
    PAUSE_LINE_SEC,
    PAUSE_TITLE_SEC,
    QUOTE_LABEL,
    RECORDED_ON_LABEL,
    SCRIPT_VERSION,
    UNTITLED,
    VIDEO_BACKGROUND,
    VIDEO_FPS,
    VIDEO_HEIGHT,
    VIDEO_SCRIPT_DIR,
    VIDEO_WIDTH,
    VOICE_TIMEOUT_SEC,
)
from waddy_site.models import Block, Document, Scene, SceneLine, Section
from waddy_site.render import strip_markdown, table_to_speech
from waddy_site.sources import clean_generated, read_documents, write_output

logger = logging.getLogger(__name__)

_IMAGE_RE = re.compile(r"^!\[([^\]]*)\]\(([^)]+)\)$")


def image_to_speech(raw: str) -> str:
    match = _IMAGE_RE.match(raw)
    if not match:
        return IMAGE_LABEL
    alt, src = match.group(1).strip(), match.group(2).strip()
    return f"{IMAGE_LABEL}: {alt or src}"


def block_to_line(block: Block) -> SceneLine | None:
    """Narration line for one block, or None when it has nothing to say.

    Speech goes to the speaker's channel; everything else is read on the
    default channel with a short label.
    """
    if block.type == "speech":
        say = strip_markdown(" ".join(block.lines))
        channel = speaker_to_channel(block.speaker)
    elif block.type == "quote":
        text = strip_markdown(block.text)
        say = f"{QUOTE_LABEL}: {text}" if text else ""
        channel = DEFAULT_CHANNEL
    elif block.type == "image":
        say = strip_markdown(image_to_speech(block.lines[0]))
        channel = DEFAULT_CHANNEL
    elif block.type == "table":
        say = strip_markdown(table_to_speech(block.lines))
        channel = DEFAULT_CHANNEL
    else:
        say = strip_markdown(block.text)
        channel = DEFAULT_CHANNEL

    if not say:
        return None
    return SceneLine(say=say, speaker=channel, pause_sec=PAUSE_LINE_SEC)


def section_to_scene(section: Section, index: int) -> Scene:
    """Scene "scene-NN" (1-based) opening with the section title."""
    lines = [
        SceneLine(
            say=f"[face:neutral]{strip_markdown(section.title)}",
            speaker=DEFAULT_CHANNEL,
            pause_sec=PAUSE_HEADING_SEC,
        )
    ]
    for block in section.blocks:
        line = block_to_line(block)
        if line is not None:
            lines.append(line)
    return Scene(id=f"scene-{index:02d}", lines=lines)


def intro_scene(meta: dict[str, str]) -> Scene:
    lines = [
        SceneLine(
            say=f"[face:joy]{strip_markdown(meta.get('title') or UNTITLED)}",
            speaker=DEFAULT_CHANNEL,
            pause_sec=PAUSE_TITLE_SEC,
        )
    ]
    if meta.get("subtitle"):
        lines.append(SceneLine(
            say=f"[face:neutral]{strip_markdown(meta['subtitle'])}",
            speaker=CHILD_CHANNEL,
            pause_sec=PAUSE_HEADING_SEC,
        ))
    if meta.get("date"):
        lines.append(SceneLine(
            say=f"[face:neutral]{RECORDED_ON_LABEL} {meta['date']}",
            speaker=DEFAULT_CHANNEL,
            pause_sec=PAUSE_HEADING_SEC,
        ))
    return Scene(id="intro", lines=lines)


def build_scenes(document: Document) -> list[Scene]:
    scenes = [intro_scene(document.meta)]
    for index, section in enumerate(document.sections, start=1):
        scenes.append(section_to_scene(section, index))
    return scenes


def script_data(scenes: list[Scene], voices: dict) -> dict:
    """The full script mapping in the video tool's schema."""
    avatar = {"vrm": AVATAR_VRM, "idleMotion": AVATAR_IDLE_MOTION}
    scene_list = []
    for scene in scenes:
        lines = []
        for line in scene.lines:
            entry = {"say": line.say, "speaker": line.speaker}
            if line.pause_sec is not None:
                entry["pauseSec"] = line.pause_sec
            lines.append(entry)
        scene_list.append({"id": scene.id, "lines": lines})

    return {
        "version": SCRIPT_VERSION,
        "video": {
            "width": VIDEO_WIDTH,
            "height": VIDEO_HEIGHT,
            "fps": VIDEO_FPS,
            "backgroundColor": VIDEO_BACKGROUND,
        },
        "avatar": dict(avatar),
        "avatarRight": dict(avatar),
        "voice": {
            "timeoutSec": VOICE_TIMEOUT_SEC,
            "bySpeaker": {
                DEFAULT_CHANNEL: dict(voices[DEFAULT_CHANNEL]),
                CHILD_CHANNEL: dict(voices[CHILD_CHANNEL]),
            },
        },
        "scenes": scene_list,
    }


def render_script(scenes: list[Scene], voices: dict) -> str:
    return yaml.safe_dump(
        script_data(scenes, voices),
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
        width=4096,
    )


def stable_slug(file_name: str) -> str:
    """ASCII slug from a source file name; "episode" when nothing is left."""
    base = os.path.splitext(os.path.basename(file_name))[0]
    ascii_name = unicodedata.normalize("NFKD", base)
    slug = re.sub(r"[^\w-]+", "-", ascii_name, flags=re.ASCII)
    slug = re.sub(r"-+", "-", slug).strip("-").lower()
    return slug or FALLBACK_SLUG


def sanitize_file_name(name: str) -> str:
    """Make a title safe to use as a file name on common filesystems."""
    name = re.sub(r'[\\/:*?"<>|]', "-", name)
    name = re.sub(r"\s+", " ", name).strip()
    return re.sub(r"[. ]+$", "", name)


def episode_file_name(document: Document, number: int) -> str:
    title_part = sanitize_file_name(document.meta.get("title") or stable_slug(document.name))
    return f"episode-{number:02d}-{title_part or FALLBACK_SLUG}.yaml"


def sort_episodes(documents: list[Document]) -> list[Document]:
    """Oldest first, so episode numbers follow recording order."""
    return sorted(documents, key=lambda doc: (doc.date, doc.name))


def build_video_scripts(root: str) -> list[str]:
    """Regenerate video-scripts/*.yaml from dialogue/*.md under root.

    Existing YAML files are removed first. Returns the written paths.
    """
    source_dir = os.path.join(root, DIALOGUE_DIR)
    out_dir = os.path.join(root, VIDEO_SCRIPT_DIR)
    clean_generated(out_dir, ".yaml")

    documents = read_documents(source_dir)
    if not documents:
        logger.warning("No dialogue files found in %s", source_dir)
        return []

    voices = load_voice_settings(source_dir)
    written = []
    for number, document in enumerate(sort_episodes(documents), start=1):
        path = os.path.join(out_dir, episode_file_name(document, number))
        write_output(path, render_script(build_scenes(document), voices))
        written.append(path)

    print(f"✓ {len(written)} files generated in {out_dir}")
    for path in written:
        print(f"  - {os.path.basename(path)}")
    return written
