"""Speaker channel assignment and per-channel voice settings."""

import copy
import json
import logging
import os
import re

from waddy_site.constants import (
    CHANNEL_VOICES,
    CHILD_CHANNEL,
    CHILD_SPEAKER_PREFIX,
    DEFAULT_CHANNEL,
    HINA_SPEAKER,
    VOICE_SETTINGS_FILE,
    WADDY_SPEAKER,
)

logger = logging.getLogger(__name__)

_VOICE_KEYS = ("narrator", "speed", "pitch")


def speaker_to_channel(speaker: str) -> str:
    """Names starting with the child prefix (ignoring spaces) go right."""
    normalized = re.sub(r"\s+", "", speaker)
    if normalized.startswith(CHILD_SPEAKER_PREFIX):
        return CHILD_CHANNEL
    return DEFAULT_CHANNEL


def speaker_class(speaker: str) -> str:
    """CSS modifier for a speaker on the transcript page."""
    if speaker == WADDY_SPEAKER:
        return "waddy"
    if speaker == HINA_SPEAKER:
        return "hina"
    return "other"


def load_voice_settings(source_dir: str) -> dict:
    """Per-channel narrator settings, with voice.json overrides applied.

    voice.json is optional and may override any of narrator/speed/pitch
    for "left" and "right"; unknown keys are ignored. A missing file gives
    the defaults; a malformed one is reported and ignored.
    """
    settings = copy.deepcopy(CHANNEL_VOICES)
    path = os.path.join(source_dir, VOICE_SETTINGS_FILE)
    if not os.path.exists(path):
        return settings
    try:
        with open(path, encoding="utf-8") as f:
            overrides = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Malformed voice settings: %s, using defaults", path)
        return settings
    if not isinstance(overrides, dict):
        logger.warning("Voice settings must be an object: %s, using defaults", path)
        return settings

    for channel, values in overrides.items():
        if channel not in settings or not isinstance(values, dict):
            logger.warning("Ignoring voice settings for unknown channel '%s'", channel)
            continue
        for key in _VOICE_KEYS:
            if key in values:
                settings[channel][key] = values[key]
    return settings
