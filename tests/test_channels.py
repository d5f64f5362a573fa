"""Tests for channel assignment and voice settings."""

import json
import logging

from waddy_site.channels import load_voice_settings, speaker_class, speaker_to_channel
from waddy_site.constants import CHANNEL_VOICES, CHILD_CHANNEL, DEFAULT_CHANNEL


def test_child_prefix_goes_to_alternate_channel():
    assert speaker_to_channel("ひな") == CHILD_CHANNEL
    assert speaker_to_channel("ひなた") == CHILD_CHANNEL
    assert speaker_to_channel(" ひ な ") == CHILD_CHANNEL


def test_other_speakers_use_default_channel():
    assert speaker_to_channel("ワディー") == DEFAULT_CHANNEL
    assert speaker_to_channel("ゲスト") == DEFAULT_CHANNEL
    assert speaker_to_channel("おひな") == DEFAULT_CHANNEL


def test_speaker_class():
    assert speaker_class("ワディー") == "waddy"
    assert speaker_class("ひな") == "hina"
    assert speaker_class("ゲスト") == "other"


def test_voice_settings_defaults(tmp_path):
    """No voice.json gives the built-in settings."""
    assert load_voice_settings(str(tmp_path)) == CHANNEL_VOICES


def test_voice_settings_override(tmp_path):
    (tmp_path / "voice.json").write_text(json.dumps({"right": {"speed": 120, "color": "x"}}))
    settings = load_voice_settings(str(tmp_path))
    assert settings["right"]["speed"] == 120
    assert "color" not in settings["right"]
    assert settings["right"]["narrator"] == CHANNEL_VOICES["right"]["narrator"]
    assert settings["left"] == CHANNEL_VOICES["left"]


def test_voice_settings_do_not_mutate_defaults(tmp_path):
    (tmp_path / "voice.json").write_text(json.dumps({"left": {"pitch": 5}}))
    load_voice_settings(str(tmp_path))
    assert CHANNEL_VOICES["left"]["pitch"] == -2


def test_voice_settings_malformed(tmp_path, caplog):
    (tmp_path / "voice.json").write_text("{not json")
    with caplog.at_level(logging.WARNING):
        settings = load_voice_settings(str(tmp_path))
    assert settings == CHANNEL_VOICES
    assert "Malformed" in caplog.text


def test_voice_settings_unknown_channel(tmp_path, caplog):
    (tmp_path / "voice.json").write_text(json.dumps({"center": {"speed": 1}}))
    with caplog.at_level(logging.WARNING):
        settings = load_voice_settings(str(tmp_path))
    assert "center" not in settings
    assert "unknown channel" in caplog.text


def test_voice_settings_not_utf8(tmp_path, caplog):
    (tmp_path / "voice.json").write_bytes(b'{"left": {"narrator": "\xff\xfe"}}')
    with caplog.at_level(logging.WARNING):
        settings = load_voice_settings(str(tmp_path))
    assert settings == CHANNEL_VOICES
    assert "Malformed" in caplog.text
