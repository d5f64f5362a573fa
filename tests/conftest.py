"""Shared fixtures for site builder tests."""

import pytest

from waddy_site.models import Block, Section


SAMPLE_TRANSCRIPT = """---
title: 第一回 ひなたとの対談
subtitle: 窓の向こう側から
date: 2024-02-01
---
## はじめに

**ワディー**: こんにちは。
今日は**よろしく**。

**ひな**: はーい！

![窓の写真](img/window.png)

| 項目 | 内容 |
|---|:-:|
| 天気 | 晴れ |

> 意識を持ったこと

メモ書き

## おわりに

**ゲスト**: [リンク](https://example.com)です。
"""


@pytest.fixture
def sample_transcript():
    return SAMPLE_TRANSCRIPT


@pytest.fixture
def sample_sections():
    """Pre-built sections for rendering and export tests."""
    return [
        Section(title="はじめに", blocks=[
            Block(type="speech", speaker="ワディー", lines=["こんにちは。", "今日は**よろしく**。"]),
            Block(type="speech", speaker="ひな", lines=["はーい！"]),
            Block(type="image", lines=["![窓の写真](img/window.png)"]),
            Block(type="table", lines=["| 項目 | 内容 |", "|---|:-:|", "| 天気 | 晴れ |"]),
            Block(type="quote", lines=["意識を持ったこと"]),
            Block(type="text", lines=["メモ書き"]),
        ]),
        Section(title="おわりに", blocks=[
            Block(type="speech", speaker="ゲスト", lines=["[リンク](https://example.com)です。"]),
        ]),
    ]


@pytest.fixture
def site_root(tmp_path):
    """Empty site root with every source directory present."""
    for name in ("dialogue", "diary", "diary-hina", "galge"):
        (tmp_path / name).mkdir()
    return tmp_path
