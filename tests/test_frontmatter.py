"""Tests for front-matter extraction."""

from waddy_site.frontmatter import parse_frontmatter, strip_bom


def test_extracts_declared_keys():
    raw = "---\ntitle:  Hello  \ndate: 2024-01-01\n---\nBody text\n"
    meta, body = parse_frontmatter(raw)
    assert meta == {"title": "Hello", "date": "2024-01-01"}
    assert body == "Body text\n"


def test_value_keeps_inner_colons():
    meta, _ = parse_frontmatter("---\ntime: 12:30\n---\n")
    assert meta == {"time": "12:30"}


def test_crlf_line_endings():
    meta, body = parse_frontmatter("---\r\ntitle: A\r\n---\r\nbody\r\n")
    assert meta == {"title": "A"}
    assert body == "body\r\n"


def test_no_delimiter_returns_full_text():
    raw = "## Heading\n\ntext\n"
    meta, body = parse_frontmatter(raw)
    assert meta == {}
    assert body == raw


def test_bom_removed_without_frontmatter():
    meta, body = parse_frontmatter("\ufeffplain body")
    assert meta == {}
    assert body == "plain body"


def test_bom_before_frontmatter():
    meta, body = parse_frontmatter("\ufeff---\ntitle: A\n---\nbody")
    assert meta == {"title": "A"}
    assert body == "body"


def test_unclosed_block_is_body():
    raw = "---\ntitle: A\nno closing line\n"
    meta, body = parse_frontmatter(raw)
    assert meta == {}
    assert body == raw


def test_non_key_lines_ignored():
    meta, _ = parse_frontmatter("---\njust words\nkey-with-dash: x\nempty:\nok: yes\n---\n")
    assert meta == {"ok": "yes"}


def test_strip_bom_only_once():
    assert strip_bom("\ufeff\ufeffx") == "\ufeffx"


def test_unicode_line_separators_stay_in_value():
    meta, body = parse_frontmatter("---\ntitle: a\x85b\n---\nbody")
    assert meta == {"title": "a\x85b"}
    assert body == "body"


def test_keys_are_ascii_word_characters():
    meta, _ = parse_frontmatter("---\nタイトル: x\nok: y\n---\n")
    assert meta == {"ok": "y"}
