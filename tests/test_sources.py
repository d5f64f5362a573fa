"""Tests for source scanning and output writes."""

import pytest

from waddy_site.sources import (
    clean_generated,
    list_markdown,
    read_documents,
    read_source,
    write_output,
)


def test_list_markdown_sorted(tmp_path):
    for name in ("b.md", "a.md", "c.txt"):
        (tmp_path / name).write_text("x")
    assert list_markdown(str(tmp_path)) == ["a.md", "b.md"]


def test_list_markdown_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_markdown(str(tmp_path / "nope"))


def test_read_source_strips_bom(tmp_path):
    path = tmp_path / "a.md"
    path.write_text("\ufeffhello", encoding="utf-8")
    assert read_source(str(path)) == "hello"


def test_write_output_creates_parents(tmp_path):
    path = write_output(str(tmp_path / "deep" / "out.html"), "<p>ok</p>")
    assert (tmp_path / "deep" / "out.html").read_text(encoding="utf-8") == "<p>ok</p>"
    assert path.endswith("out.html")


def test_clean_generated_only_matching(tmp_path):
    (tmp_path / "a.yaml").write_text("x")
    (tmp_path / "b.txt").write_text("x")
    assert clean_generated(str(tmp_path), ".yaml") == ["a.yaml"]
    assert [p.name for p in tmp_path.iterdir()] == ["b.txt"]


def test_clean_generated_creates_dir(tmp_path):
    assert clean_generated(str(tmp_path / "out"), ".yaml") == []
    assert (tmp_path / "out").is_dir()


def test_read_documents(tmp_path, sample_transcript, caplog):
    (tmp_path / "a.md").write_text(sample_transcript, encoding="utf-8")
    (tmp_path / "b.md").write_text("## S\ntext\n", encoding="utf-8")
    docs = read_documents(str(tmp_path))
    assert [d.name for d in docs] == ["a.md", "b.md"]
    assert docs[0].meta["date"] == "2024-02-01"
    assert len(docs[0].sections) == 2
    assert docs[1].meta == {}
    assert "No front-matter in b.md" in caplog.text
