"""Tests for the review page builder."""

import logging

from waddy_site.galge import (
    build_galge_page,
    read_reviews,
    render_details_card,
    render_review,
    title_sort_key,
)
from waddy_site.models import ReviewEntry

REVIEW = """---
brand: Key
release: 2004-04-28
genre: 泣きゲー
play_period: 2010年夏
---
## 感想本文

とても**良かった**。
"""


def test_details_card_in_fixed_order():
    html = render_details_card({"genre": "G", "brand": "B", "unknown": "U"})
    assert html.index("ブランド: B") < html.index("ジャンル: G")
    assert "U" not in html


def test_details_card_empty():
    assert render_details_card({}) == ""


def test_render_review_escapes_title():
    html = render_review(ReviewEntry(title="A & B", meta={}, html="<p>x</p>"))
    assert "<h2>A &amp; B</h2>" in html
    assert "諸元" not in html


def test_read_reviews_sorted_by_title(site_root):
    (site_root / "galge" / "b.md").write_text(REVIEW, encoding="utf-8")
    (site_root / "galge" / "a.md").write_text("no meta", encoding="utf-8")
    reviews = read_reviews(str(site_root / "galge"))
    assert [r.title for r in reviews] == ["a", "b"]
    assert reviews[0].meta == {}
    assert reviews[1].meta["brand"] == "Key"
    assert "<strong>良かった</strong>" in reviews[1].html


def test_title_sort_folds_width_case_and_kana():
    titles = ["カ", "あ", "ｂ", "A"]
    assert sorted(titles, key=title_sort_key) == ["A", "ｂ", "あ", "カ"]


def test_read_reviews_kana_titles_interleave(site_root):
    for title in ["きみ", "アイ", "かの"]:
        (site_root / "galge" / f"{title}.md").write_text("x", encoding="utf-8")
    assert [r.title for r in read_reviews(str(site_root / "galge"))] == ["アイ", "かの", "きみ"]


def test_build_galge_page(site_root):
    (site_root / "galge" / "CLANNAD.md").write_text(REVIEW, encoding="utf-8")
    build_galge_page(str(site_root))
    html = (site_root / "galge-guide.html").read_text(encoding="utf-8")
    assert "<h2>CLANNAD</h2>" in html
    assert "<li>発売日: 2004-04-28</li>" in html
    assert "<li>プレイ時期: 2010年夏</li>" in html


def test_build_galge_empty_warns(site_root, caplog):
    with caplog.at_level(logging.WARNING):
        assert build_galge_page(str(site_root)) is None
    assert not (site_root / "galge-guide.html").exists()
