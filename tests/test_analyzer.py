# File: tests/test_analyzer.py
from __future__ import annotations

import pytest

from conftest import GOOD_TITLE, FakeOracle, FakeProbe, make_page
from seo_scout.analysis import ORACLE_FALLBACK, PageAnalyzer, count_words
from seo_scout.crawler.models import UNAVAILABLE

SEED = "https://example.com/"


async def analyze(html: str, **kwargs):
    analyzer = PageAnalyzer(SEED, **kwargs)
    return await analyzer.analyze(f"{SEED}page", html)


def starts(issues, prefix: str) -> bool:
    return any(i.startswith(prefix) for i in issues)


@pytest.mark.asyncio()
async def test_clean_page_has_no_issues():
    record = await analyze(make_page())
    assert record.issues == ()
    assert record.metrics.title == GOOD_TITLE
    assert record.metrics.h1_text == "Oak furniture"
    assert record.metrics.word_count == 322
    assert record.metrics.load_time_seconds == UNAVAILABLE
    assert record.suggestions.rule_based == ()
    assert record.suggestions.generated == ()


@pytest.mark.asyncio()
async def test_title_of_45_chars_is_within_bounds():
    assert len(GOOD_TITLE) == 45
    record = await analyze(make_page(title=GOOD_TITLE))
    assert not starts(record.issues, "Title")
    assert "Missing title tag" not in record.issues


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    "title,expected",
    [
        (None, "Missing title tag"),
        ("", "Missing title tag"),
        ("x" * 61, "Title too long (61 chars)"),
        ("x" * 29, "Title too short (29 chars)"),
    ],
)
async def test_title_rules(title, expected):
    record = await analyze(make_page(title=title))
    assert expected in record.issues
    assert sum(1 for i in record.issues if "itle" in i) == 1


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    "meta,expected",
    [
        (None, "Missing meta description"),
        ("m" * 161, "Meta description too long (161 chars)"),
        ("m" * 69, "Meta description too short (69 chars)"),
    ],
)
async def test_meta_description_rules(meta, expected):
    record = await analyze(make_page(meta=meta))
    assert expected in record.issues


@pytest.mark.asyncio()
async def test_h1_rules():
    none = await analyze(make_page(h1s=()))
    many = await analyze(make_page(h1s=("One", "Two", "Three")))
    assert "No H1 tag found" in none.issues
    assert "Multiple H1 tags found (3)" in many.issues
    assert many.metrics.h1_text == "One"


@pytest.mark.asyncio()
async def test_required_issues_in_rule_order():
    record = await analyze(make_page(title="", meta="", h1s=(), words=50))
    expected = ["Missing title tag", "Missing meta description", "No H1 tag found", "Low word count (50)"]
    assert record.issues[:4] == tuple(expected)


@pytest.mark.asyncio()
async def test_no_images_means_no_alt_issue():
    record = await analyze(make_page(imgs=()))
    assert not any("alt text" in i for i in record.issues)


@pytest.mark.asyncio()
async def test_images_without_alt_attribute_are_counted():
    record = await analyze(make_page(imgs=(None, "", "Logo", None)))
    assert "2 image(s) missing alt text" in record.issues


@pytest.mark.asyncio()
async def test_missing_viewport_is_not_mobile_friendly():
    record = await analyze(make_page(viewport=False))
    assert record.issues[-1] == "Not mobile-friendly"
    assert any("viewport" in s for s in record.suggestions.rule_based)


def test_word_count_of_empty_text_is_one():
    assert count_words("") == 1
    assert count_words("  \n\t ") == 1
    assert count_words(" one\n two   three ") == 3


@pytest.mark.asyncio()
async def test_empty_page_reports_one_word():
    record = await analyze("")
    assert record.metrics.word_count == 1
    assert "Low word count (1)" in record.issues


@pytest.mark.asyncio()
async def test_internal_link_count_uses_seed_host():
    links = ["/a", "/a", "https://example.com/b#top", "https://other.org/", "mailto:x@example.com"]
    record = await analyze(make_page(links=links))
    assert record.metrics.internal_link_count == 3


@pytest.mark.asyncio()
async def test_slow_page_reports_load_time():
    record = await analyze(make_page(), probe=FakeProbe(load_time=4.5))
    assert record.issues[-1] == "Page load time too slow (4.50s)"
    assert record.metrics.load_time_seconds == 4.5
    assert record.metrics.performance_detail is not None
    assert "current: 4.5s" in record.suggestions.rule_based[-1]


@pytest.mark.asyncio()
async def test_fast_page_has_no_performance_issue():
    record = await analyze(make_page(), probe=FakeProbe(load_time=3.0))
    assert record.issues == ()
    assert record.metrics.load_time_seconds == 3.0


@pytest.mark.asyncio()
async def test_load_time_just_over_threshold_is_slow():
    record = await analyze(make_page(), probe=FakeProbe(load_time=3.004))
    assert record.issues == ("Page load time too slow (3.00s)",)
    assert record.metrics.load_time_seconds == 3.0
    assert record.metrics.performance_detail.load_time_seconds == 3.004


@pytest.mark.asyncio()
async def test_probe_failure_replaces_slow_load_issue():
    record = await analyze(make_page(), probe=FakeProbe(load_time=9.0, error="net::ERR_TIMED_OUT"))
    assert record.issues == ("performance analysis failed: net::ERR_TIMED_OUT",)
    assert record.metrics.load_time_seconds == UNAVAILABLE
    assert record.metrics.performance_detail is None


@pytest.mark.asyncio()
async def test_rule_based_suggestions_follow_issue_kinds():
    long_title = "Premium handcrafted oak dining tables and matching chairs online"
    record = await analyze(make_page(title=long_title, h1s=("A", "B")))
    assert record.issues[0].startswith("Title too long")
    # multiple H1 has no template
    assert len(record.suggestions.rule_based) == 1
    assert long_title[:57] in record.suggestions.rule_based[0]


@pytest.mark.asyncio()
async def test_oracle_receives_issues_and_metrics():
    oracle = FakeOracle(lines=["First idea", "", "  ", "Second idea"])
    record = await analyze(make_page(h1s=()), oracle=oracle)
    assert record.suggestions.generated == ("First idea", "Second idea")
    call = oracle.calls[0]
    assert call["url"] == f"{SEED}page"
    assert call["issues"] == ["No H1 tag found"]
    assert call["metrics"]["title"] == GOOD_TITLE


@pytest.mark.asyncio()
@pytest.mark.parametrize("oracle", [FakeOracle(error="OPENAI_API_KEY is not set"), FakeOracle(lines=[])])
async def test_oracle_failure_uses_fallback(oracle):
    record = await analyze(make_page(), oracle=oracle)
    assert record.suggestions.generated == (ORACLE_FALLBACK,)
