"""
Tests for HTML rendering, feed generation and output dispatch.
"""

import io
import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from urllib.parse import unquote, urlsplit

import pytest

from picoblog.config import BlogConfig, OutputMode
from picoblog.dispatcher import RendererDispatcher
from picoblog.exceptions import ConfigurationError, FeedGenerationError
from picoblog.feeds import FeedGenerator
from picoblog.models import Post
from picoblog.rendering import HtmlRenderer, format_long_date, render_markdown
from picoblog.rendering.html import ordinal_suffix

ATOM = "{http://www.w3.org/2005/Atom}"
BASE_URL = "https://example.com/blog/"


def make_post(title, day=1, contents="Hello *world*", hour=12):
    return Post(
        title=title,
        timestamp=datetime(2021, 3, day, hour, 0, tzinfo=timezone.utc),
        contents=contents,
    )


class TestMarkdown:
    """Tests for markdown conversion."""

    def test_heading(self):
        assert "<h1>Hi</h1>" in render_markdown("# Hi")

    def test_fenced_code(self):
        html = render_markdown("```\nprint(1)\n```\n")
        assert "<code>" in html
        assert "print(1)" in html


class TestLongDate:
    """Tests for the human readable date."""

    @pytest.mark.parametrize("day,suffix", [
        (1, "st"), (2, "nd"), (3, "rd"), (4, "th"),
        (11, "th"), (12, "th"), (13, "th"),
        (21, "st"), (22, "nd"), (23, "rd"), (31, "st"),
    ])
    def test_ordinal_suffix(self, day, suffix):
        assert ordinal_suffix(day) == suffix

    def test_format(self):
        assert format_long_date(datetime(2006, 1, 2)) == "January 2nd, 2006"


class TestHtmlRenderer:
    """Tests for HtmlRenderer."""

    def test_page_contains_title_and_posts(self):
        posts = [make_post("second", 2, "# Hi"), make_post("first", 1)]

        html = HtmlRenderer().render("My Blog", posts)

        assert "<title>My Blog</title>" in html
        assert html.index('id="second"') < html.index('id="first"')
        assert "<h1>Hi</h1>" in html
        assert "<em>world</em>" in html
        assert "Updated March 2nd, 2021" in html
        assert html.count("<hr") == 2

    def test_titles_are_escaped(self):
        html = HtmlRenderer().render("Tom & Jerry", [make_post("a<b")])
        assert "Tom &amp; Jerry" in html
        assert "a&lt;b" in html
        assert "a<b" not in html


class TestFeedGenerator:
    """Tests for FeedGenerator."""

    def test_rss_structure(self):
        generator = FeedGenerator(base_url=BASE_URL, title="My Blog")
        xml = generator.generate([make_post("second", 2), make_post("first", 1)], OutputMode.RSS)

        root = ET.fromstring(xml)
        assert root.tag == "rss"
        assert root.get("version") == "2.0"
        channel = root.find("channel")
        assert channel.findtext("title") == "My Blog"
        assert channel.findtext("link") == BASE_URL
        assert channel.findtext("lastBuildDate") == "Tue, 02 Mar 2021 12:00:00 +0000"

        items = channel.findall("item")
        assert [i.findtext("title") for i in items] == ["second", "first"]
        assert items[0].findtext("link") == BASE_URL + "#second"
        assert items[0].findtext("guid") == BASE_URL + "#second"
        assert items[1].findtext("pubDate") == "Mon, 01 Mar 2021 12:00:00 +0000"
        assert items[0].find("description") is None

    def test_atom_structure(self):
        generator = FeedGenerator(base_url=BASE_URL, title="My Blog")
        xml = generator.generate([make_post("second", 2), make_post("first", 1)], OutputMode.ATOM)

        root = ET.fromstring(xml)
        assert root.tag == f"{ATOM}feed"
        assert root.findtext(f"{ATOM}title") == "My Blog"
        assert root.find(f"{ATOM}link").get("href") == BASE_URL
        assert root.findtext(f"{ATOM}updated") == "2021-03-02T12:00:00Z"

        entries = root.findall(f"{ATOM}entry")
        assert [e.findtext(f"{ATOM}title") for e in entries] == ["second", "first"]
        assert entries[1].find(f"{ATOM}link").get("href") == BASE_URL + "#first"
        assert entries[1].findtext(f"{ATOM}updated") == "2021-03-01T12:00:00Z"

    def test_dates_converted_to_utc(self):
        post = Post(
            title="late",
            timestamp=datetime(2021, 3, 1, 23, 30, tzinfo=timezone.utc).astimezone(),
            contents="",
        )
        xml = FeedGenerator(base_url=BASE_URL, title="t").generate([post], OutputMode.ATOM)
        entry = ET.fromstring(xml).find(f"{ATOM}entry")
        assert entry.findtext(f"{ATOM}updated") == "2021-03-01T23:30:00Z"

    @pytest.mark.parametrize("feed_type", [OutputMode.RSS, OutputMode.ATOM])
    def test_link_escapes_reserved_characters(self, feed_type):
        title = "what is #1? a/b & c"
        xml = FeedGenerator(base_url=BASE_URL, title="t").generate([make_post(title)], feed_type)

        root = ET.fromstring(xml)
        if feed_type == OutputMode.RSS:
            link = root.find("channel/item").findtext("link")
        else:
            link = root.find(f"{ATOM}entry/{ATOM}link").get("href")

        assert link == BASE_URL + "#what%20is%20%231%3F%20a%2Fb%20%26%20c"
        assert link.startswith(BASE_URL + "#")
        assert unquote(urlsplit(link).fragment) == title

    def test_repeated_titles_get_distinct_ids(self):
        generator = FeedGenerator(base_url=BASE_URL, title="t")
        posts = [make_post("post", 3), make_post("post", 2), make_post("post-2", 1)]

        rss = ET.fromstring(generator.generate(posts, OutputMode.RSS))
        items = rss.findall("channel/item")
        assert [i.findtext("link") for i in items] == [BASE_URL + "#post", BASE_URL + "#post", BASE_URL + "#post-2"]
        guids = [i.find("guid") for i in items]
        assert [g.text for g in guids] == [BASE_URL + "#post", BASE_URL + "#post-2", BASE_URL + "#post-2-2"]
        assert [g.get("isPermaLink") for g in guids] == ["true", "false", "false"]

        atom = ET.fromstring(generator.generate(posts, OutputMode.ATOM))
        entries = atom.findall(f"{ATOM}entry")
        assert [e.find(f"{ATOM}link").get("href") for e in entries][:2] == [BASE_URL + "#post"] * 2
        ids = [e.findtext(f"{ATOM}id") for e in entries]
        assert len(set(ids)) == 3

    def test_full_content(self):
        generator = FeedGenerator(base_url=BASE_URL, title="t", full_content=True)

        rss = ET.fromstring(generator.generate([make_post("p", contents="# Hi")], OutputMode.RSS))
        assert "<h1>Hi</h1>" in rss.find("channel/item").findtext("description")

        atom = ET.fromstring(generator.generate([make_post("p", contents="# Hi")], OutputMode.ATOM))
        content = atom.find(f"{ATOM}entry/{ATOM}content")
        assert content.get("type") == "html"
        assert "<h1>Hi</h1>" in content.text

    def test_invalid_xml_characters(self):
        generator = FeedGenerator(base_url=BASE_URL, title="t")
        with pytest.raises(FeedGenerationError) as exc_info:
            generator.generate([make_post("bad\x01title")], OutputMode.RSS)
        assert exc_info.value.error_code == "FEED_GENERATION_FAILED"


class TestRendererDispatcher:
    """Tests for RendererDispatcher."""

    def test_mode_is_case_insensitive(self):
        sink = io.StringIO()
        config = BlogConfig(mode="RsS", url=BASE_URL)

        assert RendererDispatcher(config).write([make_post("p")], sink) is True
        assert "<rss" in sink.getvalue()

    def test_html_mode(self):
        sink = io.StringIO()
        assert RendererDispatcher(BlogConfig(mode="HTML")).write([make_post("p")], sink) is True
        assert sink.getvalue().startswith("<!DOCTYPE html>")

    def test_unsupported_mode(self, caplog):
        sink = io.StringIO()
        with caplog.at_level(logging.ERROR):
            written = RendererDispatcher(BlogConfig(mode="pdf")).write([make_post("p")], sink)

        assert written is False
        assert sink.getvalue() == ""
        assert "Unsupported mode 'pdf'" in caplog.text

    def test_feed_requires_url(self):
        with pytest.raises(ConfigurationError) as exc_info:
            RendererDispatcher(BlogConfig(mode="atom")).write([make_post("p")], io.StringIO())
        assert "Atom mode" in exc_info.value.message

    def test_feed_failure_writes_nothing(self, caplog):
        sink = io.StringIO()
        config = BlogConfig(mode="atom", url=BASE_URL)

        with caplog.at_level(logging.ERROR):
            written = RendererDispatcher(config).write([make_post("bad\x01title")], sink)

        assert written is False
        assert sink.getvalue() == ""
        assert "FEED_GENERATION_FAILED" in caplog.text
