"""
RSS 2.0 and Atom 1.0 feed generator for blog posts.
"""

import logging
from datetime import datetime, timezone
from typing import List, Sequence
from xml.dom import minidom
from xml.etree.ElementTree import Element, SubElement, tostring
from xml.parsers.expat import ExpatError

from ..config.constants import FEED_GENERATOR, VERSION
from ..config.settings import OutputMode
from ..exceptions import FeedGenerationError, create_error_context
from ..models.post import Post
from ..rendering.markdown_converter import render_markdown

logger = logging.getLogger(__name__)

ATOM_NAMESPACE = 'http://www.w3.org/2005/Atom'


class FeedGenerator:
    """Generates RSS 2.0 and Atom 1.0 feeds from posts."""

    def __init__(self, base_url: str, title: str, full_content: bool = False):
        """Initialize feed generator.

        Args:
            base_url: URL of the rendered blog page; entry links point into it
            title: Feed title
            full_content: Embed each post's rendered HTML in its entry
        """
        self.base_url = base_url
        self.title = title
        self.full_content = full_content

    def generate(self, posts: Sequence[Post], feed_type: OutputMode) -> str:
        """Generate feed content based on feed type.

        Returns:
            XML string of the feed

        Raises:
            FeedGenerationError: If the feed cannot be serialized
        """
        logger.debug(f"Generating {feed_type.value} feed with {len(posts)} entries")
        if feed_type == OutputMode.ATOM:
            return self.generate_atom(posts)
        if feed_type == OutputMode.RSS:
            return self.generate_rss(posts)
        raise ValueError(f"Not a feed type: {feed_type}")

    def generate_rss(self, posts: Sequence[Post]) -> str:
        """Generate RSS 2.0 XML feed."""
        rss = Element('rss', {'version': '2.0'})
        channel = SubElement(rss, 'channel')

        # Channel metadata
        SubElement(channel, 'title').text = self.title
        SubElement(channel, 'link').text = self.base_url
        SubElement(channel, 'description').text = self.title
        SubElement(channel, 'generator').text = f"{FEED_GENERATOR} {VERSION}"

        if posts:
            last_build = max(p.timestamp for p in posts)
            SubElement(channel, 'lastBuildDate').text = self._format_rss_date(last_build)

        for post, guid in zip(posts, self._entry_ids(posts)):
            self._add_rss_item(channel, post, guid)

        return self._prettify_xml(rss, OutputMode.RSS)

    def generate_atom(self, posts: Sequence[Post]) -> str:
        """Generate Atom 1.0 XML feed."""
        feed = Element('feed', {'xmlns': ATOM_NAMESPACE})

        # Feed metadata
        SubElement(feed, 'title').text = self.title
        SubElement(feed, 'id').text = self.base_url
        SubElement(feed, 'link', {'href': self.base_url})

        if posts:
            updated = max(p.timestamp for p in posts)
        else:
            updated = datetime.now(timezone.utc)
        SubElement(feed, 'updated').text = self._format_atom_date(updated)
        SubElement(feed, 'generator', {'version': VERSION}).text = FEED_GENERATOR

        author = SubElement(feed, 'author')
        SubElement(author, 'name').text = self.title

        for post, entry_id in zip(posts, self._entry_ids(posts)):
            self._add_atom_entry(feed, post, entry_id)

        return self._prettify_xml(feed, OutputMode.ATOM)

    def _entry_ids(self, posts: Sequence[Post]) -> List[str]:
        """One unique id per entry.

        An entry's id is its link; posts sharing a title get a numbered
        suffix after the first.
        """
        used = set()
        ids = []
        for post in posts:
            link = post.link(self.base_url)
            entry_id = link
            n = 1
            while entry_id in used:
                n += 1
                entry_id = f"{link}-{n}"
            used.add(entry_id)
            ids.append(entry_id)
        return ids

    def _add_rss_item(self, channel: Element, post: Post, guid: str) -> None:
        """Add an RSS item element for a post."""
        item = SubElement(channel, 'item')
        link = post.link(self.base_url)

        SubElement(item, 'title').text = post.title
        SubElement(item, 'link').text = link
        is_permalink = 'true' if guid == link else 'false'
        SubElement(item, 'guid', {'isPermaLink': is_permalink}).text = guid
        SubElement(item, 'pubDate').text = self._format_rss_date(post.timestamp)

        if self.full_content:
            SubElement(item, 'description').text = render_markdown(post.contents)

    def _add_atom_entry(self, feed: Element, post: Post, entry_id: str) -> None:
        """Add an Atom entry element for a post."""
        entry = SubElement(feed, 'entry')
        link = post.link(self.base_url)

        SubElement(entry, 'title').text = post.title
        SubElement(entry, 'link', {'href': link, 'rel': 'alternate', 'type': 'text/html'})
        SubElement(entry, 'id').text = entry_id
        SubElement(entry, 'updated').text = self._format_atom_date(post.timestamp)

        if self.full_content:
            content_elem = SubElement(entry, 'content', {'type': 'html'})
            content_elem.text = render_markdown(post.contents)

    def _format_rss_date(self, dt: datetime) -> str:
        """Format datetime for RSS 2.0 (RFC 822)."""
        return self._to_utc(dt).strftime('%a, %d %b %Y %H:%M:%S +0000')

    def _format_atom_date(self, dt: datetime) -> str:
        """Format datetime for Atom 1.0 (ISO 8601)."""
        return self._to_utc(dt).strftime('%Y-%m-%dT%H:%M:%SZ')

    @staticmethod
    def _to_utc(dt: datetime) -> datetime:
        if dt.tzinfo is None:
            # Naive datetimes are local time
            dt = dt.astimezone()
        return dt.astimezone(timezone.utc)

    def _prettify_xml(self, elem: Element, feed_type: OutputMode) -> str:
        """Convert Element to pretty-printed XML string."""
        rough_string = tostring(elem, encoding='unicode')
        try:
            reparsed = minidom.parseString(rough_string)
        except ExpatError as e:
            raise FeedGenerationError(
                f"Could not render {feed_type.display_name} feed: {e}",
                context=create_error_context(feed_type=feed_type.value, operation="serialize_feed"),
                cause=e,
            )
        return reparsed.toprettyxml(indent="  ", encoding=None)

