"""Tests for FeedAssembler and parse_feed."""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest
from lxml import etree

from podfeed import parse_feed
from podfeed.config.schema import ParserConfig
from podfeed.model import Guid, RssCategory, RssImage, ShowType, TranscriptType
from podfeed.namespace import FeedNamespace
from podfeed.parser.assembler import FeedAssembler
from podfeed.parser.registry import NamespaceRegistry

Rss = Callable[[str], etree._Element]

ENCLOSURE = '<enclosure url="https://example.com/a.mp3" length="10" type="audio/mpeg"/>'


class TestSampleFeed:
    """Tests against a feed exercising every namespace."""

    def test_core_channel_fields(self, sample_feed: etree._ElementTree) -> None:
        """Test core RSS channel values."""
        podcast = parse_feed(sample_feed)
        assert podcast is not None
        assert podcast.title == "Tech Talk"
        assert podcast.link == "https://example.com/show"
        assert podcast.description == "Weekly conversations about software."
        assert podcast.language == "en-us"
        assert podcast.pub_date == datetime(2018, 6, 8, 8, 0, tzinfo=timezone.utc)
        assert podcast.last_build_date == datetime(2018, 6, 9, 10, 30, tzinfo=timezone.utc)
        assert podcast.generator == "podfeed tests"
        assert podcast.copyright == "2018 Example"
        assert podcast.docs == "https://cyber.harvard.edu/rss/rss.html"
        assert podcast.managing_editor == "editor@example.com"
        assert podcast.web_master == "web@example.com"
        assert podcast.ttl == 60
        assert podcast.image == RssImage(
            url="https://example.com/cover.png",
            title="Tech Talk",
            link="https://example.com/show",
            width=144,
            height=144,
        )
        assert podcast.categories == (
            RssCategory(category="Technology", domain="https://example.com/tax"),
        )

    def test_channel_extensions(self, sample_feed: etree._ElementTree) -> None:
        """Test every channel extension block is populated."""
        podcast = parse_feed(sample_feed)
        assert podcast is not None

        assert podcast.itunes is not None
        assert podcast.itunes.explicit is False
        assert podcast.itunes.type is ShowType.SERIAL
        assert podcast.itunes.categories[0].subcategory == "Podcasting"
        assert podcast.itunes.owner is not None
        assert podcast.itunes.owner.email == "jane@example.com"

        assert podcast.atom is not None
        assert podcast.atom.links[0].rel == "self"

        assert podcast.googleplay is not None
        assert podcast.googleplay.block is True

        assert podcast.podcastindex is not None
        assert podcast.podcastindex.locked is not None
        assert podcast.podcastindex.locked.locked is True
        assert podcast.podcastindex.funding[0].message == "Support the show"

        assert podcast.feedpress is not None
        assert podcast.feedpress.locale == "en"

    def test_episode(self, sample_feed: etree._ElementTree) -> None:
        """Test the valid item becomes an episode with every block."""
        podcast = parse_feed(sample_feed)
        assert podcast is not None
        assert len(podcast.episodes) == 1

        episode = podcast.episodes[0]
        assert episode.title == "Episode 1"
        assert episode.enclosure.length == 123456
        assert episode.guid == Guid(guid="ep-1", is_permalink=False)
        assert episode.pub_date == datetime(2018, 6, 8, 8, 0, tzinfo=timezone.utc)
        assert episode.content is not None
        assert episode.content.encoded == "<p>Show notes</p>"
        assert episode.itunes is not None
        assert episode.itunes.duration == timedelta(hours=1, minutes=2, seconds=3)
        assert episode.itunes.season == 1
        assert episode.podcastindex is not None
        assert episode.podcastindex.chapters is not None
        assert episode.podcastindex.soundbites[0].title == "Highlight"
        assert episode.podcastindex.transcripts[0].type is TranscriptType.VTT
        assert episode.podlove is not None
        assert [c.title for c in episode.podlove.chapters] == ["Intro", "Main"]

    def test_accepts_root_and_channel_elements(self, sample_feed: etree._ElementTree) -> None:
        """Test the assembler takes a tree, the rss root or the channel."""
        root = sample_feed.getroot()
        from_tree = parse_feed(sample_feed)
        from_root = parse_feed(root)
        from_channel = parse_feed(root[0])
        assert from_tree == from_root == from_channel

    def test_images_and_categories_views(self, sample_feed: etree._ElementTree) -> None:
        """Test combined image and category views across namespaces."""
        podcast = parse_feed(sample_feed)
        assert podcast is not None
        assert len(podcast.images) == 2
        assert len(podcast.all_categories) == 2


class TestPodcastReadiness:
    """Tests for channel-level readiness."""

    def test_missing_language_yields_none(
        self, rss: Rss, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test an incomplete channel produces no podcast and logs at INFO."""
        document = rss(
            "<title>T</title><link>https://example.com</link><description>D</description>"
            '<itunes:image href="h"/><itunes:explicit>no</itunes:explicit>'
            '<itunes:category text="Arts"/>'
        )
        with caplog.at_level(logging.INFO, logger="podfeed"):
            assert parse_feed(document) is None
        assert any(record.levelno == logging.INFO for record in caplog.records)

    def test_non_rss_document_yields_none(self) -> None:
        """Test documents without an rss root are rejected."""
        feed = etree.fromstring('<feed xmlns="http://www.w3.org/2005/Atom"><title>T</title></feed>')
        assert parse_feed(feed) is None

    def test_feed_without_episodes_is_valid(self, rss: Rss, required_channel: str) -> None:
        """Test episodes are optional."""
        podcast = parse_feed(rss(required_channel))
        assert podcast is not None
        assert podcast.episodes == ()


class TestItemHandling:
    """Tests for item parsing and tolerance."""

    def test_partial_items_are_dropped(
        self, rss: Rss, required_channel: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test invalid items are skipped while valid ones survive."""
        document = rss(
            required_channel
            + f"<item><title>Good</title>{ENCLOSURE}</item>"
            + "<item><title>No enclosure</title></item>"
            + '<item><title>Bad length</title><enclosure url="u" length="-5" type="t"/></item>'
            + f"<item>{ENCLOSURE}</item>"
            + f"<item><title>Also good</title>{ENCLOSURE}</item>"
        )
        with caplog.at_level(logging.DEBUG, logger="podfeed"):
            podcast = parse_feed(document)
        assert podcast is not None
        assert [episode.title for episode in podcast.episodes] == ["Good", "Also good"]
        assert "Dropping <item> 'No enclosure'" in caplog.text

    def test_item_core_fields(self, rss: Rss, required_channel: str) -> None:
        """Test core item values."""
        document = rss(
            required_channel
            + "<item><title>T</title><link>https://example.com/1</link>"
            + "<description>D</description><author>a@example.com</author>"
            + "<category>News</category><comments>https://example.com/c</comments>"
            + "<source>https://example.com/src</source>"
            + '<guid isPermaLink="true">https://example.com/1</guid>'
            + "<pubDate>not a date</pubDate>"
            + f"{ENCLOSURE}</item>"
        )
        podcast = parse_feed(document)
        assert podcast is not None
        episode = podcast.episodes[0]
        assert episode.link == "https://example.com/1"
        assert episode.description == "D"
        assert episode.author == "a@example.com"
        assert episode.categories == (RssCategory(category="News"),)
        assert episode.comments == "https://example.com/c"
        assert episode.source == "https://example.com/src"
        assert episode.guid == Guid(guid="https://example.com/1", is_permalink=True)
        assert episode.pub_date is None

    def test_unknown_namespaces_are_ignored(self, rss: Rss, required_channel: str) -> None:
        """Test elements in unregistered namespaces do not disturb parsing."""
        document = rss(
            required_channel
            + '<x:title xmlns:x="https://example.com/x">Wrong</x:title>'
            + f'<item><title>Ep</title><x:foo xmlns:x="https://example.com/x"/>{ENCLOSURE}</item>'
        )
        podcast = parse_feed(document)
        assert podcast is not None
        assert podcast.title == "Show"
        assert len(podcast.episodes) == 1

    def test_registry_limits_interpreted_namespaces(
        self, rss: Rss, required_channel: str
    ) -> None:
        """Test a restricted registry ignores disabled namespaces."""
        document = rss(
            required_channel
            + "<feedpress:locale>en</feedpress:locale>"
            + "<googleplay:author>Jane</googleplay:author>"
        )
        registry = NamespaceRegistry.from_config(
            ParserConfig(namespaces=[FeedNamespace.FEEDPRESS])
        )
        podcast = FeedAssembler(registry).parse(document)
        assert podcast is not None
        assert podcast.feedpress is not None
        assert podcast.googleplay is None


class TestDefaultNamespace:
    """Tests for documents that declare a default namespace."""

    def test_default_namespace_elements_are_core(self) -> None:
        """Test channel and item fields in the default namespace are read as core RSS."""
        feed = etree.fromstring(
            '<rss xmlns="http://backend.userland.com/rss2" '
            'xmlns:feedpress="https://feed.press/xmlns" version="2.0">'
            "<channel><title>Show</title><link>https://example.com</link>"
            "<description>D</description><language>en</language>"
            "<image><url>https://example.com/i.png</url><title>Show</title>"
            "<link>https://example.com</link></image>"
            "<feedpress:locale>en</feedpress:locale>"
            f"<item><title>Ep</title>{ENCLOSURE}</item>"
            "<item><title>No enclosure</title></item>"
            "</channel></rss>"
        )
        podcast = parse_feed(feed)
        assert podcast is not None
        assert podcast.title == "Show"
        assert podcast.language == "en"
        assert podcast.image == RssImage(
            url="https://example.com/i.png", title="Show", link="https://example.com"
        )
        assert podcast.feedpress is not None
        assert podcast.feedpress.locale == "en"
        assert [episode.title for episode in podcast.episodes] == ["Ep"]
        assert podcast.episodes[0].enclosure.url == "https://example.com/a.mp3"

    def test_extension_default_namespace_is_not_core(self) -> None:
        """Test a default namespace belonging to an extension does not make elements core."""
        feed = etree.fromstring(
            '<rss xmlns="http://www.w3.org/2005/Atom" version="2.0"><channel>'
            "<title>Show</title><link>https://example.com</link>"
            "<description>D</description><language>en</language></channel></rss>"
        )
        assert parse_feed(feed) is None

    def test_core_image_ignores_foreign_children(self, rss: Rss, required_channel: str) -> None:
        """Test namespaced children of <image> do not fill its core fields."""
        document = rss(
            required_channel
            + "<image><itunes:url>https://example.com/wrong.png</itunes:url>"
            + "<title>Show</title><link>https://example.com</link></image>"
        )
        podcast = parse_feed(document)
        assert podcast is not None
        assert podcast.image is None
