"""Shared fixtures for podfeed tests."""

import logging
from collections.abc import Callable, Iterator

import pytest
from lxml import etree

NSMAP_DECLARATIONS = (
    'xmlns:atom="http://www.w3.org/2005/Atom" '
    'xmlns:content="http://purl.org/rss/1.0/modules/content/" '
    'xmlns:feedpress="https://feed.press/xmlns" '
    'xmlns:googleplay="http://www.google.com/schemas/play-podcasts/1.0" '
    'xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd" '
    'xmlns:podcast="https://podcastindex.org/namespace/1.0" '
    'xmlns:psc="http://podlove.org/simple-chapters"'
)

SAMPLE_FEED = f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" {NSMAP_DECLARATIONS}>
  <channel>
    <title>Tech Talk</title>
    <link>https://example.com/show</link>
    <description>Weekly conversations about software.</description>
    <language>en-us</language>
    <pubDate>Fri, 08 Jun 2018 08:00:00 GMT</pubDate>
    <lastBuildDate>2018-06-09T10:30:00Z</lastBuildDate>
    <generator>podfeed tests</generator>
    <copyright>2018 Example</copyright>
    <docs>https://cyber.harvard.edu/rss/rss.html</docs>
    <managingEditor>editor@example.com</managingEditor>
    <webMaster>web@example.com</webMaster>
    <ttl>60</ttl>
    <image>
      <url>https://example.com/cover.png</url>
      <title>Tech Talk</title>
      <link>https://example.com/show</link>
      <width>144</width>
      <height>144</height>
    </image>
    <category domain="https://example.com/tax">Technology</category>
    <atom:link href="https://example.com/feed.xml" rel="self" type="application/rss+xml"/>
    <itunes:author>Jane Doe</itunes:author>
    <itunes:image href="https://example.com/itunes.png"/>
    <itunes:explicit>clean</itunes:explicit>
    <itunes:category text="Technology">
      <itunes:category text="Podcasting"/>
    </itunes:category>
    <itunes:owner>
      <itunes:name>Jane Doe</itunes:name>
      <itunes:email>jane@example.com</itunes:email>
    </itunes:owner>
    <itunes:type>serial</itunes:type>
    <googleplay:author>Jane Doe</googleplay:author>
    <googleplay:block>yes</googleplay:block>
    <podcast:locked owner="jane@example.com">yes</podcast:locked>
    <podcast:funding url="https://example.com/donate">Support the show</podcast:funding>
    <feedpress:locale>en</feedpress:locale>
    <unknown:thing xmlns:unknown="https://example.com/unknown">ignored</unknown:thing>
    <item>
      <title>Episode 1</title>
      <link>https://example.com/ep1</link>
      <description>The first one.</description>
      <guid isPermaLink="false">ep-1</guid>
      <pubDate>Fri, 08 Jun 2018 08:00:00 +0000</pubDate>
      <enclosure url="https://example.com/ep1.mp3" length="123456" type="audio/mpeg"/>
      <content:encoded><![CDATA[<p>Show notes</p>]]></content:encoded>
      <itunes:duration>01:02:03</itunes:duration>
      <itunes:episodeType>full</itunes:episodeType>
      <itunes:season>1</itunes:season>
      <itunes:episode>1</itunes:episode>
      <podcast:chapters url="https://example.com/ep1.json" type="application/json+chapters"/>
      <podcast:soundbite startTime="73.0" duration="60.0">Highlight</podcast:soundbite>
      <podcast:transcript url="https://example.com/ep1.vtt" type="text/vtt" language="en"/>
      <psc:chapters version="1.2">
        <psc:chapter start="00:00:00.000" title="Intro"/>
        <psc:chapter start="00:05:00.000" title="Main" href="https://example.com/main"/>
      </psc:chapters>
    </item>
    <item>
      <title>No enclosure here</title>
      <link>https://example.com/ep2</link>
    </item>
  </channel>
</rss>
"""


@pytest.fixture(autouse=True)
def reset_podfeed_logger() -> Iterator[None]:
    """Undo any setup_logging() call so caplog sees podfeed records."""
    yield
    logger = logging.getLogger("podfeed")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_feed() -> etree._ElementTree:
    """A parsed feed exercising every supported namespace."""
    return etree.ElementTree(etree.fromstring(SAMPLE_FEED.encode("utf-8")))


@pytest.fixture
def xml() -> Callable[[str], etree._Element]:
    """Parse an XML snippet; the common feed prefixes are pre-declared on a wrapper.

    The returned element is the snippet's root, with its namespaces resolved.
    """

    def _parse(snippet: str) -> etree._Element:
        wrapper = etree.fromstring(f"<wrapper {NSMAP_DECLARATIONS}>{snippet}</wrapper>")
        return next(child for child in wrapper if isinstance(child.tag, str))

    return _parse


@pytest.fixture
def rss() -> Callable[[str], etree._Element]:
    """Wrap channel content in an ``<rss><channel>`` document and parse it."""

    def _parse(channel_content: str) -> etree._Element:
        return etree.fromstring(
            f'<rss version="2.0" {NSMAP_DECLARATIONS}><channel>{channel_content}</channel></rss>'
        )

    return _parse


REQUIRED_CHANNEL = (
    "<title>Show</title>"
    "<link>https://example.com</link>"
    "<description>About the show</description>"
    "<language>en</language>"
)


@pytest.fixture
def required_channel() -> str:
    """Core channel elements that make a podcast buildable."""
    return REQUIRED_CHANNEL
