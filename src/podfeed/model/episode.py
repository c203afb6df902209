"""Episode model and its RSS item value types."""

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import Field

from podfeed.model.atom import Atom
from podfeed.model.common import FeedModel, RssCategory
from podfeed.model.content import Content
from podfeed.model.googleplay import EpisodeGoogleplay
from podfeed.model.itunes import EpisodeItunes
from podfeed.model.podcastindex import EpisodePodcastindex
from podfeed.model.podlove import EpisodePodlove

if TYPE_CHECKING:
    from podfeed.builder.episode import EnclosureBuilder, EpisodeBuilder, GuidBuilder


class Enclosure(FeedModel):
    """The media file attached to an item."""

    url: str
    length: int = Field(..., ge=0)
    type: str

    @classmethod
    def builder(cls) -> "EnclosureBuilder":
        from podfeed.builder.episode import EnclosureBuilder

        return EnclosureBuilder()


class Guid(FeedModel):
    """An item ``<guid>`` and its ``isPermaLink`` flag."""

    guid: str
    is_permalink: bool | None = None

    @classmethod
    def builder(cls) -> "GuidBuilder":
        from podfeed.builder.episode import GuidBuilder

        return GuidBuilder()


class Episode(FeedModel):
    """A single podcast episode built from an RSS ``<item>``.

    Attributes:
        title: Episode title (required)
        enclosure: Media file (required)
        link: Episode web page
        description: Plain description
        author: Author email per RSS 2.0
        categories: RSS categories in document order
        comments: URL of the comments page
        guid: Globally unique identifier
        pub_date: Publication date
        source: RSS channel the item came from
        content: ``content:encoded`` body
        itunes: iTunes extension block
        atom: Atom extension block
        googleplay: Google Play extension block
        podcastindex: PodcastIndex extension block
        podlove: Podlove Simple Chapters block
    """

    title: str
    enclosure: Enclosure
    link: str | None = None
    description: str | None = None
    author: str | None = None
    categories: tuple[RssCategory, ...] = ()
    comments: str | None = None
    guid: Guid | None = None
    pub_date: datetime | None = None
    source: str | None = None
    content: Content | None = None
    itunes: EpisodeItunes | None = None
    atom: Atom | None = None
    googleplay: EpisodeGoogleplay | None = None
    podcastindex: EpisodePodcastindex | None = None
    podlove: EpisodePodlove | None = None

    @classmethod
    def builder(cls) -> "EpisodeBuilder":
        """Return a fresh builder for Episode instances."""
        from podfeed.builder.episode import EpisodeBuilder

        return EpisodeBuilder()
