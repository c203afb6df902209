"""Models for the iTunes podcast namespace."""

from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING

from podfeed.model.common import FeedModel, HrefOnlyImage, ItunesCategory, Person

if TYPE_CHECKING:
    from podfeed.builder.itunes import EpisodeItunesBuilder, PodcastItunesBuilder


class ShowType(str, Enum):
    """Value of ``<itunes:type>``."""

    EPISODIC = "episodic"
    SERIAL = "serial"

    @classmethod
    def of(cls, raw: str | None) -> "ShowType | None":
        """Case-insensitive lookup; None for unknown values."""
        if raw is None:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class EpisodeType(str, Enum):
    """Value of ``<itunes:episodeType>``."""

    FULL = "full"
    TRAILER = "trailer"
    BONUS = "bonus"

    @classmethod
    def of(cls, raw: str | None) -> "EpisodeType | None":
        """Case-insensitive lookup; None for unknown values."""
        if raw is None:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class PodcastItunes(FeedModel):
    """Channel-level iTunes data.

    Attributes:
        image: Show artwork (required)
        explicit: Whether the show contains explicit content (required)
        categories: At least one iTunes category, in document order (required)
        subtitle: Short description
        summary: Long description
        keywords: Comma separated keywords, kept verbatim
        author: Show author
        owner: Contact for the show
        block: Whether the show is hidden from the directory
        complete: Whether no further episodes will be published
        type: Episodic or serial
        title: Show title override
        new_feed_url: Location the feed moved to
    """

    image: HrefOnlyImage
    explicit: bool
    categories: tuple[ItunesCategory, ...]
    subtitle: str | None = None
    summary: str | None = None
    keywords: str | None = None
    author: str | None = None
    owner: Person | None = None
    block: bool = False
    complete: bool = False
    type: ShowType | None = None
    title: str | None = None
    new_feed_url: str | None = None

    @classmethod
    def builder(cls) -> "PodcastItunesBuilder":
        """Return a fresh builder for PodcastItunes instances."""
        from podfeed.builder.itunes import PodcastItunesBuilder

        return PodcastItunesBuilder()


class EpisodeItunes(FeedModel):
    """Item-level iTunes data; every field is optional."""

    title: str | None = None
    duration: timedelta | None = None
    image: HrefOnlyImage | None = None
    explicit: bool | None = None
    block: bool = False
    season: int | None = None
    episode: int | None = None
    episode_type: EpisodeType | None = None
    author: str | None = None
    subtitle: str | None = None
    summary: str | None = None

    @classmethod
    def builder(cls) -> "EpisodeItunesBuilder":
        """Return a fresh builder for EpisodeItunes instances."""
        from podfeed.builder.itunes import EpisodeItunesBuilder

        return EpisodeItunesBuilder()
