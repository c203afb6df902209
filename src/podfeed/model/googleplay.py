"""Models for the Google Play podcast namespace."""

from enum import Enum
from typing import TYPE_CHECKING

from podfeed.model.common import FeedModel, HrefOnlyImage, ItunesCategory

if TYPE_CHECKING:
    from podfeed.builder.googleplay import EpisodeGoogleplayBuilder, PodcastGoogleplayBuilder


class ExplicitType(str, Enum):
    """Value of ``<googleplay:explicit>``; ``clean`` is distinct from ``no``."""

    YES = "yes"
    NO = "no"
    CLEAN = "clean"

    @classmethod
    def of(cls, raw: str | None) -> "ExplicitType | None":
        """Case-insensitive lookup; None for unknown values."""
        if raw is None:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class PodcastGoogleplay(FeedModel):
    """Channel-level Google Play data.

    All fields are optional, but at least one must be present for the
    block to exist.
    """

    author: str | None = None
    owner: str | None = None
    categories: tuple[ItunesCategory, ...] = ()
    description: str | None = None
    explicit: ExplicitType | None = None
    block: bool = False
    image: HrefOnlyImage | None = None
    new_feed_url: str | None = None

    @classmethod
    def builder(cls) -> "PodcastGoogleplayBuilder":
        """Return a fresh builder for PodcastGoogleplay instances."""
        from podfeed.builder.googleplay import PodcastGoogleplayBuilder

        return PodcastGoogleplayBuilder()


class EpisodeGoogleplay(FeedModel):
    """Item-level Google Play data."""

    description: str | None = None
    explicit: ExplicitType | None = None
    block: bool = False
    image: HrefOnlyImage | None = None

    @classmethod
    def builder(cls) -> "EpisodeGoogleplayBuilder":
        """Return a fresh builder for EpisodeGoogleplay instances."""
        from podfeed.builder.googleplay import EpisodeGoogleplayBuilder

        return EpisodeGoogleplayBuilder()
