"""Podcast model: the root of a parsed feed."""

from datetime import datetime
from typing import TYPE_CHECKING

from podfeed.model.atom import Atom
from podfeed.model.common import FeedModel, HrefOnlyImage, ItunesCategory, RssCategory, RssImage
from podfeed.model.episode import Episode
from podfeed.model.feedpress import Feedpress
from podfeed.model.googleplay import PodcastGoogleplay
from podfeed.model.itunes import PodcastItunes
from podfeed.model.podcastindex import PodcastPodcastindex

if TYPE_CHECKING:
    from podfeed.builder.podcast import PodcastBuilder


class Podcast(FeedModel):
    """Feed-level metadata of a podcast, with its episodes.

    ``title``, ``link``, ``description`` and ``language`` are required;
    everything else is optional. Each extension block is present only if
    the feed carried enough data for it.
    """

    title: str
    link: str
    description: str
    language: str
    pub_date: datetime | None = None
    last_build_date: datetime | None = None
    generator: str | None = None
    copyright: str | None = None
    docs: str | None = None
    managing_editor: str | None = None
    web_master: str | None = None
    ttl: int | None = None
    image: RssImage | None = None
    categories: tuple[RssCategory, ...] = ()
    episodes: tuple[Episode, ...] = ()
    itunes: PodcastItunes | None = None
    atom: Atom | None = None
    googleplay: PodcastGoogleplay | None = None
    podcastindex: PodcastPodcastindex | None = None
    feedpress: Feedpress | None = None

    @property
    def images(self) -> tuple[RssImage | HrefOnlyImage, ...]:
        """All artwork declared for the show, core image first."""
        candidates = (
            self.image,
            self.itunes.image if self.itunes else None,
            self.googleplay.image if self.googleplay else None,
        )
        return tuple(image for image in candidates if image is not None)

    @property
    def all_categories(self) -> tuple[RssCategory | ItunesCategory, ...]:
        """RSS, iTunes and Google Play categories, in that order."""
        categories: list[RssCategory | ItunesCategory] = list(self.categories)
        if self.itunes:
            categories.extend(self.itunes.categories)
        if self.googleplay:
            categories.extend(self.googleplay.categories)
        return tuple(categories)

    @classmethod
    def builder(cls) -> "PodcastBuilder":
        """Return a fresh builder for Podcast instances."""
        from podfeed.builder.podcast import PodcastBuilder

        return PodcastBuilder()
