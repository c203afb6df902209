"""Builders for the iTunes namespace blocks."""

from datetime import timedelta

from podfeed.builder.base import Builder, any_present, build_all, build_optional
from podfeed.builder.common import HrefOnlyImageBuilder, ItunesCategoryBuilder, PersonBuilder
from podfeed.model.common import HrefOnlyImage, ItunesCategory, Person
from podfeed.model.itunes import EpisodeItunes, EpisodeType, PodcastItunes, ShowType


class PodcastItunesBuilder(Builder[PodcastItunes]):
    """Builds the channel-level iTunes block.

    Requires an image, the explicit flag and at least one category.
    """

    def __init__(self) -> None:
        self._image_builder: HrefOnlyImageBuilder | None = None
        self._explicit: bool | None = None
        self._category_builders: list[ItunesCategoryBuilder] = []
        self._subtitle: str | None = None
        self._summary: str | None = None
        self._keywords: str | None = None
        self._author: str | None = None
        self._owner_builder: PersonBuilder | None = None
        self._block: bool = False
        self._complete: bool = False
        self._type: ShowType | None = None
        self._title: str | None = None
        self._new_feed_url: str | None = None

    def image_builder(self, image_builder: HrefOnlyImageBuilder) -> "PodcastItunesBuilder":
        self._image_builder = image_builder
        return self

    def explicit(self, explicit: bool) -> "PodcastItunesBuilder":
        self._explicit = explicit
        return self

    def add_category_builder(
        self, category_builder: ItunesCategoryBuilder
    ) -> "PodcastItunesBuilder":
        self._category_builders.append(category_builder)
        return self

    def subtitle(self, subtitle: str | None) -> "PodcastItunesBuilder":
        self._subtitle = subtitle
        return self

    def summary(self, summary: str | None) -> "PodcastItunesBuilder":
        self._summary = summary
        return self

    def keywords(self, keywords: str | None) -> "PodcastItunesBuilder":
        self._keywords = keywords
        return self

    def author(self, author: str | None) -> "PodcastItunesBuilder":
        self._author = author
        return self

    def owner_builder(self, owner_builder: PersonBuilder | None) -> "PodcastItunesBuilder":
        self._owner_builder = owner_builder
        return self

    def block(self, block: bool) -> "PodcastItunesBuilder":
        self._block = block
        return self

    def complete(self, complete: bool) -> "PodcastItunesBuilder":
        self._complete = complete
        return self

    def type(self, type: ShowType | str | None) -> "PodcastItunesBuilder":
        self._type = ShowType.of(type)
        return self

    def title(self, title: str | None) -> "PodcastItunesBuilder":
        self._title = title
        return self

    def new_feed_url(self, new_feed_url: str | None) -> "PodcastItunesBuilder":
        self._new_feed_url = new_feed_url
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        if self._image_builder is None or not self._image_builder.has_enough_data_to_build:
            return False
        if self._explicit is None:
            return False
        return any(builder.has_enough_data_to_build for builder in self._category_builders)

    def build(self) -> PodcastItunes | None:
        if not self.has_enough_data_to_build:
            return None
        return PodcastItunes(
            image=build_optional(self._image_builder),
            explicit=self._explicit,
            categories=build_all(self._category_builders),
            subtitle=self._subtitle,
            summary=self._summary,
            keywords=self._keywords,
            author=self._author,
            owner=build_optional(self._owner_builder),
            block=self._block,
            complete=self._complete,
            type=self._type,
            title=self._title,
            new_feed_url=self._new_feed_url,
        )

    def from_model(self, model: PodcastItunes | None) -> "PodcastItunesBuilder":
        if model is None:
            return self
        self.image_builder(HrefOnlyImage.builder().from_model(model.image))
        self.explicit(model.explicit)
        for category in model.categories:
            self.add_category_builder(ItunesCategory.builder().from_model(category))
        if model.owner is not None:
            self.owner_builder(Person.builder().from_model(model.owner))
        return (
            self.subtitle(model.subtitle)
            .summary(model.summary)
            .keywords(model.keywords)
            .author(model.author)
            .block(model.block)
            .complete(model.complete)
            .type(model.type)
            .title(model.title)
            .new_feed_url(model.new_feed_url)
        )


class EpisodeItunesBuilder(Builder[EpisodeItunes]):
    """Builds the item-level iTunes block; any single field suffices."""

    def __init__(self) -> None:
        self._title: str | None = None
        self._duration: timedelta | None = None
        self._image_builder: HrefOnlyImageBuilder | None = None
        self._explicit: bool | None = None
        self._block: bool = False
        self._season: int | None = None
        self._episode: int | None = None
        self._episode_type: EpisodeType | None = None
        self._author: str | None = None
        self._subtitle: str | None = None
        self._summary: str | None = None

    def title(self, title: str | None) -> "EpisodeItunesBuilder":
        self._title = title
        return self

    def duration(self, duration: timedelta | None) -> "EpisodeItunesBuilder":
        self._duration = duration
        return self

    def image_builder(self, image_builder: HrefOnlyImageBuilder | None) -> "EpisodeItunesBuilder":
        self._image_builder = image_builder
        return self

    def explicit(self, explicit: bool | None) -> "EpisodeItunesBuilder":
        self._explicit = explicit
        return self

    def block(self, block: bool) -> "EpisodeItunesBuilder":
        self._block = block
        return self

    def season(self, season: int | None) -> "EpisodeItunesBuilder":
        self._season = season
        return self

    def episode(self, episode: int | None) -> "EpisodeItunesBuilder":
        self._episode = episode
        return self

    def episode_type(self, episode_type: EpisodeType | str | None) -> "EpisodeItunesBuilder":
        self._episode_type = EpisodeType.of(episode_type)
        return self

    def author(self, author: str | None) -> "EpisodeItunesBuilder":
        self._author = author
        return self

    def subtitle(self, subtitle: str | None) -> "EpisodeItunesBuilder":
        self._subtitle = subtitle
        return self

    def summary(self, summary: str | None) -> "EpisodeItunesBuilder":
        self._summary = summary
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        image_ready = (
            self._image_builder is not None and self._image_builder.has_enough_data_to_build
        )
        return (
            image_ready
            or self._block
            or any_present(
                self._title,
                self._duration,
                self._explicit,
                self._season,
                self._episode,
                self._episode_type,
                self._author,
                self._subtitle,
                self._summary,
            )
        )

    def build(self) -> EpisodeItunes | None:
        if not self.has_enough_data_to_build:
            return None
        return EpisodeItunes(
            title=self._title,
            duration=self._duration,
            image=build_optional(self._image_builder),
            explicit=self._explicit,
            block=self._block,
            season=self._season,
            episode=self._episode,
            episode_type=self._episode_type,
            author=self._author,
            subtitle=self._subtitle,
            summary=self._summary,
        )

    def from_model(self, model: EpisodeItunes | None) -> "EpisodeItunesBuilder":
        if model is None:
            return self
        if model.image is not None:
            self.image_builder(HrefOnlyImage.builder().from_model(model.image))
        return (
            self.title(model.title)
            .duration(model.duration)
            .explicit(model.explicit)
            .block(model.block)
            .season(model.season)
            .episode(model.episode)
            .episode_type(model.episode_type)
            .author(model.author)
            .subtitle(model.subtitle)
            .summary(model.summary)
        )
