"""Builders for episodes and their RSS item value types."""

from datetime import datetime

from podfeed.builder.atom import AtomBuilder
from podfeed.builder.base import Builder, all_present, build_all, build_optional
from podfeed.builder.common import RssCategoryBuilder
from podfeed.builder.content import ContentBuilder
from podfeed.builder.googleplay import EpisodeGoogleplayBuilder
from podfeed.builder.itunes import EpisodeItunesBuilder
from podfeed.builder.podcastindex import EpisodePodcastindexBuilder
from podfeed.builder.podlove import EpisodePodloveBuilder
from podfeed.model.common import RssCategory
from podfeed.model.episode import Enclosure, Episode, Guid


class EnclosureBuilder(Builder[Enclosure]):
    """Builds enclosures; url, a non-negative length and type are required."""

    def __init__(self) -> None:
        self._url: str | None = None
        self._length: int | None = None
        self._type: str | None = None

    def url(self, url: str) -> "EnclosureBuilder":
        self._url = url
        return self

    def length(self, length: int) -> "EnclosureBuilder":
        self._length = length
        return self

    def type(self, type: str) -> "EnclosureBuilder":
        self._type = type
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        if not all_present(self._url, self._length, self._type):
            return False
        return self._length >= 0

    def build(self) -> Enclosure | None:
        if not self.has_enough_data_to_build:
            return None
        return Enclosure(url=self._url, length=self._length, type=self._type)

    def from_model(self, model: Enclosure | None) -> "EnclosureBuilder":
        if model is None:
            return self
        return self.url(model.url).length(model.length).type(model.type)


class GuidBuilder(Builder[Guid]):
    """Builds item GUIDs; requires the identifier text."""

    def __init__(self) -> None:
        self._guid: str | None = None
        self._is_permalink: bool | None = None

    def guid(self, guid: str) -> "GuidBuilder":
        self._guid = guid
        return self

    def is_permalink(self, is_permalink: bool | None) -> "GuidBuilder":
        self._is_permalink = is_permalink
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return self._guid is not None

    def build(self) -> Guid | None:
        if not self.has_enough_data_to_build:
            return None
        return Guid(guid=self._guid, is_permalink=self._is_permalink)

    def from_model(self, model: Guid | None) -> "GuidBuilder":
        if model is None:
            return self
        return self.guid(model.guid).is_permalink(model.is_permalink)


class EpisodeBuilder(Builder[Episode]):
    """Builds episodes from RSS ``<item>`` data.

    Requires a title and a buildable enclosure. Extension sub-builders
    (``itunes``, ``atom``, ...) are created on first access; ``build()``
    attaches only the ones that are ready.
    """

    def __init__(self) -> None:
        self._title: str | None = None
        self._enclosure_builder: EnclosureBuilder | None = None
        self._link: str | None = None
        self._description: str | None = None
        self._author: str | None = None
        self._category_builders: list[RssCategoryBuilder] = []
        self._comments: str | None = None
        self._guid_builder: GuidBuilder | None = None
        self._pub_date: datetime | None = None
        self._source: str | None = None

        self._content: ContentBuilder | None = None
        self._itunes: EpisodeItunesBuilder | None = None
        self._atom: AtomBuilder | None = None
        self._googleplay: EpisodeGoogleplayBuilder | None = None
        self._podcastindex: EpisodePodcastindexBuilder | None = None
        self._podlove: EpisodePodloveBuilder | None = None

    def title(self, title: str) -> "EpisodeBuilder":
        self._title = title
        return self

    def enclosure_builder(self, enclosure_builder: EnclosureBuilder) -> "EpisodeBuilder":
        self._enclosure_builder = enclosure_builder
        return self

    def link(self, link: str | None) -> "EpisodeBuilder":
        self._link = link
        return self

    def description(self, description: str | None) -> "EpisodeBuilder":
        self._description = description
        return self

    def author(self, author: str | None) -> "EpisodeBuilder":
        self._author = author
        return self

    def add_category_builder(self, category_builder: RssCategoryBuilder) -> "EpisodeBuilder":
        self._category_builders.append(category_builder)
        return self

    def comments(self, comments: str | None) -> "EpisodeBuilder":
        self._comments = comments
        return self

    def guid_builder(self, guid_builder: GuidBuilder | None) -> "EpisodeBuilder":
        self._guid_builder = guid_builder
        return self

    def pub_date(self, pub_date: datetime | None) -> "EpisodeBuilder":
        self._pub_date = pub_date
        return self

    def source(self, source: str | None) -> "EpisodeBuilder":
        self._source = source
        return self

    @property
    def content(self) -> ContentBuilder:
        if self._content is None:
            self._content = ContentBuilder()
        return self._content

    @property
    def itunes(self) -> EpisodeItunesBuilder:
        if self._itunes is None:
            self._itunes = EpisodeItunesBuilder()
        return self._itunes

    @property
    def atom(self) -> AtomBuilder:
        if self._atom is None:
            self._atom = AtomBuilder()
        return self._atom

    @property
    def googleplay(self) -> EpisodeGoogleplayBuilder:
        if self._googleplay is None:
            self._googleplay = EpisodeGoogleplayBuilder()
        return self._googleplay

    @property
    def podcastindex(self) -> EpisodePodcastindexBuilder:
        if self._podcastindex is None:
            self._podcastindex = EpisodePodcastindexBuilder()
        return self._podcastindex

    @property
    def podlove(self) -> EpisodePodloveBuilder:
        if self._podlove is None:
            self._podlove = EpisodePodloveBuilder()
        return self._podlove

    @property
    def has_enough_data_to_build(self) -> bool:
        if self._title is None or self._enclosure_builder is None:
            return False
        return self._enclosure_builder.has_enough_data_to_build

    def build(self) -> Episode | None:
        if not self.has_enough_data_to_build:
            return None
        return Episode(
            title=self._title,
            enclosure=build_optional(self._enclosure_builder),
            link=self._link,
            description=self._description,
            author=self._author,
            categories=build_all(self._category_builders),
            comments=self._comments,
            guid=build_optional(self._guid_builder),
            pub_date=self._pub_date,
            source=self._source,
            content=build_optional(self._content),
            itunes=build_optional(self._itunes),
            atom=build_optional(self._atom),
            googleplay=build_optional(self._googleplay),
            podcastindex=build_optional(self._podcastindex),
            podlove=build_optional(self._podlove),
        )

    def from_model(self, model: Episode | None) -> "EpisodeBuilder":
        if model is None:
            return self
        self.title(model.title)
        self.enclosure_builder(Enclosure.builder().from_model(model.enclosure))
        for category in model.categories:
            self.add_category_builder(RssCategory.builder().from_model(category))
        if model.guid is not None:
            self.guid_builder(Guid.builder().from_model(model.guid))

        self.content.from_model(model.content)
        self.itunes.from_model(model.itunes)
        self.atom.from_model(model.atom)
        self.googleplay.from_model(model.googleplay)
        self.podcastindex.from_model(model.podcastindex)
        self.podlove.from_model(model.podlove)

        return (
            self.link(model.link)
            .description(model.description)
            .author(model.author)
            .comments(model.comments)
            .pub_date(model.pub_date)
            .source(model.source)
        )
