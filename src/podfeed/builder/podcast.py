"""Builder for the Podcast root model."""

from datetime import datetime

from podfeed.builder.atom import AtomBuilder
from podfeed.builder.base import Builder, all_present, build_all, build_optional
from podfeed.builder.common import RssCategoryBuilder, RssImageBuilder
from podfeed.builder.episode import EpisodeBuilder
from podfeed.builder.feedpress import FeedpressBuilder
from podfeed.builder.googleplay import PodcastGoogleplayBuilder
from podfeed.builder.itunes import PodcastItunesBuilder
from podfeed.builder.podcastindex import PodcastPodcastindexBuilder
from podfeed.model.common import RssCategory, RssImage
from podfeed.model.episode import Episode
from podfeed.model.podcast import Podcast


class PodcastBuilder(Builder[Podcast]):
    """Builds Podcast instances from RSS ``<channel>`` data.

    Requires title, link, description and language. Episode builders are
    kept in document order; episodes that fail to build are left out of
    the result without affecting the podcast itself.
    """

    def __init__(self) -> None:
        self._title: str | None = None
        self._link: str | None = None
        self._description: str | None = None
        self._language: str | None = None
        self._pub_date: datetime | None = None
        self._last_build_date: datetime | None = None
        self._generator: str | None = None
        self._copyright: str | None = None
        self._docs: str | None = None
        self._managing_editor: str | None = None
        self._web_master: str | None = None
        self._ttl: int | None = None
        self._image_builder: RssImageBuilder | None = None
        self._category_builders: list[RssCategoryBuilder] = []
        self._episode_builders: list[EpisodeBuilder] = []

        self._itunes: PodcastItunesBuilder | None = None
        self._atom: AtomBuilder | None = None
        self._googleplay: PodcastGoogleplayBuilder | None = None
        self._podcastindex: PodcastPodcastindexBuilder | None = None
        self._feedpress: FeedpressBuilder | None = None

    def title(self, title: str) -> "PodcastBuilder":
        self._title = title
        return self

    def link(self, link: str) -> "PodcastBuilder":
        self._link = link
        return self

    def description(self, description: str) -> "PodcastBuilder":
        self._description = description
        return self

    def language(self, language: str) -> "PodcastBuilder":
        self._language = language
        return self

    def pub_date(self, pub_date: datetime | None) -> "PodcastBuilder":
        self._pub_date = pub_date
        return self

    def last_build_date(self, last_build_date: datetime | None) -> "PodcastBuilder":
        self._last_build_date = last_build_date
        return self

    def generator(self, generator: str | None) -> "PodcastBuilder":
        self._generator = generator
        return self

    def copyright(self, copyright: str | None) -> "PodcastBuilder":
        self._copyright = copyright
        return self

    def docs(self, docs: str | None) -> "PodcastBuilder":
        self._docs = docs
        return self

    def managing_editor(self, managing_editor: str | None) -> "PodcastBuilder":
        self._managing_editor = managing_editor
        return self

    def web_master(self, web_master: str | None) -> "PodcastBuilder":
        self._web_master = web_master
        return self

    def ttl(self, ttl: int | None) -> "PodcastBuilder":
        self._ttl = ttl
        return self

    def image_builder(self, image_builder: RssImageBuilder | None) -> "PodcastBuilder":
        self._image_builder = image_builder
        return self

    def add_category_builder(self, category_builder: RssCategoryBuilder) -> "PodcastBuilder":
        self._category_builders.append(category_builder)
        return self

    def add_episode_builder(self, episode_builder: EpisodeBuilder) -> "PodcastBuilder":
        self._episode_builders.append(episode_builder)
        return self

    @property
    def episode_builders(self) -> list[EpisodeBuilder]:
        """Episode builders added so far, in document order."""
        return list(self._episode_builders)

    @property
    def itunes(self) -> PodcastItunesBuilder:
        if self._itunes is None:
            self._itunes = PodcastItunesBuilder()
        return self._itunes

    @property
    def atom(self) -> AtomBuilder:
        if self._atom is None:
            self._atom = AtomBuilder()
        return self._atom

    @property
    def googleplay(self) -> PodcastGoogleplayBuilder:
        if self._googleplay is None:
            self._googleplay = PodcastGoogleplayBuilder()
        return self._googleplay

    @property
    def podcastindex(self) -> PodcastPodcastindexBuilder:
        if self._podcastindex is None:
            self._podcastindex = PodcastPodcastindexBuilder()
        return self._podcastindex

    @property
    def feedpress(self) -> FeedpressBuilder:
        if self._feedpress is None:
            self._feedpress = FeedpressBuilder()
        return self._feedpress

    @property
    def has_enough_data_to_build(self) -> bool:
        return all_present(self._title, self._link, self._description, self._language)

    def build(self) -> Podcast | None:
        if not self.has_enough_data_to_build:
            return None
        return Podcast(
            title=self._title,
            link=self._link,
            description=self._description,
            language=self._language,
            pub_date=self._pub_date,
            last_build_date=self._last_build_date,
            generator=self._generator,
            copyright=self._copyright,
            docs=self._docs,
            managing_editor=self._managing_editor,
            web_master=self._web_master,
            ttl=self._ttl,
            image=build_optional(self._image_builder),
            categories=build_all(self._category_builders),
            episodes=build_all(self._episode_builders),
            itunes=build_optional(self._itunes),
            atom=build_optional(self._atom),
            googleplay=build_optional(self._googleplay),
            podcastindex=build_optional(self._podcastindex),
            feedpress=build_optional(self._feedpress),
        )

    def from_model(self, model: Podcast | None) -> "PodcastBuilder":
        if model is None:
            return self
        self.title(model.title)
        self.link(model.link)
        self.description(model.description)
        self.language(model.language)
        if model.image is not None:
            self.image_builder(RssImage.builder().from_model(model.image))
        for category in model.categories:
            self.add_category_builder(RssCategory.builder().from_model(category))
        for episode in model.episodes:
            self.add_episode_builder(Episode.builder().from_model(episode))

        self.itunes.from_model(model.itunes)
        self.atom.from_model(model.atom)
        self.googleplay.from_model(model.googleplay)
        self.podcastindex.from_model(model.podcastindex)
        self.feedpress.from_model(model.feedpress)

        return (
            self.pub_date(model.pub_date)
            .last_build_date(model.last_build_date)
            .generator(model.generator)
            .copyright(model.copyright)
            .docs(model.docs)
            .managing_editor(model.managing_editor)
            .web_master(model.web_master)
            .ttl(model.ttl)
        )
