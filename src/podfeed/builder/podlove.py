"""Builders for Podlove Simple Chapters."""

from podfeed.builder.base import Builder, all_present, build_all
from podfeed.model.podlove import EpisodePodlove, SimpleChapter


class SimpleChapterBuilder(Builder[SimpleChapter]):
    """Builds a single chapter; requires start and title."""

    def __init__(self) -> None:
        self._start: str | None = None
        self._title: str | None = None
        self._href: str | None = None
        self._image: str | None = None

    def start(self, start: str) -> "SimpleChapterBuilder":
        self._start = start
        return self

    def title(self, title: str) -> "SimpleChapterBuilder":
        self._title = title
        return self

    def href(self, href: str | None) -> "SimpleChapterBuilder":
        self._href = href
        return self

    def image(self, image: str | None) -> "SimpleChapterBuilder":
        self._image = image
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return all_present(self._start, self._title)

    def build(self) -> SimpleChapter | None:
        if not self.has_enough_data_to_build:
            return None
        return SimpleChapter(
            start=self._start, title=self._title, href=self._href, image=self._image
        )

    def from_model(self, model: SimpleChapter | None) -> "SimpleChapterBuilder":
        if model is None:
            return self
        return self.start(model.start).title(model.title).href(model.href).image(model.image)


class EpisodePodloveBuilder(Builder[EpisodePodlove]):
    """Collects chapter builders; ready once any chapter builds."""

    def __init__(self) -> None:
        self._chapter_builders: list[SimpleChapterBuilder] = []

    def add_chapter_builder(self, chapter_builder: SimpleChapterBuilder) -> "EpisodePodloveBuilder":
        self._chapter_builders.append(chapter_builder)
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return any(builder.has_enough_data_to_build for builder in self._chapter_builders)

    def build(self) -> EpisodePodlove | None:
        if not self.has_enough_data_to_build:
            return None
        return EpisodePodlove(chapters=build_all(self._chapter_builders))

    def from_model(self, model: EpisodePodlove | None) -> "EpisodePodloveBuilder":
        if model is None:
            return self
        for chapter in model.chapters:
            self.add_chapter_builder(SimpleChapter.builder().from_model(chapter))
        return self
