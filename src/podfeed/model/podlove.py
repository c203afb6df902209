"""Models for Podlove Simple Chapters."""

from typing import TYPE_CHECKING

from podfeed.model.common import FeedModel

if TYPE_CHECKING:
    from podfeed.builder.podlove import EpisodePodloveBuilder, SimpleChapterBuilder


class SimpleChapter(FeedModel):
    """A single ``<psc:chapter>``.

    Attributes:
        start: Normal play time of the chapter start, kept verbatim (e.g. "00:01:30.500")
        title: Chapter title
        href: Optional link for the chapter
        image: Optional image URL for the chapter
    """

    start: str
    title: str
    href: str | None = None
    image: str | None = None

    @classmethod
    def builder(cls) -> "SimpleChapterBuilder":
        """Return a fresh builder for SimpleChapter instances."""
        from podfeed.builder.podlove import SimpleChapterBuilder

        return SimpleChapterBuilder()


class EpisodePodlove(FeedModel):
    """Chapter marks of an episode, in document order."""

    chapters: tuple[SimpleChapter, ...]

    @classmethod
    def builder(cls) -> "EpisodePodloveBuilder":
        """Return a fresh builder for EpisodePodlove instances."""
        from podfeed.builder.podlove import EpisodePodloveBuilder

        return EpisodePodloveBuilder()
