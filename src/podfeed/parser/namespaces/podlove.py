"""Parser for Podlove Simple Chapters.

The namespace URI is ``http://podlove.org/simple-chapters``. Chapters
appear as ``<psc:chapter>`` children of a single ``<psc:chapters>``
element on each item.
"""

from lxml import etree

from podfeed.builder.episode import EpisodeBuilder
from podfeed.builder.podcast import PodcastBuilder
from podfeed.builder.podlove import SimpleChapterBuilder
from podfeed.dom.extract import attribute_value, iter_named_children, local_name
from podfeed.model.podlove import SimpleChapter
from podfeed.namespace import FeedNamespace
from podfeed.parser.namespace import NamespaceParser


class PodloveSimpleChapterParser(NamespaceParser):
    namespace = FeedNamespace.PODLOVE_SIMPLE_CHAPTER

    def parse_channel_element(self, element: etree._Element, builder: PodcastBuilder) -> None:
        pass

    def parse_item_element(self, element: etree._Element, builder: EpisodeBuilder) -> None:
        if local_name(element) != "chapters":
            return

        for chapter_element in iter_named_children(element, "chapter", self.namespace):
            chapter = self._to_chapter_builder(chapter_element)
            if chapter is None:
                self.drop(chapter_element, "start or title missing")
                continue
            builder.podlove.add_chapter_builder(chapter)

    def _to_chapter_builder(self, element: etree._Element) -> SimpleChapterBuilder | None:
        start = attribute_value(element, "start")
        title = attribute_value(element, "title")
        if start is None or title is None:
            return None
        return (
            SimpleChapter.builder()
            .start(start)
            .title(title)
            .href(attribute_value(element, "href"))
            .image(attribute_value(element, "image"))
        )
