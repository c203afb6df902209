"""Parser for the RSS content module (``http://purl.org/rss/1.0/modules/content/``)."""

from lxml import etree

from podfeed.builder.episode import EpisodeBuilder
from podfeed.builder.podcast import PodcastBuilder
from podfeed.dom.extract import local_name, text_or_none
from podfeed.namespace import FeedNamespace
from podfeed.parser.namespace import NamespaceParser


class ContentParser(NamespaceParser):
    """Reads ``<content:encoded>`` from items."""

    namespace = FeedNamespace.CONTENT

    def parse_channel_element(self, element: etree._Element, builder: PodcastBuilder) -> None:
        pass

    def parse_item_element(self, element: etree._Element, builder: EpisodeBuilder) -> None:
        if local_name(element) != "encoded":
            return
        encoded = text_or_none(element)
        if encoded is None:
            self.drop(element, "empty text")
            return
        builder.content.encoded(encoded)
