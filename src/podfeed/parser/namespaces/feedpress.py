"""Parser for the Feedpress namespace (``https://feed.press/xmlns``)."""

from lxml import etree

from podfeed.builder.episode import EpisodeBuilder
from podfeed.builder.podcast import PodcastBuilder
from podfeed.dom.extract import local_name, text_or_none
from podfeed.namespace import FeedNamespace
from podfeed.parser.namespace import NamespaceParser

# element local name -> FeedpressBuilder setter
_CHANNEL_ELEMENTS = {
    "newsletterId": "newsletter_id",
    "locale": "locale",
    "podcastId": "podcast_id",
    "cssFile": "css_file",
    "link": "link",
}


class FeedpressParser(NamespaceParser):
    namespace = FeedNamespace.FEEDPRESS

    def parse_channel_element(self, element: etree._Element, builder: PodcastBuilder) -> None:
        setter = _CHANNEL_ELEMENTS.get(local_name(element) or "")
        if setter is None:
            return
        value = text_or_none(element)
        if value is None:
            self.drop(element, "empty text")
            return
        getattr(builder.feedpress, setter)(value)

    def parse_item_element(self, element: etree._Element, builder: EpisodeBuilder) -> None:
        # Feedpress defines no item-level elements
        pass
