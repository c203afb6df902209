"""Parser for the Google Play podcast namespace.

The namespace URI is ``http://www.google.com/schemas/play-podcasts/1.0``.
"""

from lxml import etree

from podfeed.builder.episode import EpisodeBuilder
from podfeed.builder.podcast import PodcastBuilder
from podfeed.dom.extract import (
    local_name,
    parse_bool,
    text_as_bool,
    text_or_none,
    to_href_only_image_builder,
    to_itunes_category_builder,
)
from podfeed.model.common import HrefOnlyImage, ItunesCategory
from podfeed.model.googleplay import ExplicitType
from podfeed.namespace import FeedNamespace
from podfeed.parser.namespace import NamespaceParser


def parse_explicit_type(value: str | None) -> ExplicitType | None:
    """Interpret ``yes``/``no``/``clean``, also accepting ``true``/``false``."""
    explicit_type = ExplicitType.of(value)
    if explicit_type is not None:
        return explicit_type
    flag = parse_bool(value)
    if flag is None:
        return None
    return ExplicitType.YES if flag else ExplicitType.NO


class GoogleplayParser(NamespaceParser):
    """Populates the Google Play blocks of podcasts and episodes."""

    namespace = FeedNamespace.GOOGLEPLAY

    def parse_channel_element(self, element: etree._Element, builder: PodcastBuilder) -> None:
        name = local_name(element)

        if name in ("author", "owner", "description", "new-feed-url"):
            value = text_or_none(element)
            if value is None:
                self.drop(element, "empty text")
                return
            if name == "author":
                builder.googleplay.author(value)
            elif name == "owner":
                builder.googleplay.owner(value)
            elif name == "description":
                builder.googleplay.description(value)
            else:
                builder.googleplay.new_feed_url(value)
        elif name == "category":
            category = to_itunes_category_builder(element, ItunesCategory.builder(), self.namespace)
            if not category.has_enough_data_to_build:
                self.drop(element, "missing text attribute")
                return
            builder.googleplay.add_category_builder(category)
        elif name == "explicit":
            explicit = parse_explicit_type(text_or_none(element))
            if explicit is None:
                self.drop(element, "not an explicit flag")
                return
            builder.googleplay.explicit(explicit)
        elif name == "block":
            block = text_as_bool(element)
            if block is None:
                self.drop(element, "not a boolean")
                return
            builder.googleplay.block(block)
        elif name == "image":
            image = to_href_only_image_builder(element, HrefOnlyImage.builder())
            if not image.has_enough_data_to_build:
                self.drop(element, "missing href")
                return
            builder.googleplay.image_builder(image)

    def parse_item_element(self, element: etree._Element, builder: EpisodeBuilder) -> None:
        name = local_name(element)

        if name == "description":
            description = text_or_none(element)
            if description is None:
                self.drop(element, "empty text")
                return
            builder.googleplay.description(description)
        elif name == "explicit":
            explicit = parse_explicit_type(text_or_none(element))
            if explicit is None:
                self.drop(element, "not an explicit flag")
                return
            builder.googleplay.explicit(explicit)
        elif name == "block":
            block = text_as_bool(element)
            if block is None:
                self.drop(element, "not a boolean")
                return
            builder.googleplay.block(block)
        elif name == "image":
            image = to_href_only_image_builder(element, HrefOnlyImage.builder())
            if not image.has_enough_data_to_build:
                self.drop(element, "missing href")
                return
            builder.googleplay.image_builder(image)
