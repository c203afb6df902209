"""Parser for the iTunes podcast namespace.

The namespace URI is ``http://www.itunes.com/dtds/podcast-1.0.dtd``.
"""

from lxml import etree

from podfeed.builder.episode import EpisodeBuilder
from podfeed.builder.podcast import PodcastBuilder
from podfeed.dom.extract import (
    local_name,
    parse_bool,
    text_as_bool,
    text_as_duration,
    text_as_int,
    text_or_none,
    to_href_only_image_builder,
    to_itunes_category_builder,
    to_person_builder,
)
from podfeed.model.common import HrefOnlyImage, ItunesCategory, Person
from podfeed.model.itunes import EpisodeType, ShowType
from podfeed.namespace import FeedNamespace
from podfeed.parser.namespace import NamespaceParser

_TEXT_CHANNEL_ELEMENTS = {
    "author": "author",
    "keywords": "keywords",
    "new-feed-url": "new_feed_url",
    "subtitle": "subtitle",
    "summary": "summary",
    "title": "title",
}

_TEXT_ITEM_ELEMENTS = {
    "author": "author",
    "subtitle": "subtitle",
    "summary": "summary",
    "title": "title",
}


def parse_explicit(value: str | None) -> bool | None:
    """Interpret an explicit flag; ``clean`` means not explicit."""
    if value is not None and value.strip().lower() == "clean":
        return False
    return parse_bool(value)


class ItunesParser(NamespaceParser):
    """Populates the iTunes blocks of podcasts and episodes."""

    namespace = FeedNamespace.ITUNES

    def parse_channel_element(self, element: etree._Element, builder: PodcastBuilder) -> None:
        name = local_name(element)

        if name in _TEXT_CHANNEL_ELEMENTS:
            value = text_or_none(element)
            if value is None:
                self.drop(element, "empty text")
                return
            getattr(builder.itunes, _TEXT_CHANNEL_ELEMENTS[name])(value)
        elif name == "block":
            block = text_as_bool(element)
            if block is None:
                self.drop(element, "not a boolean")
                return
            builder.itunes.block(block)
        elif name == "complete":
            complete = text_as_bool(element)
            if complete is None:
                self.drop(element, "not a boolean")
                return
            builder.itunes.complete(complete)
        elif name == "explicit":
            explicit = parse_explicit(text_or_none(element))
            if explicit is None:
                self.drop(element, "not an explicit flag")
                return
            builder.itunes.explicit(explicit)
        elif name == "category":
            category = to_itunes_category_builder(element, ItunesCategory.builder(), self.namespace)
            if not category.has_enough_data_to_build:
                self.drop(element, "missing text attribute")
                return
            builder.itunes.add_category_builder(category)
        elif name == "image":
            image = to_href_only_image_builder(element, HrefOnlyImage.builder())
            if not image.has_enough_data_to_build:
                self.drop(element, "missing href")
                return
            builder.itunes.image_builder(image)
        elif name == "owner":
            owner = to_person_builder(element, Person.builder(), self.namespace)
            if not owner.has_enough_data_to_build:
                self.drop(element, "missing name")
                return
            builder.itunes.owner_builder(owner)
        elif name == "type":
            show_type = ShowType.of(text_or_none(element))
            if show_type is None:
                self.drop(element, "unknown show type")
                return
            builder.itunes.type(show_type)

    def parse_item_element(self, element: etree._Element, builder: EpisodeBuilder) -> None:
        name = local_name(element)

        if name in _TEXT_ITEM_ELEMENTS:
            value = text_or_none(element)
            if value is None:
                self.drop(element, "empty text")
                return
            getattr(builder.itunes, _TEXT_ITEM_ELEMENTS[name])(value)
        elif name == "duration":
            duration = text_as_duration(element)
            if duration is None:
                self.drop(element, "not a duration")
                return
            builder.itunes.duration(duration)
        elif name == "block":
            block = text_as_bool(element)
            if block is None:
                self.drop(element, "not a boolean")
                return
            builder.itunes.block(block)
        elif name == "explicit":
            explicit = parse_explicit(text_or_none(element))
            if explicit is None:
                self.drop(element, "not an explicit flag")
                return
            builder.itunes.explicit(explicit)
        elif name == "image":
            image = to_href_only_image_builder(element, HrefOnlyImage.builder())
            if not image.has_enough_data_to_build:
                self.drop(element, "missing href")
                return
            builder.itunes.image_builder(image)
        elif name in ("season", "episode"):
            number = text_as_int(element)
            if number is None:
                self.drop(element, "not an integer")
                return
            getattr(builder.itunes, name)(number)
        elif name == "episodeType":
            episode_type = EpisodeType.of(text_or_none(element))
            if episode_type is None:
                self.drop(element, "unknown episode type")
                return
            builder.itunes.episode_type(episode_type)
