"""Assemble a Podcast from a parsed RSS document.

The assembler reads core RSS elements itself and hands every namespaced
child of ``<channel>`` and ``<item>`` to the parser registered for that
namespace. Elements in unknown namespaces are skipped. Core elements are
those without a namespace, or in the document's default namespace when
that is not a known extension namespace.
"""

import logging

from lxml import etree

from podfeed.builder.episode import EnclosureBuilder, EpisodeBuilder, GuidBuilder
from podfeed.builder.podcast import PodcastBuilder
from podfeed.dom.extract import (
    NO_NAMESPACE,
    attribute_value,
    child_elements,
    find_child,
    is_element,
    local_name,
    namespace_uri,
    parse_bool,
    parse_int,
    text_as_datetime,
    text_as_int,
    text_or_none,
    to_rss_category_builder,
    to_rss_image_builder,
)
from podfeed.model.common import RssCategory, RssImage
from podfeed.model.episode import Enclosure, Episode, Guid
from podfeed.model.podcast import Podcast
from podfeed.namespace import FeedNamespace
from podfeed.parser.registry import NamespaceRegistry, default_registry

logger = logging.getLogger(__name__)

# Core element local name -> builder setter taking the element's text
_CHANNEL_TEXT_ELEMENTS = {
    "title": "title",
    "link": "link",
    "description": "description",
    "language": "language",
    "generator": "generator",
    "copyright": "copyright",
    "docs": "docs",
    "managingEditor": "managing_editor",
    "webMaster": "web_master",
}

_ITEM_TEXT_ELEMENTS = {
    "title": "title",
    "link": "link",
    "description": "description",
    "author": "author",
    "comments": "comments",
    "source": "source",
}

FeedInput = etree._ElementTree | etree._Element


def _drop(element: etree._Element, reason: str) -> None:
    logger.debug("Dropping <%s> element: %s", local_name(element), reason)


def _core_namespace(root: etree._Element) -> str | None:
    """Default namespace of the document, unless it is a known extension namespace."""
    default = root.nsmap.get(None)
    if default is None or FeedNamespace.of_uri(default) is not None:
        return None
    return default


def _is_core(element: etree._Element, core_uri: str | None) -> bool:
    uri = namespace_uri(element)
    return uri is None or uri == core_uri


def _is_core_named(element: etree._Element, name: str, core_uri: str | None) -> bool:
    return local_name(element) == name and _is_core(element, core_uri)


class FeedAssembler:
    """Turns an lxml RSS tree into a Podcast model.

    Example:
        >>> tree = etree.parse("feed.xml")
        >>> podcast = FeedAssembler().parse(tree)
        >>> podcast.title if podcast else None
        'My Show'
    """

    def __init__(self, registry: NamespaceRegistry | None = None) -> None:
        """Initialize the assembler.

        Args:
            registry: Namespace parsers to consult; defaults to all built-ins.
        """
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> NamespaceRegistry:
        return self._registry

    def parse(self, tree: FeedInput) -> Podcast | None:
        """Parse an RSS document into a Podcast.

        Args:
            tree: A parsed document, its ``<rss>`` root or its ``<channel>`` element.

        Returns:
            The podcast, or None when the document is not RSS or the
            channel lacks title, link, description or language
        """
        root = tree.getroot() if isinstance(tree, etree._ElementTree) else tree
        if root is None or not is_element(root):
            logger.info("Document has no RSS <channel> element")
            return None

        core_uri = _core_namespace(root)
        channel = self._find_channel(root, core_uri)
        if channel is None:
            logger.info("Document has no RSS <channel> element")
            return None

        builder = Podcast.builder()
        for element in child_elements(channel):
            if _is_core(element, core_uri):
                self._parse_core_channel_element(element, builder, core_uri)
                continue
            parser = self._registry.parser_for(namespace_uri(element))
            if parser is not None:
                parser.parse_channel_element(element, builder)

        podcast = builder.build()
        if podcast is None:
            logger.info("Channel lacks one of title, link, description or language; no podcast")
            return None

        logger.debug("Parsed podcast %r with %d episode(s)", podcast.title, len(podcast.episodes))
        return podcast

    def _find_channel(self, root: etree._Element, core_uri: str | None) -> etree._Element | None:
        if _is_core_named(root, "channel", core_uri):
            return root
        if not _is_core_named(root, "rss", core_uri):
            return None
        for child in child_elements(root):
            if _is_core_named(child, "channel", core_uri):
                return child
        return None

    def _parse_core_channel_element(
        self, element: etree._Element, builder: PodcastBuilder, core_uri: str | None
    ) -> None:
        name = local_name(element)

        if name in _CHANNEL_TEXT_ELEMENTS:
            value = text_or_none(element)
            if value is not None:
                getattr(builder, _CHANNEL_TEXT_ELEMENTS[name])(value)
        elif name == "pubDate":
            builder.pub_date(text_as_datetime(element))
        elif name == "lastBuildDate":
            builder.last_build_date(text_as_datetime(element))
        elif name == "ttl":
            builder.ttl(text_as_int(element))
        elif name == "image":
            image = to_rss_image_builder(element, RssImage.builder(), core_uri or NO_NAMESPACE)
            if not image.has_enough_data_to_build:
                _drop(element, "url, title or link missing")
                return
            builder.image_builder(image)
        elif name == "category":
            category = to_rss_category_builder(element, RssCategory.builder())
            if category is None:
                _drop(element, "empty text")
                return
            builder.add_category_builder(category)
        elif name == "item":
            episode = self._parse_item(element, core_uri)
            if not episode.has_enough_data_to_build:
                logger.debug(
                    "Dropping <item> %r: title or valid enclosure missing",
                    text_or_none(find_child(element, "title", core_uri or NO_NAMESPACE)),
                )
                return
            builder.add_episode_builder(episode)

    def _parse_item(self, item: etree._Element, core_uri: str | None) -> EpisodeBuilder:
        builder = Episode.builder()
        for element in child_elements(item):
            if _is_core(element, core_uri):
                self._parse_core_item_element(element, builder)
                continue
            parser = self._registry.parser_for(namespace_uri(element))
            if parser is not None:
                parser.parse_item_element(element, builder)
        return builder

    def _parse_core_item_element(self, element: etree._Element, builder: EpisodeBuilder) -> None:
        name = local_name(element)

        if name in _ITEM_TEXT_ELEMENTS:
            value = text_or_none(element)
            if value is not None:
                getattr(builder, _ITEM_TEXT_ELEMENTS[name])(value)
        elif name == "pubDate":
            builder.pub_date(text_as_datetime(element))
        elif name == "category":
            category = to_rss_category_builder(element, RssCategory.builder())
            if category is None:
                _drop(element, "empty text")
                return
            builder.add_category_builder(category)
        elif name == "enclosure":
            enclosure = self._to_enclosure_builder(element)
            if enclosure is None:
                _drop(element, "url, length or type missing")
                return
            builder.enclosure_builder(enclosure)
        elif name == "guid":
            guid = self._to_guid_builder(element)
            if guid is None:
                _drop(element, "empty text")
                return
            builder.guid_builder(guid)

    def _to_enclosure_builder(self, element: etree._Element) -> EnclosureBuilder | None:
        url = attribute_value(element, "url")
        length = parse_int(attribute_value(element, "length"))
        media_type = attribute_value(element, "type")
        if url is None or length is None or media_type is None:
            return None
        enclosure = Enclosure.builder().url(url).length(length).type(media_type)
        if not enclosure.has_enough_data_to_build:
            return None
        return enclosure

    def _to_guid_builder(self, element: etree._Element) -> GuidBuilder | None:
        guid = text_or_none(element)
        if guid is None:
            return None
        is_permalink = parse_bool(attribute_value(element, "isPermaLink"))
        return Guid.builder().guid(guid).is_permalink(is_permalink)


def parse_feed(tree: FeedInput, registry: NamespaceRegistry | None = None) -> Podcast | None:
    """Parse an RSS document with ``registry`` (all built-in parsers by default)."""
    return FeedAssembler(registry).parse(tree)
