"""Base class for namespace-specific element parsers.

Each parser owns exactly one XML namespace and a closed vocabulary of
element names within it. Parsers are stateless: all per-document state
lives in the builders handed to them, so one instance can serve any
number of concurrent parses.
"""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from lxml import etree

from podfeed.builder.episode import EpisodeBuilder
from podfeed.builder.podcast import PodcastBuilder
from podfeed.dom.extract import local_name, namespace_uri
from podfeed.namespace import FeedNamespace

logger = logging.getLogger(__name__)


class NamespaceParser(ABC):
    """Interprets channel and item elements of a single namespace.

    Subclasses set ``namespace`` and implement the two entry points.
    Unknown element names are ignored. An element whose required parts
    are missing or malformed is dropped whole: nothing from it reaches
    a builder.

    Example:
        >>> class ExampleParser(NamespaceParser):
        ...     namespace = FeedNamespace.FEEDPRESS
        ...
        ...     def parse_channel_element(self, element, builder):
        ...         if local_name(element) == "link":
        ...             builder.feedpress.link(text_or_none(element))
        ...
        ...     def parse_item_element(self, element, builder):
        ...         pass
    """

    namespace: ClassVar[FeedNamespace]

    def accepts(self, element: etree._Element) -> bool:
        """Whether ``element`` belongs to this parser's namespace."""
        return self.namespace.matches(namespace_uri(element))

    @abstractmethod
    def parse_channel_element(self, element: etree._Element, builder: PodcastBuilder) -> None:
        """Apply a direct child of ``<channel>`` to the podcast builder."""

    @abstractmethod
    def parse_item_element(self, element: etree._Element, builder: EpisodeBuilder) -> None:
        """Apply a direct child of ``<item>`` to the episode builder."""

    def drop(self, element: etree._Element, reason: str) -> None:
        """Record that ``element`` was discarded."""
        logger.debug(
            "Dropping <%s:%s> element: %s",
            self.namespace.value,
            local_name(element),
            reason,
        )
