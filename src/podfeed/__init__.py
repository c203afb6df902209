"""podfeed: parse podcast RSS feeds into immutable, validated models.

Example:
    >>> from lxml import etree
    >>> from podfeed import parse_feed
    >>> podcast = parse_feed(etree.parse("feed.xml"))
"""

from podfeed.model import (
    Atom,
    Episode,
    EpisodeItunes,
    EpisodeType,
    ExplicitType,
    Podcast,
    PodcastItunes,
    ShowType,
    TranscriptType,
)
from podfeed.namespace import FeedNamespace
from podfeed.parser import FeedAssembler, NamespaceParser, NamespaceRegistry, parse_feed
from podfeed.utils.errors import NamespaceConflictError, PodfeedError

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "Episode",
    "EpisodeItunes",
    "EpisodeType",
    "ExplicitType",
    "FeedAssembler",
    "FeedNamespace",
    "NamespaceConflictError",
    "NamespaceParser",
    "NamespaceRegistry",
    "Podcast",
    "PodcastItunes",
    "PodfeedError",
    "ShowType",
    "TranscriptType",
    "parse_feed",
    "__version__",
]
