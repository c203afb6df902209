"""Built-in namespace parsers."""

from podfeed.parser.namespaces.atom import AtomParser
from podfeed.parser.namespaces.content import ContentParser
from podfeed.parser.namespaces.feedpress import FeedpressParser
from podfeed.parser.namespaces.googleplay import GoogleplayParser
from podfeed.parser.namespaces.itunes import ItunesParser
from podfeed.parser.namespaces.podcastindex import PodcastindexParser
from podfeed.parser.namespaces.podlove import PodloveSimpleChapterParser

BUILTIN_PARSERS = (
    AtomParser,
    ContentParser,
    FeedpressParser,
    GoogleplayParser,
    ItunesParser,
    PodcastindexParser,
    PodloveSimpleChapterParser,
)

__all__ = [
    "BUILTIN_PARSERS",
    "AtomParser",
    "ContentParser",
    "FeedpressParser",
    "GoogleplayParser",
    "ItunesParser",
    "PodcastindexParser",
    "PodloveSimpleChapterParser",
]
