"""Feed parsing: core RSS assembly plus per-namespace parsers."""

from podfeed.parser.assembler import FeedAssembler, parse_feed
from podfeed.parser.namespace import NamespaceParser
from podfeed.parser.registry import NamespaceRegistry, default_registry

__all__ = [
    "FeedAssembler",
    "NamespaceParser",
    "NamespaceRegistry",
    "default_registry",
    "parse_feed",
]
