"""Registry mapping XML namespace URIs to namespace parsers.

The registry is built once and never mutated afterwards, so a single
instance can be shared by every parse in the process.
"""

import logging
from collections.abc import Iterable, Iterator
from functools import cache
from types import MappingProxyType

from podfeed.config.schema import ParserConfig
from podfeed.namespace import FeedNamespace
from podfeed.parser.namespace import NamespaceParser
from podfeed.parser.namespaces import BUILTIN_PARSERS
from podfeed.utils.errors import NamespaceConflictError

logger = logging.getLogger(__name__)


class NamespaceRegistry:
    """Immutable lookup from namespace URI to the parser that owns it.

    Resolution of an element's namespace URI:
        1. No namespace at all: core RSS, handled by the assembler itself
        2. A URI of a registered namespace: that namespace's parser
        3. Anything else: ignored

    Example:
        >>> registry = NamespaceRegistry([ItunesParser(), AtomParser()])
        >>> registry.parser_for("http://www.itunes.com/dtds/podcast-1.0.dtd")
        <podfeed.parser.namespaces.itunes.ItunesParser object at ...>
    """

    def __init__(self, parsers: Iterable[NamespaceParser]) -> None:
        """Register every parser under its namespace.

        Args:
            parsers: Parser instances, at most one per namespace.

        Raises:
            NamespaceConflictError: If two parsers claim the same namespace.
        """
        by_namespace: dict[FeedNamespace, NamespaceParser] = {}
        for parser in parsers:
            existing = by_namespace.get(parser.namespace)
            if existing is not None:
                raise NamespaceConflictError(
                    parser.namespace.value,
                    type(existing).__name__,
                    type(parser).__name__,
                )
            by_namespace[parser.namespace] = parser

        self._parsers = MappingProxyType(by_namespace)
        self._by_uri = MappingProxyType(
            {uri: parser for namespace, parser in by_namespace.items() for uri in namespace.uris}
        )
        logger.debug(
            "Namespace registry ready with %d parser(s): %s",
            len(self._parsers),
            ", ".join(namespace.value for namespace in self._parsers),
        )

    @classmethod
    def from_config(cls, config: ParserConfig) -> "NamespaceRegistry":
        """Registry of built-in parsers for the namespaces enabled in ``config``."""
        return cls(
            parser_type()
            for parser_type in BUILTIN_PARSERS
            if config.is_enabled(parser_type.namespace)
        )

    def resolve(self, uri: str | None) -> FeedNamespace | None:
        """Registered namespace identified by ``uri``, or None."""
        parser = self.parser_for(uri)
        if parser is None:
            return None
        return parser.namespace

    def parser_for(self, uri: str | None) -> NamespaceParser | None:
        """Parser for elements in namespace ``uri``.

        Returns:
            The registered parser, or None for core RSS (no namespace)
            and for namespaces nobody registered
        """
        if uri is None:
            return None
        return self._by_uri.get(uri.strip())

    @property
    def namespaces(self) -> tuple[FeedNamespace, ...]:
        """Registered namespaces in registration order."""
        return tuple(self._parsers)

    def __iter__(self) -> Iterator[NamespaceParser]:
        return iter(self._parsers.values())

    def __len__(self) -> int:
        """Return number of registered parsers."""
        return len(self._parsers)

    def __contains__(self, namespace: object) -> bool:
        """Check if a namespace (enum member or URI) is registered."""
        if isinstance(namespace, FeedNamespace):
            return namespace in self._parsers
        if isinstance(namespace, str):
            return namespace.strip() in self._by_uri
        return False


@cache
def default_registry() -> NamespaceRegistry:
    """Shared registry holding one instance of every built-in parser."""
    return NamespaceRegistry(parser_type() for parser_type in BUILTIN_PARSERS)
