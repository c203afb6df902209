"""XML namespaces understood by podfeed."""

from enum import Enum


class FeedNamespace(str, Enum):
    """Extension namespace, keyed by its conventional prefix."""

    ATOM = "atom"
    CONTENT = "content"
    FEEDPRESS = "feedpress"
    GOOGLEPLAY = "googleplay"
    ITUNES = "itunes"
    PODCASTINDEX = "podcast"
    PODLOVE_SIMPLE_CHAPTER = "psc"

    @property
    def uri(self) -> str:
        """Canonical namespace URI."""
        return _URIS[self][0]

    @property
    def uris(self) -> tuple[str, ...]:
        """Canonical URI followed by any alternative URIs seen in the wild."""
        return _URIS[self]

    def matches(self, uri: str | None) -> bool:
        """Whether ``uri`` identifies this namespace."""
        if uri is None:
            return False
        return uri.strip() in _URIS[self]

    @classmethod
    def of_uri(cls, uri: str | None) -> "FeedNamespace | None":
        """Look up the namespace for a URI, or None if it is not known."""
        if uri is None:
            return None
        return _BY_URI.get(uri.strip())


_URIS: dict[FeedNamespace, tuple[str, ...]] = {
    FeedNamespace.ATOM: ("http://www.w3.org/2005/Atom",),
    FeedNamespace.CONTENT: ("http://purl.org/rss/1.0/modules/content/",),
    FeedNamespace.FEEDPRESS: ("https://feed.press/xmlns",),
    FeedNamespace.GOOGLEPLAY: ("http://www.google.com/schemas/play-podcasts/1.0",),
    FeedNamespace.ITUNES: ("http://www.itunes.com/dtds/podcast-1.0.dtd",),
    FeedNamespace.PODCASTINDEX: (
        "https://podcastindex.org/namespace/1.0",
        "https://github.com/Podcastindex-org/podcast-namespace/blob/main/docs/1.0.md",
    ),
    FeedNamespace.PODLOVE_SIMPLE_CHAPTER: ("http://podlove.org/simple-chapters",),
}

_BY_URI: dict[str, FeedNamespace] = {
    uri: namespace for namespace, uris in _URIS.items() for uri in uris
}
