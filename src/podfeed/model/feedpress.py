"""Models for the Feedpress namespace."""

from typing import TYPE_CHECKING

from podfeed.model.common import FeedModel

if TYPE_CHECKING:
    from podfeed.builder.feedpress import FeedpressBuilder


class Feedpress(FeedModel):
    """Feedpress hosting metadata; exists if any field is present."""

    newsletter_id: str | None = None
    locale: str | None = None
    podcast_id: str | None = None
    css_file: str | None = None
    link: str | None = None

    @classmethod
    def builder(cls) -> "FeedpressBuilder":
        """Return a fresh builder for Feedpress instances."""
        from podfeed.builder.feedpress import FeedpressBuilder

        return FeedpressBuilder()
