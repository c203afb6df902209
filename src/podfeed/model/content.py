"""Model for the RSS content module."""

from typing import TYPE_CHECKING

from podfeed.model.common import FeedModel

if TYPE_CHECKING:
    from podfeed.builder.content import ContentBuilder


class Content(FeedModel):
    """``<content:encoded>`` body of an episode."""

    encoded: str

    @classmethod
    def builder(cls) -> "ContentBuilder":
        """Return a fresh builder for Content instances."""
        from podfeed.builder.content import ContentBuilder

        return ContentBuilder()
