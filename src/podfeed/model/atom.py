"""Models for the Atom namespace as embedded in RSS feeds."""

from typing import TYPE_CHECKING

from podfeed.model.common import FeedModel, Link, Person

if TYPE_CHECKING:
    from podfeed.builder.atom import AtomBuilder


class Atom(FeedModel):
    """Atom authors, contributors and links of a podcast or episode."""

    authors: tuple[Person, ...] = ()
    contributors: tuple[Person, ...] = ()
    links: tuple[Link, ...] = ()

    @classmethod
    def builder(cls) -> "AtomBuilder":
        """Return a fresh builder for Atom instances."""
        from podfeed.builder.atom import AtomBuilder

        return AtomBuilder()
