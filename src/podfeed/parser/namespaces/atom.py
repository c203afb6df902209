"""Parser for Atom elements embedded in RSS feeds.

The namespace URI is ``http://www.w3.org/2005/Atom``.
"""

from lxml import etree

from podfeed.builder.episode import EpisodeBuilder
from podfeed.builder.podcast import PodcastBuilder
from podfeed.dom.extract import local_name, to_link_builder, to_person_builder
from podfeed.model.common import Link, Person
from podfeed.namespace import FeedNamespace
from podfeed.parser.namespace import NamespaceParser


class AtomParser(NamespaceParser):
    """Handles ``author``, ``contributor`` and ``link`` on channels and items."""

    namespace = FeedNamespace.ATOM

    def parse_channel_element(self, element: etree._Element, builder: PodcastBuilder) -> None:
        self._parse(element, builder)

    def parse_item_element(self, element: etree._Element, builder: EpisodeBuilder) -> None:
        self._parse(element, builder)

    def _parse(self, element: etree._Element, builder: PodcastBuilder | EpisodeBuilder) -> None:
        name = local_name(element)
        if name == "author":
            author = to_person_builder(element, Person.builder(), self.namespace)
            if not author.has_enough_data_to_build:
                self.drop(element, "missing name")
                return
            builder.atom.add_author_builder(author)
        elif name == "contributor":
            contributor = to_person_builder(element, Person.builder(), self.namespace)
            if not contributor.has_enough_data_to_build:
                self.drop(element, "missing name")
                return
            builder.atom.add_contributor_builder(contributor)
        elif name == "link":
            link = to_link_builder(element, Link.builder())
            if link is None:
                self.drop(element, "missing href")
                return
            builder.atom.add_link_builder(link)
