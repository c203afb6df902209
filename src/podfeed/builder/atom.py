"""Builder for the Atom extension block."""

from podfeed.builder.base import Builder, build_all
from podfeed.builder.common import LinkBuilder, PersonBuilder
from podfeed.model.atom import Atom
from podfeed.model.common import Link, Person


class AtomBuilder(Builder[Atom]):
    """Builds Atom blocks; ready once any author, contributor or link builds."""

    def __init__(self) -> None:
        self._author_builders: list[PersonBuilder] = []
        self._contributor_builders: list[PersonBuilder] = []
        self._link_builders: list[LinkBuilder] = []

    def add_author_builder(self, author_builder: PersonBuilder) -> "AtomBuilder":
        self._author_builders.append(author_builder)
        return self

    def add_contributor_builder(self, contributor_builder: PersonBuilder) -> "AtomBuilder":
        self._contributor_builders.append(contributor_builder)
        return self

    def add_link_builder(self, link_builder: LinkBuilder) -> "AtomBuilder":
        self._link_builders.append(link_builder)
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        builders = [*self._author_builders, *self._contributor_builders, *self._link_builders]
        return any(builder.has_enough_data_to_build for builder in builders)

    def build(self) -> Atom | None:
        if not self.has_enough_data_to_build:
            return None
        return Atom(
            authors=build_all(self._author_builders),
            contributors=build_all(self._contributor_builders),
            links=build_all(self._link_builders),
        )

    def from_model(self, model: Atom | None) -> "AtomBuilder":
        if model is None:
            return self
        for author in model.authors:
            self.add_author_builder(Person.builder().from_model(author))
        for contributor in model.contributors:
            self.add_contributor_builder(Person.builder().from_model(contributor))
        for link in model.links:
            self.add_link_builder(Link.builder().from_model(link))
        return self
