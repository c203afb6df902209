"""Base builder infrastructure.

Every model has a validating builder. Builders accumulate raw values
through fluent setters, report whether they hold enough data through
``has_enough_data_to_build``, and produce the immutable model from
``build()``, or ``None`` when data is insufficient.

Builder Lifecycle:
    1. Created empty via ``Model.builder()``
    2. Populated by namespace parsers, or by ``from_model(existing)``
    3. ``build()`` returns the model or None; the builder is then discarded
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Builder(ABC, Generic[T]):
    """Base class for all validating builders.

    ``build()`` never raises because of missing data: absence is the
    normal result of insufficient input.

    Example:
        >>> builder = Person.builder().name("Jane").email("jane@example.com")
        >>> builder.has_enough_data_to_build
        True
        >>> builder.build()
        Person(name='Jane', email='jane@example.com', uri=None)
    """

    @property
    @abstractmethod
    def has_enough_data_to_build(self) -> bool:
        """Whether ``build()`` would return a model."""

    @abstractmethod
    def build(self) -> T | None:
        """Create the model, or return None if data is insufficient."""

    @abstractmethod
    def from_model(self, model: T | None) -> "Builder[T]":
        """Populate this builder with every value of ``model``.

        Passing None leaves the builder untouched.
        """


def all_present(*values: Any) -> bool:
    """Check that no value is None."""
    return all(value is not None for value in values)


def any_present(*values: Any) -> bool:
    """Check that at least one value is not None."""
    return any(value is not None for value in values)


def build_all(builders: Iterable[Builder[T]]) -> tuple[T, ...]:
    """Build each builder in order, keeping only the ones that succeed."""
    built = (builder.build() for builder in builders)
    return tuple(model for model in built if model is not None)


def build_optional(builder: Builder[T] | None) -> T | None:
    """Build an optional sub-builder."""
    if builder is None:
        return None
    return builder.build()
