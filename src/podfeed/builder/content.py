"""Builder for the content module block."""

from podfeed.builder.base import Builder
from podfeed.model.content import Content


class ContentBuilder(Builder[Content]):
    """Builds Content blocks; requires the encoded body."""

    def __init__(self) -> None:
        self._encoded: str | None = None

    def encoded(self, encoded: str) -> "ContentBuilder":
        self._encoded = encoded
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return self._encoded is not None

    def build(self) -> Content | None:
        if not self.has_enough_data_to_build:
            return None
        return Content(encoded=self._encoded)

    def from_model(self, model: Content | None) -> "ContentBuilder":
        if model is None:
            return self
        return self.encoded(model.encoded)
