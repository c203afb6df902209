"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field

from podfeed.namespace import FeedNamespace

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ParserConfig(BaseModel):
    """Global podfeed configuration."""

    version: str = "1"
    log_level: LogLevel = "WARNING"

    # Extension namespaces whose elements are interpreted; others are ignored
    namespaces: list[FeedNamespace] = Field(default_factory=lambda: list(FeedNamespace))

    def is_enabled(self, namespace: FeedNamespace) -> bool:
        """Whether elements in ``namespace`` should be parsed."""
        return namespace in self.namespaces
