"""Models for the PodcastIndex namespace.

The namespace URI is ``https://podcastindex.org/namespace/1.0``.
"""

from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import Field

from podfeed.model.common import FeedModel

if TYPE_CHECKING:
    from podfeed.builder.podcastindex import (
        ChaptersBuilder,
        EpisodePodcastindexBuilder,
        FundingBuilder,
        LockedBuilder,
        PodcastPodcastindexBuilder,
        SoundbiteBuilder,
        TranscriptBuilder,
    )


class TranscriptType(str, Enum):
    """Media types accepted for ``<podcast:transcript type="...">``."""

    PLAIN_TEXT = "text/plain"
    HTML = "text/html"
    SRT = "application/srt"
    VTT = "text/vtt"
    JSON = "application/json"

    @classmethod
    def of(cls, raw: str | None) -> "TranscriptType | None":
        """Case-insensitive lookup; None for unknown values."""
        if raw is None:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class Locked(FeedModel):
    """``<podcast:locked>``: whether the feed may be imported elsewhere."""

    owner: str
    locked: bool

    @classmethod
    def builder(cls) -> "LockedBuilder":
        from podfeed.builder.podcastindex import LockedBuilder

        return LockedBuilder()


class Funding(FeedModel):
    """``<podcast:funding>``: a donation or support link."""

    url: str
    message: str

    @classmethod
    def builder(cls) -> "FundingBuilder":
        from podfeed.builder.podcastindex import FundingBuilder

        return FundingBuilder()


class PodcastPodcastindex(FeedModel):
    """Channel-level PodcastIndex data."""

    locked: Locked | None = None
    funding: tuple[Funding, ...] = ()

    @classmethod
    def builder(cls) -> "PodcastPodcastindexBuilder":
        from podfeed.builder.podcastindex import PodcastPodcastindexBuilder

        return PodcastPodcastindexBuilder()


class Chapters(FeedModel):
    """``<podcast:chapters>``: link to an external chapters file."""

    url: str
    type: str

    @classmethod
    def builder(cls) -> "ChaptersBuilder":
        from podfeed.builder.podcastindex import ChaptersBuilder

        return ChaptersBuilder()


class Soundbite(FeedModel):
    """``<podcast:soundbite>``: a highlight within the episode audio."""

    start_time: timedelta = Field(..., ge=timedelta(0))
    duration: timedelta = Field(..., gt=timedelta(0))
    title: str | None = None

    @classmethod
    def builder(cls) -> "SoundbiteBuilder":
        from podfeed.builder.podcastindex import SoundbiteBuilder

        return SoundbiteBuilder()


class Transcript(FeedModel):
    """``<podcast:transcript>``: link to an episode transcript."""

    url: str
    type: TranscriptType
    language: str | None = None
    rel: str | None = None

    @classmethod
    def builder(cls) -> "TranscriptBuilder":
        from podfeed.builder.podcastindex import TranscriptBuilder

        return TranscriptBuilder()


class EpisodePodcastindex(FeedModel):
    """Item-level PodcastIndex data."""

    chapters: Chapters | None = None
    soundbites: tuple[Soundbite, ...] = ()
    transcripts: tuple[Transcript, ...] = ()

    @classmethod
    def builder(cls) -> "EpisodePodcastindexBuilder":
        from podfeed.builder.podcastindex import EpisodePodcastindexBuilder

        return EpisodePodcastindexBuilder()
