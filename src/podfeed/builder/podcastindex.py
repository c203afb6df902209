"""Builders for the PodcastIndex extension blocks."""

from datetime import timedelta

from podfeed.builder.base import Builder, all_present, build_all, build_optional
from podfeed.model.podcastindex import (
    Chapters,
    EpisodePodcastindex,
    Funding,
    Locked,
    PodcastPodcastindex,
    Soundbite,
    Transcript,
    TranscriptType,
)


class LockedBuilder(Builder[Locked]):
    """Builds ``<podcast:locked>``; owner and flag are required together."""

    def __init__(self) -> None:
        self._owner: str | None = None
        self._locked: bool | None = None

    def owner(self, owner: str) -> "LockedBuilder":
        self._owner = owner
        return self

    def locked(self, locked: bool) -> "LockedBuilder":
        self._locked = locked
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return all_present(self._owner, self._locked)

    def build(self) -> Locked | None:
        if not self.has_enough_data_to_build:
            return None
        return Locked(owner=self._owner, locked=self._locked)

    def from_model(self, model: Locked | None) -> "LockedBuilder":
        if model is None:
            return self
        return self.owner(model.owner).locked(model.locked)


class FundingBuilder(Builder[Funding]):
    """Builds ``<podcast:funding>``; url and message are required."""

    def __init__(self) -> None:
        self._url: str | None = None
        self._message: str | None = None

    def url(self, url: str) -> "FundingBuilder":
        self._url = url
        return self

    def message(self, message: str) -> "FundingBuilder":
        self._message = message
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return all_present(self._url, self._message)

    def build(self) -> Funding | None:
        if not self.has_enough_data_to_build:
            return None
        return Funding(url=self._url, message=self._message)

    def from_model(self, model: Funding | None) -> "FundingBuilder":
        if model is None:
            return self
        return self.url(model.url).message(model.message)


class PodcastPodcastindexBuilder(Builder[PodcastPodcastindex]):
    """Builds the channel-level PodcastIndex block."""

    def __init__(self) -> None:
        self._locked_builder: LockedBuilder | None = None
        self._funding_builders: list[FundingBuilder] = []

    def locked_builder(self, locked_builder: LockedBuilder | None) -> "PodcastPodcastindexBuilder":
        self._locked_builder = locked_builder
        return self

    def add_funding_builder(self, funding_builder: FundingBuilder) -> "PodcastPodcastindexBuilder":
        self._funding_builders.append(funding_builder)
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        if self._locked_builder is not None and self._locked_builder.has_enough_data_to_build:
            return True
        return any(builder.has_enough_data_to_build for builder in self._funding_builders)

    def build(self) -> PodcastPodcastindex | None:
        if not self.has_enough_data_to_build:
            return None
        return PodcastPodcastindex(
            locked=build_optional(self._locked_builder),
            funding=build_all(self._funding_builders),
        )

    def from_model(self, model: PodcastPodcastindex | None) -> "PodcastPodcastindexBuilder":
        if model is None:
            return self
        if model.locked is not None:
            self.locked_builder(Locked.builder().from_model(model.locked))
        for funding in model.funding:
            self.add_funding_builder(Funding.builder().from_model(funding))
        return self


class ChaptersBuilder(Builder[Chapters]):
    """Builds ``<podcast:chapters>``; url and type are required."""

    def __init__(self) -> None:
        self._url: str | None = None
        self._type: str | None = None

    def url(self, url: str) -> "ChaptersBuilder":
        self._url = url
        return self

    def type(self, type: str) -> "ChaptersBuilder":
        self._type = type
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return all_present(self._url, self._type)

    def build(self) -> Chapters | None:
        if not self.has_enough_data_to_build:
            return None
        return Chapters(url=self._url, type=self._type)

    def from_model(self, model: Chapters | None) -> "ChaptersBuilder":
        if model is None:
            return self
        return self.url(model.url).type(model.type)


class SoundbiteBuilder(Builder[Soundbite]):
    """Builds ``<podcast:soundbite>``.

    Ready only when the start time is zero or positive and the duration
    is strictly positive.
    """

    def __init__(self) -> None:
        self._start_time: timedelta | None = None
        self._duration: timedelta | None = None
        self._title: str | None = None

    def start_time(self, start_time: timedelta) -> "SoundbiteBuilder":
        self._start_time = start_time
        return self

    def duration(self, duration: timedelta) -> "SoundbiteBuilder":
        self._duration = duration
        return self

    def title(self, title: str | None) -> "SoundbiteBuilder":
        self._title = title
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        if self._start_time is None or self._start_time < timedelta(0):
            return False
        return self._duration is not None and self._duration > timedelta(0)

    def build(self) -> Soundbite | None:
        if not self.has_enough_data_to_build:
            return None
        return Soundbite(start_time=self._start_time, duration=self._duration, title=self._title)

    def from_model(self, model: Soundbite | None) -> "SoundbiteBuilder":
        if model is None:
            return self
        return self.start_time(model.start_time).duration(model.duration).title(model.title)


class TranscriptBuilder(Builder[Transcript]):
    """Builds ``<podcast:transcript>``; url and a known type are required."""

    def __init__(self) -> None:
        self._url: str | None = None
        self._type: TranscriptType | None = None
        self._language: str | None = None
        self._rel: str | None = None

    def url(self, url: str) -> "TranscriptBuilder":
        self._url = url
        return self

    def type(self, type: TranscriptType | str | None) -> "TranscriptBuilder":
        """Set the transcript type; unknown media types leave the builder unready."""
        self._type = TranscriptType.of(type)
        return self

    def language(self, language: str | None) -> "TranscriptBuilder":
        self._language = language
        return self

    def rel(self, rel: str | None) -> "TranscriptBuilder":
        self._rel = rel
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return all_present(self._url, self._type)

    def build(self) -> Transcript | None:
        if not self.has_enough_data_to_build:
            return None
        return Transcript(url=self._url, type=self._type, language=self._language, rel=self._rel)

    def from_model(self, model: Transcript | None) -> "TranscriptBuilder":
        if model is None:
            return self
        return self.url(model.url).type(model.type).language(model.language).rel(model.rel)


class EpisodePodcastindexBuilder(Builder[EpisodePodcastindex]):
    """Builds the item-level PodcastIndex block."""

    def __init__(self) -> None:
        self._chapters_builder: ChaptersBuilder | None = None
        self._soundbite_builders: list[SoundbiteBuilder] = []
        self._transcript_builders: list[TranscriptBuilder] = []

    def chapters_builder(
        self, chapters_builder: ChaptersBuilder | None
    ) -> "EpisodePodcastindexBuilder":
        self._chapters_builder = chapters_builder
        return self

    def add_soundbite_builder(
        self, soundbite_builder: SoundbiteBuilder
    ) -> "EpisodePodcastindexBuilder":
        self._soundbite_builders.append(soundbite_builder)
        return self

    def add_transcript_builder(
        self, transcript_builder: TranscriptBuilder
    ) -> "EpisodePodcastindexBuilder":
        self._transcript_builders.append(transcript_builder)
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        if self._chapters_builder is not None and self._chapters_builder.has_enough_data_to_build:
            return True
        builders = [*self._soundbite_builders, *self._transcript_builders]
        return any(builder.has_enough_data_to_build for builder in builders)

    def build(self) -> EpisodePodcastindex | None:
        if not self.has_enough_data_to_build:
            return None
        return EpisodePodcastindex(
            chapters=build_optional(self._chapters_builder),
            soundbites=build_all(self._soundbite_builders),
            transcripts=build_all(self._transcript_builders),
        )

    def from_model(self, model: EpisodePodcastindex | None) -> "EpisodePodcastindexBuilder":
        if model is None:
            return self
        if model.chapters is not None:
            self.chapters_builder(Chapters.builder().from_model(model.chapters))
        for soundbite in model.soundbites:
            self.add_soundbite_builder(Soundbite.builder().from_model(soundbite))
        for transcript in model.transcripts:
            self.add_transcript_builder(Transcript.builder().from_model(transcript))
        return self
