"""Parser for the PodcastIndex namespace.

The namespace URI is ``https://podcastindex.org/namespace/1.0``.
"""

from lxml import etree

from podfeed.builder.episode import EpisodeBuilder
from podfeed.builder.podcast import PodcastBuilder
from podfeed.builder.podcastindex import (
    ChaptersBuilder,
    FundingBuilder,
    LockedBuilder,
    SoundbiteBuilder,
    TranscriptBuilder,
)
from podfeed.dom.dates import parse_duration
from podfeed.dom.extract import attribute_value, local_name, text_as_bool, text_or_none
from podfeed.model.podcastindex import (
    Chapters,
    Funding,
    Locked,
    Soundbite,
    Transcript,
    TranscriptType,
)
from podfeed.namespace import FeedNamespace
from podfeed.parser.namespace import NamespaceParser


class PodcastindexParser(NamespaceParser):
    """Handles ``locked``/``funding`` on channels and
    ``chapters``/``soundbite``/``transcript`` on items.
    """

    namespace = FeedNamespace.PODCASTINDEX

    def parse_channel_element(self, element: etree._Element, builder: PodcastBuilder) -> None:
        name = local_name(element)
        if name == "locked":
            locked = self._to_locked_builder(element)
            if locked is None:
                self.drop(element, "owner or locked flag missing")
                return
            builder.podcastindex.locked_builder(locked)
        elif name == "funding":
            funding = self._to_funding_builder(element)
            if funding is None:
                self.drop(element, "url or message missing")
                return
            builder.podcastindex.add_funding_builder(funding)

    def parse_item_element(self, element: etree._Element, builder: EpisodeBuilder) -> None:
        name = local_name(element)
        if name == "chapters":
            chapters = self._to_chapters_builder(element)
            if chapters is None:
                self.drop(element, "url or type missing")
                return
            builder.podcastindex.chapters_builder(chapters)
        elif name == "soundbite":
            soundbite = self._to_soundbite_builder(element)
            if soundbite is None:
                self.drop(element, "invalid startTime or duration")
                return
            builder.podcastindex.add_soundbite_builder(soundbite)
        elif name == "transcript":
            transcript = self._to_transcript_builder(element)
            if transcript is None:
                self.drop(element, "url or known type missing")
                return
            builder.podcastindex.add_transcript_builder(transcript)

    def _to_locked_builder(self, element: etree._Element) -> LockedBuilder | None:
        owner = attribute_value(element, "owner")
        locked = text_as_bool(element)
        if owner is None or locked is None:
            return None
        return Locked.builder().owner(owner).locked(locked)

    def _to_funding_builder(self, element: etree._Element) -> FundingBuilder | None:
        url = attribute_value(element, "url")
        message = text_or_none(element)
        if url is None or message is None:
            return None
        return Funding.builder().url(url).message(message)

    def _to_chapters_builder(self, element: etree._Element) -> ChaptersBuilder | None:
        url = attribute_value(element, "url")
        chapters_type = attribute_value(element, "type")
        if url is None or chapters_type is None:
            return None
        return Chapters.builder().url(url).type(chapters_type)

    def _to_soundbite_builder(self, element: etree._Element) -> SoundbiteBuilder | None:
        start_time = parse_duration(attribute_value(element, "startTime"))
        duration = parse_duration(attribute_value(element, "duration"))
        if start_time is None or duration is None or not duration:
            return None
        return (
            Soundbite.builder()
            .start_time(start_time)
            .duration(duration)
            .title(text_or_none(element))
        )

    def _to_transcript_builder(self, element: etree._Element) -> TranscriptBuilder | None:
        url = attribute_value(element, "url")
        transcript_type = TranscriptType.of(attribute_value(element, "type"))
        if url is None or transcript_type is None:
            return None
        return (
            Transcript.builder()
            .url(url)
            .type(transcript_type)
            .language(attribute_value(element, "language"))
            .rel(attribute_value(element, "rel"))
        )
