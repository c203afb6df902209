"""Immutable podcast feed models."""

from podfeed.model.atom import Atom
from podfeed.model.common import (
    Category,
    HrefOnlyImage,
    Image,
    ItunesCategory,
    Link,
    Person,
    RssCategory,
    RssImage,
    category_label,
    depicted_url,
)
from podfeed.model.content import Content
from podfeed.model.episode import Enclosure, Episode, Guid
from podfeed.model.feedpress import Feedpress
from podfeed.model.googleplay import EpisodeGoogleplay, ExplicitType, PodcastGoogleplay
from podfeed.model.itunes import EpisodeItunes, EpisodeType, PodcastItunes, ShowType
from podfeed.model.podcast import Podcast
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
from podfeed.model.podlove import EpisodePodlove, SimpleChapter

__all__ = [
    "Atom",
    "Category",
    "Chapters",
    "Content",
    "Enclosure",
    "Episode",
    "EpisodeGoogleplay",
    "EpisodeItunes",
    "EpisodePodcastindex",
    "EpisodePodlove",
    "EpisodeType",
    "ExplicitType",
    "Feedpress",
    "Funding",
    "Guid",
    "HrefOnlyImage",
    "Image",
    "ItunesCategory",
    "Link",
    "Locked",
    "Person",
    "Podcast",
    "PodcastGoogleplay",
    "PodcastItunes",
    "PodcastPodcastindex",
    "RssCategory",
    "RssImage",
    "ShowType",
    "SimpleChapter",
    "Soundbite",
    "Transcript",
    "TranscriptType",
    "category_label",
    "depicted_url",
]
