"""Validating builders for every feed model."""

from podfeed.builder.atom import AtomBuilder
from podfeed.builder.base import Builder
from podfeed.builder.common import (
    HrefOnlyImageBuilder,
    ItunesCategoryBuilder,
    LinkBuilder,
    PersonBuilder,
    RssCategoryBuilder,
    RssImageBuilder,
)
from podfeed.builder.content import ContentBuilder
from podfeed.builder.episode import EnclosureBuilder, EpisodeBuilder, GuidBuilder
from podfeed.builder.feedpress import FeedpressBuilder
from podfeed.builder.googleplay import EpisodeGoogleplayBuilder, PodcastGoogleplayBuilder
from podfeed.builder.itunes import EpisodeItunesBuilder, PodcastItunesBuilder
from podfeed.builder.podcast import PodcastBuilder
from podfeed.builder.podcastindex import (
    ChaptersBuilder,
    EpisodePodcastindexBuilder,
    FundingBuilder,
    LockedBuilder,
    PodcastPodcastindexBuilder,
    SoundbiteBuilder,
    TranscriptBuilder,
)
from podfeed.builder.podlove import EpisodePodloveBuilder, SimpleChapterBuilder

__all__ = [
    "AtomBuilder",
    "Builder",
    "ChaptersBuilder",
    "ContentBuilder",
    "EnclosureBuilder",
    "EpisodeBuilder",
    "EpisodeGoogleplayBuilder",
    "EpisodeItunesBuilder",
    "EpisodePodcastindexBuilder",
    "EpisodePodloveBuilder",
    "FeedpressBuilder",
    "FundingBuilder",
    "GuidBuilder",
    "HrefOnlyImageBuilder",
    "ItunesCategoryBuilder",
    "LinkBuilder",
    "LockedBuilder",
    "PersonBuilder",
    "PodcastBuilder",
    "PodcastGoogleplayBuilder",
    "PodcastItunesBuilder",
    "PodcastPodcastindexBuilder",
    "RssCategoryBuilder",
    "RssImageBuilder",
    "SimpleChapterBuilder",
    "SoundbiteBuilder",
    "TranscriptBuilder",
]
