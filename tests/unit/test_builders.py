"""Tests for validating builders."""

from datetime import datetime, timedelta, timezone

import pytest

from podfeed.builder.base import build_all, build_optional
from podfeed.model import (
    Atom,
    Content,
    Enclosure,
    Episode,
    EpisodeGoogleplay,
    EpisodeItunes,
    EpisodePodcastindex,
    EpisodePodlove,
    EpisodeType,
    ExplicitType,
    Feedpress,
    Funding,
    Guid,
    HrefOnlyImage,
    ItunesCategory,
    Link,
    Locked,
    Person,
    Podcast,
    PodcastGoogleplay,
    PodcastItunes,
    PodcastPodcastindex,
    RssCategory,
    RssImage,
    ShowType,
    SimpleChapter,
    Soundbite,
    Transcript,
    TranscriptType,
)


def _enclosure() -> Enclosure:
    return Enclosure(url="https://example.com/a.mp3", length=100, type="audio/mpeg")


def _episode_builder():
    return (
        Episode.builder()
        .title("Episode")
        .enclosure_builder(Enclosure.builder().from_model(_enclosure()))
    )


@pytest.fixture
def full_podcast() -> Podcast:
    """A podcast with every optional block populated."""
    image = HrefOnlyImage(href="https://example.com/cover.jpg")
    category = ItunesCategory(category="Technology", subcategory="Podcasting")
    episode = Episode(
        title="Episode 1",
        enclosure=_enclosure(),
        link="https://example.com/1",
        description="First",
        author="jane@example.com",
        categories=(RssCategory(category="Tech"),),
        comments="https://example.com/1#comments",
        guid=Guid(guid="ep-1", is_permalink=False),
        pub_date=datetime(2020, 1, 1, tzinfo=timezone.utc),
        source="https://example.com/source",
        content=Content(encoded="<p>notes</p>"),
        itunes=EpisodeItunes(
            title="Ep 1",
            duration=timedelta(minutes=42),
            image=image,
            explicit=False,
            season=1,
            episode=1,
            episode_type=EpisodeType.FULL,
        ),
        atom=Atom(authors=(Person(name="Jane"),)),
        googleplay=EpisodeGoogleplay(description="Google description"),
        podcastindex=EpisodePodcastindex(
            chapters=None,
            soundbites=(Soundbite(start_time=timedelta(0), duration=timedelta(seconds=30)),),
            transcripts=(
                Transcript(url="https://example.com/1.vtt", type=TranscriptType.VTT),
            ),
        ),
        podlove=EpisodePodlove(chapters=(SimpleChapter(start="00:00:00", title="Intro"),)),
    )
    return Podcast(
        title="Show",
        link="https://example.com",
        description="About",
        language="en",
        pub_date=datetime(2020, 1, 2, tzinfo=timezone.utc),
        last_build_date=datetime(2020, 1, 3, tzinfo=timezone.utc),
        generator="gen",
        copyright="(c) 2020",
        docs="https://example.com/docs",
        managing_editor="editor@example.com",
        web_master="web@example.com",
        ttl=60,
        image=RssImage(url="https://example.com/i.png", title="Show", link="https://example.com"),
        categories=(RssCategory(category="News", domain="example"),),
        episodes=(episode,),
        itunes=PodcastItunes(
            image=image,
            explicit=True,
            categories=(category,),
            owner=Person(name="Jane", email="jane@example.com"),
            type=ShowType.SERIAL,
            complete=True,
        ),
        atom=Atom(links=(Link(href="https://example.com/feed", rel="self"),)),
        googleplay=PodcastGoogleplay(
            author="Jane", categories=(category,), explicit=ExplicitType.CLEAN, block=True
        ),
        podcastindex=PodcastPodcastindex(
            locked=Locked(owner="jane@example.com", locked=True),
            funding=(Funding(url="https://example.com/donate", message="Support"),),
        ),
        feedpress=Feedpress(locale="en"),
    )


class TestRoundTrip:
    """Tests that from_model followed by build reproduces the model."""

    def test_podcast_round_trip(self, full_podcast: Podcast) -> None:
        """Test a fully populated podcast survives a builder round trip."""
        rebuilt = Podcast.builder().from_model(full_podcast).build()
        assert rebuilt == full_podcast

    def test_from_model_none_is_noop(self) -> None:
        """Test from_model(None) leaves the builder empty."""
        builder = Podcast.builder().from_model(None)
        assert not builder.has_enough_data_to_build
        assert builder.build() is None


class TestPodcastBuilder:
    """Tests for PodcastBuilder."""

    def test_requires_core_fields(self) -> None:
        """Test title, link, description and language are all required."""
        builder = Podcast.builder().title("T").link("L").description("D")
        assert not builder.has_enough_data_to_build
        builder.language("en")
        assert builder.has_enough_data_to_build

    def test_readiness_is_monotonic(self) -> None:
        """Test adding optional data never makes a ready builder unready."""
        builder = Podcast.builder().title("T").link("L").description("D").language("en")
        builder.ttl(5).generator("g").add_category_builder(RssCategory.builder())
        builder.itunes.subtitle("only a subtitle")
        builder.add_episode_builder(Episode.builder())
        assert builder.has_enough_data_to_build

    def test_unready_children_are_dropped(self) -> None:
        """Test invalid episodes and extensions are omitted from the result."""
        builder = Podcast.builder().title("T").link("L").description("D").language("en")
        builder.add_episode_builder(Episode.builder().title("no enclosure"))
        builder.add_episode_builder(_episode_builder())
        builder.itunes.subtitle("missing required parts")

        podcast = builder.build()
        assert podcast is not None
        assert len(podcast.episodes) == 1
        assert podcast.itunes is None

    def test_episode_builders_is_a_copy(self) -> None:
        """Test episode_builders cannot be used to mutate the builder."""
        builder = Podcast.builder()
        builder.episode_builders.append(_episode_builder())
        assert builder.episode_builders == []

    def test_extension_builders_are_lazy_singletons(self) -> None:
        """Test extension sub-builders are created once on access."""
        builder = Podcast.builder()
        assert builder.itunes is builder.itunes
        assert builder.feedpress is builder.feedpress


class TestEpisodeBuilder:
    """Tests for EpisodeBuilder and EnclosureBuilder."""

    def test_requires_title_and_enclosure(self) -> None:
        """Test an episode needs both a title and a valid enclosure."""
        assert not Episode.builder().title("T").has_enough_data_to_build
        assert _episode_builder().has_enough_data_to_build

    def test_enclosure_length_must_not_be_negative(self) -> None:
        """Test negative enclosure length is rejected."""
        builder = Enclosure.builder().url("u").type("audio/mpeg")
        assert not builder.length(-1).has_enough_data_to_build
        assert builder.length(0).has_enough_data_to_build

    def test_episode_with_invalid_enclosure_not_ready(self) -> None:
        """Test an enclosure missing its type keeps the episode unready."""
        builder = (
            Episode.builder()
            .title("T")
            .enclosure_builder(Enclosure.builder().url("u").length(1))
        )
        assert not builder.has_enough_data_to_build
        assert builder.build() is None


class TestItunesBuilders:
    """Tests for the iTunes builders."""

    def test_podcast_block_requires_image_explicit_and_category(self) -> None:
        """Test every required part of the channel iTunes block."""
        builder = Podcast.builder().itunes
        builder.image_builder(HrefOnlyImage.builder().href("https://example.com/a.jpg"))
        builder.explicit(False)
        assert not builder.has_enough_data_to_build

        builder.add_category_builder(ItunesCategory.builder())
        assert not builder.has_enough_data_to_build

        builder.add_category_builder(ItunesCategory.builder().category("Arts"))
        assert builder.has_enough_data_to_build
        itunes = builder.build()
        assert itunes is not None
        assert [c.category for c in itunes.categories] == ["Arts"]

    def test_episode_block_ready_with_any_field(self) -> None:
        """Test the item iTunes block is ready once anything is set."""
        builder = EpisodeItunes.builder()
        assert not builder.has_enough_data_to_build
        assert builder.season(2).has_enough_data_to_build

    def test_episode_block_ready_with_block_only(self) -> None:
        """Test block alone is enough for the item iTunes block."""
        assert EpisodeItunes.builder().block(True).has_enough_data_to_build

    def test_enum_setters_accept_raw_strings(self) -> None:
        """Test type setters look up raw values and ignore unknown ones."""
        assert EpisodeItunes.builder().episode_type("Bonus").build() == EpisodeItunes(
            episode_type=EpisodeType.BONUS
        )
        assert EpisodeItunes.builder().episode_type("sneak-peek").build() is None


class TestGoogleplayBuilders:
    """Tests for the Google Play builders."""

    def test_block_true_counts_as_data(self) -> None:
        """Test block(True) alone makes the channel block buildable."""
        builder = PodcastGoogleplay.builder()
        assert not builder.has_enough_data_to_build
        builder.block(True)
        assert builder.build() == PodcastGoogleplay(block=True)

    def test_block_false_is_not_data(self) -> None:
        """Test the default block value does not count as data."""
        assert not PodcastGoogleplay.builder().block(False).has_enough_data_to_build

    def test_explicit_setter_accepts_raw_strings(self) -> None:
        """Test explicit values are looked up and unknown ones are ignored."""
        googleplay = EpisodeGoogleplay.builder().explicit("clean").build()
        assert googleplay == EpisodeGoogleplay(explicit=ExplicitType.CLEAN)
        assert EpisodeGoogleplay.builder().explicit("maybe").build() is None

    def test_episode_block(self) -> None:
        """Test the item Google Play block with a description."""
        built = EpisodeGoogleplay.builder().description("Desc").build()
        assert built == EpisodeGoogleplay(description="Desc")


class TestPodcastindexBuilders:
    """Tests for the PodcastIndex builders."""

    @pytest.mark.parametrize(
        ("start", "duration", "ready"),
        [
            (timedelta(0), timedelta(seconds=1), True),
            (timedelta(seconds=5), timedelta(microseconds=1), True),
            (timedelta(seconds=-1), timedelta(seconds=1), False),
            (timedelta(0), timedelta(0), False),
            (timedelta(0), timedelta(seconds=-1), False),
        ],
    )
    def test_soundbite_boundaries(
        self, start: timedelta, duration: timedelta, ready: bool
    ) -> None:
        """Test start time must be >= 0 and duration > 0."""
        builder = Soundbite.builder().start_time(start).duration(duration)
        assert builder.has_enough_data_to_build is ready
        assert (builder.build() is not None) is ready

    def test_locked_requires_owner_and_flag(self) -> None:
        """Test locked needs both parts."""
        assert not Locked.builder().owner("me").has_enough_data_to_build
        assert not Locked.builder().locked(True).has_enough_data_to_build
        assert Locked.builder().owner("me").locked(False).build() == Locked(
            owner="me", locked=False
        )

    def test_podcast_block_ready_with_funding_only(self) -> None:
        """Test a single valid funding entry makes the channel block ready."""
        builder = PodcastPodcastindex.builder()
        builder.add_funding_builder(Funding.builder().url("u"))
        assert not builder.has_enough_data_to_build
        builder.add_funding_builder(Funding.builder().url("u").message("m"))
        podcastindex = builder.build()
        assert podcastindex is not None
        assert podcastindex.funding == (Funding(url="u", message="m"),)

    def test_transcript_requires_url_and_type(self) -> None:
        """Test transcript readiness."""
        assert not Transcript.builder().url("u").has_enough_data_to_build
        built = Transcript.builder().url("u").type(TranscriptType.SRT).language("de").build()
        assert built == Transcript(url="u", type=TranscriptType.SRT, language="de")

    def test_transcript_type_accepts_media_type_strings(self) -> None:
        """Test raw media types are looked up and unknown ones never build."""
        built = Transcript.builder().url("u").type("TEXT/VTT").build()
        assert built == Transcript(url="u", type=TranscriptType.VTT)

        unknown = Transcript.builder().url("u").type("text/foo")
        assert not unknown.has_enough_data_to_build
        assert unknown.build() is None


class TestOtherBuilders:
    """Tests for Atom, Content, Feedpress and Podlove builders."""

    def test_atom_ready_with_any_entity(self) -> None:
        """Test Atom block needs at least one buildable author, contributor or link."""
        builder = Atom.builder().add_author_builder(Person.builder())
        assert not builder.has_enough_data_to_build
        builder.add_link_builder(Link.builder().href("https://example.com"))
        assert builder.build() == Atom(links=(Link(href="https://example.com"),))

    def test_content_requires_encoded(self) -> None:
        """Test content:encoded is required."""
        assert Content.builder().build() is None
        assert Content.builder().encoded("<p/>").build() == Content(encoded="<p/>")

    def test_feedpress_ready_with_any_field(self) -> None:
        """Test any Feedpress field is enough."""
        assert Feedpress.builder().build() is None
        assert Feedpress.builder().css_file("a.css").build() == Feedpress(css_file="a.css")

    def test_podlove_keeps_only_valid_chapters(self) -> None:
        """Test chapters missing start or title are omitted."""
        builder = EpisodePodlove.builder()
        builder.add_chapter_builder(SimpleChapter.builder().start("00:00"))
        assert not builder.has_enough_data_to_build
        builder.add_chapter_builder(SimpleChapter.builder().start("00:00").title("Intro"))
        assert builder.build() == EpisodePodlove(
            chapters=(SimpleChapter(start="00:00", title="Intro"),)
        )


class TestHelpers:
    """Tests for builder helper functions."""

    def test_build_all_keeps_successes_in_order(self) -> None:
        """Test build_all drops unready builders and keeps order."""
        builders = [
            RssCategory.builder().category("a"),
            RssCategory.builder(),
            RssCategory.builder().category("b"),
        ]
        assert [c.category for c in build_all(builders)] == ["a", "b"]

    def test_build_optional(self) -> None:
        """Test build_optional tolerates None."""
        assert build_optional(None) is None
        assert build_optional(Content.builder()) is None
