"""Builders for the Google Play extension blocks."""

from podfeed.builder.base import Builder, any_present, build_all, build_optional
from podfeed.builder.common import HrefOnlyImageBuilder, ItunesCategoryBuilder
from podfeed.model.common import HrefOnlyImage, ItunesCategory
from podfeed.model.googleplay import EpisodeGoogleplay, ExplicitType, PodcastGoogleplay


def _image_ready(image_builder: HrefOnlyImageBuilder | None) -> bool:
    return image_builder is not None and image_builder.has_enough_data_to_build


class PodcastGoogleplayBuilder(Builder[PodcastGoogleplay]):
    """Builds the channel-level Google Play block.

    Every field is optional; the block is built as soon as one of them
    holds a value (a ``block`` flag of True counts, False does not).
    """

    def __init__(self) -> None:
        self._author: str | None = None
        self._owner: str | None = None
        self._category_builders: list[ItunesCategoryBuilder] = []
        self._description: str | None = None
        self._explicit: ExplicitType | None = None
        self._block: bool = False
        self._image_builder: HrefOnlyImageBuilder | None = None
        self._new_feed_url: str | None = None

    def author(self, author: str | None) -> "PodcastGoogleplayBuilder":
        self._author = author
        return self

    def owner(self, email: str | None) -> "PodcastGoogleplayBuilder":
        self._owner = email
        return self

    def add_category_builder(
        self, category_builder: ItunesCategoryBuilder
    ) -> "PodcastGoogleplayBuilder":
        self._category_builders.append(category_builder)
        return self

    def description(self, description: str | None) -> "PodcastGoogleplayBuilder":
        self._description = description
        return self

    def explicit(self, explicit: ExplicitType | str | None) -> "PodcastGoogleplayBuilder":
        self._explicit = ExplicitType.of(explicit)
        return self

    def block(self, block: bool) -> "PodcastGoogleplayBuilder":
        self._block = block
        return self

    def image_builder(
        self, image_builder: HrefOnlyImageBuilder | None
    ) -> "PodcastGoogleplayBuilder":
        self._image_builder = image_builder
        return self

    def new_feed_url(self, new_feed_url: str | None) -> "PodcastGoogleplayBuilder":
        self._new_feed_url = new_feed_url
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        if any_present(
            self._author, self._owner, self._description, self._explicit, self._new_feed_url
        ):
            return True
        if self._block or _image_ready(self._image_builder):
            return True
        return any(builder.has_enough_data_to_build for builder in self._category_builders)

    def build(self) -> PodcastGoogleplay | None:
        if not self.has_enough_data_to_build:
            return None
        return PodcastGoogleplay(
            author=self._author,
            owner=self._owner,
            categories=build_all(self._category_builders),
            description=self._description,
            explicit=self._explicit,
            block=self._block,
            image=build_optional(self._image_builder),
            new_feed_url=self._new_feed_url,
        )

    def from_model(self, model: PodcastGoogleplay | None) -> "PodcastGoogleplayBuilder":
        if model is None:
            return self
        for category in model.categories:
            self.add_category_builder(ItunesCategory.builder().from_model(category))
        if model.image is not None:
            self.image_builder(HrefOnlyImage.builder().from_model(model.image))
        return (
            self.author(model.author)
            .owner(model.owner)
            .description(model.description)
            .explicit(model.explicit)
            .block(model.block)
            .new_feed_url(model.new_feed_url)
        )


class EpisodeGoogleplayBuilder(Builder[EpisodeGoogleplay]):
    """Builds the item-level Google Play block."""

    def __init__(self) -> None:
        self._description: str | None = None
        self._explicit: ExplicitType | None = None
        self._block: bool = False
        self._image_builder: HrefOnlyImageBuilder | None = None

    def description(self, description: str | None) -> "EpisodeGoogleplayBuilder":
        self._description = description
        return self

    def explicit(self, explicit: ExplicitType | str | None) -> "EpisodeGoogleplayBuilder":
        self._explicit = ExplicitType.of(explicit)
        return self

    def block(self, block: bool) -> "EpisodeGoogleplayBuilder":
        self._block = block
        return self

    def image_builder(
        self, image_builder: HrefOnlyImageBuilder | None
    ) -> "EpisodeGoogleplayBuilder":
        self._image_builder = image_builder
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return (
            any_present(self._description, self._explicit)
            or self._block
            or _image_ready(self._image_builder)
        )

    def build(self) -> EpisodeGoogleplay | None:
        if not self.has_enough_data_to_build:
            return None
        return EpisodeGoogleplay(
            description=self._description,
            explicit=self._explicit,
            block=self._block,
            image=build_optional(self._image_builder),
        )

    def from_model(self, model: EpisodeGoogleplay | None) -> "EpisodeGoogleplayBuilder":
        if model is None:
            return self
        if model.image is not None:
            self.image_builder(HrefOnlyImage.builder().from_model(model.image))
        return (
            self.description(model.description)
            .explicit(model.explicit)
            .block(model.block)
        )
