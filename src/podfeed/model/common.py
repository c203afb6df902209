"""Value models shared by podcasts, episodes and their extensions."""

from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from podfeed.builder.common import (
        HrefOnlyImageBuilder,
        ItunesCategoryBuilder,
        LinkBuilder,
        PersonBuilder,
        RssCategoryBuilder,
        RssImageBuilder,
    )


class FeedModel(BaseModel):
    """Base for all immutable feed models."""

    model_config = ConfigDict(frozen=True)


class Link(FeedModel):
    """A hyperlink, as found in ``<atom:link>`` elements.

    Attributes:
        href: Link target (required)
        href_lang: Language of the linked resource
        href_resolved: Target resolved against the document base
        length: Advisory length of the linked content
        rel: Link relation type
        title: Human-readable title
        type: Advisory media type
    """

    href: str
    href_lang: str | None = None
    href_resolved: str | None = None
    length: str | None = None
    rel: str | None = None
    title: str | None = None
    type: str | None = None

    @classmethod
    def builder(cls) -> "LinkBuilder":
        """Return a fresh builder for Link instances."""
        from podfeed.builder.common import LinkBuilder

        return LinkBuilder()


class Person(FeedModel):
    """A person, e.g. an Atom author or iTunes owner."""

    name: str
    email: str | None = None
    uri: str | None = None

    @classmethod
    def builder(cls) -> "PersonBuilder":
        """Return a fresh builder for Person instances."""
        from podfeed.builder.common import PersonBuilder

        return PersonBuilder()


class RssImage(FeedModel):
    """An RSS ``<image>``: url, title and link are required together."""

    kind: Literal["rss"] = "rss"
    url: str
    title: str
    link: str
    description: str | None = None
    height: int | None = None
    width: int | None = None

    @classmethod
    def builder(cls) -> "RssImageBuilder":
        """Return a fresh builder for RssImage instances."""
        from podfeed.builder.common import RssImageBuilder

        return RssImageBuilder()


class HrefOnlyImage(FeedModel):
    """An image given only by an ``href`` attribute (iTunes, GooglePlay)."""

    kind: Literal["href"] = "href"
    href: str

    @classmethod
    def builder(cls) -> "HrefOnlyImageBuilder":
        """Return a fresh builder for HrefOnlyImage instances."""
        from podfeed.builder.common import HrefOnlyImageBuilder

        return HrefOnlyImageBuilder()


Image = Annotated[RssImage | HrefOnlyImage, Field(discriminator="kind")]


class RssCategory(FeedModel):
    """A flat RSS ``<category>`` with an optional taxonomy domain."""

    kind: Literal["rss"] = "rss"
    category: str
    domain: str | None = None

    @classmethod
    def builder(cls) -> "RssCategoryBuilder":
        """Return a fresh builder for RssCategory instances."""
        from podfeed.builder.common import RssCategoryBuilder

        return RssCategoryBuilder()


class ItunesCategory(FeedModel):
    """An iTunes-style category with at most one level of subcategory."""

    kind: Literal["itunes"] = "itunes"
    category: str
    subcategory: str | None = None

    @classmethod
    def builder(cls) -> "ItunesCategoryBuilder":
        """Return a fresh builder for ItunesCategory instances."""
        from podfeed.builder.common import ItunesCategoryBuilder

        return ItunesCategoryBuilder()


Category = Annotated[RssCategory | ItunesCategory, Field(discriminator="kind")]


def depicted_url(image: RssImage | HrefOnlyImage) -> str:
    """Return the URL an image points at, whichever variant it is."""
    match image:
        case RssImage(url=url):
            return url
        case HrefOnlyImage(href=href):
            return href
    raise TypeError(f"Unsupported image type: {type(image).__name__}")


def category_label(category: RssCategory | ItunesCategory) -> str:
    """Return a display label, joining iTunes subcategories with ' > '."""
    match category:
        case RssCategory(category=name):
            return name
        case ItunesCategory(category=name, subcategory=None):
            return name
        case ItunesCategory(category=name, subcategory=sub):
            return f"{name} > {sub}"
    raise TypeError(f"Unsupported category type: {type(category).__name__}")
