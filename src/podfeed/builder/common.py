"""Builders for the shared value models."""

from podfeed.builder.base import Builder, all_present
from podfeed.model.common import (
    HrefOnlyImage,
    ItunesCategory,
    Link,
    Person,
    RssCategory,
    RssImage,
)


class LinkBuilder(Builder[Link]):
    """Builds Link instances; requires ``href``."""

    def __init__(self) -> None:
        self._href: str | None = None
        self._href_lang: str | None = None
        self._href_resolved: str | None = None
        self._length: str | None = None
        self._rel: str | None = None
        self._title: str | None = None
        self._type: str | None = None

    def href(self, href: str) -> "LinkBuilder":
        self._href = href
        return self

    def href_lang(self, href_lang: str | None) -> "LinkBuilder":
        self._href_lang = href_lang
        return self

    def href_resolved(self, href_resolved: str | None) -> "LinkBuilder":
        self._href_resolved = href_resolved
        return self

    def length(self, length: str | None) -> "LinkBuilder":
        self._length = length
        return self

    def rel(self, rel: str | None) -> "LinkBuilder":
        self._rel = rel
        return self

    def title(self, title: str | None) -> "LinkBuilder":
        self._title = title
        return self

    def type(self, type: str | None) -> "LinkBuilder":
        self._type = type
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return self._href is not None

    def build(self) -> Link | None:
        if not self.has_enough_data_to_build:
            return None
        return Link(
            href=self._href,
            href_lang=self._href_lang,
            href_resolved=self._href_resolved,
            length=self._length,
            rel=self._rel,
            title=self._title,
            type=self._type,
        )

    def from_model(self, model: Link | None) -> "LinkBuilder":
        if model is None:
            return self
        return (
            self.href(model.href)
            .href_lang(model.href_lang)
            .href_resolved(model.href_resolved)
            .length(model.length)
            .rel(model.rel)
            .title(model.title)
            .type(model.type)
        )


class PersonBuilder(Builder[Person]):
    """Builds Person instances; requires ``name``."""

    def __init__(self) -> None:
        self._name: str | None = None
        self._email: str | None = None
        self._uri: str | None = None

    def name(self, name: str) -> "PersonBuilder":
        self._name = name
        return self

    def email(self, email: str | None) -> "PersonBuilder":
        self._email = email
        return self

    def uri(self, uri: str | None) -> "PersonBuilder":
        self._uri = uri
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return self._name is not None

    def build(self) -> Person | None:
        if not self.has_enough_data_to_build:
            return None
        return Person(name=self._name, email=self._email, uri=self._uri)

    def from_model(self, model: Person | None) -> "PersonBuilder":
        if model is None:
            return self
        return self.name(model.name).email(model.email).uri(model.uri)


class RssImageBuilder(Builder[RssImage]):
    """Builds RssImage instances; url, title and link are required together."""

    def __init__(self) -> None:
        self._url: str | None = None
        self._title: str | None = None
        self._link: str | None = None
        self._description: str | None = None
        self._height: int | None = None
        self._width: int | None = None

    def url(self, url: str) -> "RssImageBuilder":
        self._url = url
        return self

    def title(self, title: str) -> "RssImageBuilder":
        self._title = title
        return self

    def link(self, link: str) -> "RssImageBuilder":
        self._link = link
        return self

    def description(self, description: str | None) -> "RssImageBuilder":
        self._description = description
        return self

    def height(self, height: int | None) -> "RssImageBuilder":
        self._height = height
        return self

    def width(self, width: int | None) -> "RssImageBuilder":
        self._width = width
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return all_present(self._url, self._title, self._link)

    def build(self) -> RssImage | None:
        if not self.has_enough_data_to_build:
            return None
        return RssImage(
            url=self._url,
            title=self._title,
            link=self._link,
            description=self._description,
            height=self._height,
            width=self._width,
        )

    def from_model(self, model: RssImage | None) -> "RssImageBuilder":
        if model is None:
            return self
        return (
            self.url(model.url)
            .title(model.title)
            .link(model.link)
            .description(model.description)
            .height(model.height)
            .width(model.width)
        )


class HrefOnlyImageBuilder(Builder[HrefOnlyImage]):
    """Builds HrefOnlyImage instances; requires ``href``."""

    def __init__(self) -> None:
        self._href: str | None = None

    def href(self, href: str) -> "HrefOnlyImageBuilder":
        self._href = href
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return self._href is not None

    def build(self) -> HrefOnlyImage | None:
        if not self.has_enough_data_to_build:
            return None
        return HrefOnlyImage(href=self._href)

    def from_model(self, model: HrefOnlyImage | None) -> "HrefOnlyImageBuilder":
        if model is None:
            return self
        return self.href(model.href)


class RssCategoryBuilder(Builder[RssCategory]):
    """Builds RssCategory instances; requires the category name."""

    def __init__(self) -> None:
        self._category: str | None = None
        self._domain: str | None = None

    def category(self, category: str) -> "RssCategoryBuilder":
        self._category = category
        return self

    def domain(self, domain: str | None) -> "RssCategoryBuilder":
        self._domain = domain
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return self._category is not None

    def build(self) -> RssCategory | None:
        if not self.has_enough_data_to_build:
            return None
        return RssCategory(category=self._category, domain=self._domain)

    def from_model(self, model: RssCategory | None) -> "RssCategoryBuilder":
        if model is None:
            return self
        return self.category(model.category).domain(model.domain)


class ItunesCategoryBuilder(Builder[ItunesCategory]):
    """Builds ItunesCategory instances; requires the category name."""

    def __init__(self) -> None:
        self._category: str | None = None
        self._subcategory: str | None = None

    def category(self, category: str) -> "ItunesCategoryBuilder":
        self._category = category
        return self

    def subcategory(self, subcategory: str | None) -> "ItunesCategoryBuilder":
        self._subcategory = subcategory
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return self._category is not None

    def build(self) -> ItunesCategory | None:
        if not self.has_enough_data_to_build:
            return None
        return ItunesCategory(category=self._category, subcategory=self._subcategory)

    def from_model(self, model: ItunesCategory | None) -> "ItunesCategoryBuilder":
        if model is None:
            return self
        return self.category(model.category).subcategory(model.subcategory)
