"""Helpers for pulling values out of lxml feed elements.

Every function here is total: malformed or missing input yields None
(or the unchanged builder) instead of an exception.
"""

import re
from collections.abc import Iterator
from datetime import datetime, timedelta
from urllib.parse import urljoin

from lxml import etree

from podfeed.builder.common import (
    HrefOnlyImageBuilder,
    ItunesCategoryBuilder,
    LinkBuilder,
    PersonBuilder,
    RssCategoryBuilder,
    RssImageBuilder,
)
from podfeed.dom.dates import parse_datetime, parse_duration
from podfeed.namespace import FeedNamespace

NamespaceFilter = FeedNamespace | str | None

_INTEGER = re.compile(r"-?[0-9]+")

# Filter value selecting only elements that have no namespace at all
NO_NAMESPACE = ""


def trimmed_or_none(value: str | None) -> str | None:
    """Strip ``value``; return None if nothing is left."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def is_element(node: object) -> bool:
    """Whether ``node`` is an element rather than a comment, PI or entity."""
    return isinstance(node, etree._Element) and isinstance(node.tag, str)


def local_name(node: etree._Element) -> str | None:
    """Local part of the element tag, or None for non-elements."""
    if not is_element(node):
        return None
    return etree.QName(node).localname


def namespace_uri(node: etree._Element) -> str | None:
    """Namespace URI of the element, or None if it has none."""
    if not is_element(node):
        return None
    return etree.QName(node).namespace


def _matches(node: etree._Element, namespace: NamespaceFilter) -> bool:
    if namespace is None:
        return True
    uri = namespace_uri(node)
    if namespace == NO_NAMESPACE:
        return uri is None
    if isinstance(namespace, FeedNamespace):
        return namespace.matches(uri)
    return uri == namespace


def child_elements(node: etree._Element, namespace: NamespaceFilter = None) -> list[etree._Element]:
    """Direct child elements in document order.

    Args:
        node: Parent element
        namespace: Keep only children in this namespace (a FeedNamespace
            matches any of its URIs); NO_NAMESPACE keeps un-namespaced
            children and None keeps every child element

    Returns:
        Matching child elements, preserving document order
    """
    return [child for child in node if is_element(child) and _matches(child, namespace)]


def iter_named_children(
    node: etree._Element, name: str, namespace: NamespaceFilter = None
) -> Iterator[etree._Element]:
    """Yield direct children with the given local name."""
    for child in child_elements(node, namespace):
        if local_name(child) == name:
            yield child


def find_child(
    node: etree._Element, name: str, namespace: NamespaceFilter = None
) -> etree._Element | None:
    """First direct child with the given local name, or None."""
    return next(iter_named_children(node, name, namespace), None)


def text_or_none(node: etree._Element | None) -> str | None:
    """Concatenated, trimmed text content of an element."""
    if node is None:
        return None
    return trimmed_or_none("".join(node.itertext()))


def attribute_value(node: etree._Element, name: str) -> str | None:
    """Trimmed value of an un-namespaced attribute, or None if missing or blank."""
    return trimmed_or_none(node.get(name))


def parse_bool(value: str | None) -> bool | None:
    """Interpret ``true``/``yes`` and ``false``/``no``, case-insensitive."""
    normalized = trimmed_or_none(value)
    if normalized is None:
        return None
    normalized = normalized.lower()
    if normalized in ("true", "yes"):
        return True
    if normalized in ("false", "no"):
        return False
    return None


def parse_int(value: str | None) -> int | None:
    """Parse a base-10 integer, or None on any non-numeric content."""
    normalized = trimmed_or_none(value)
    if normalized is None:
        return None
    if _INTEGER.fullmatch(normalized) is None:
        return None
    return int(normalized)


def text_as_bool(node: etree._Element) -> bool | None:
    return parse_bool(text_or_none(node))


def text_as_int(node: etree._Element) -> int | None:
    return parse_int(text_or_none(node))


def text_as_datetime(node: etree._Element) -> datetime | None:
    return parse_datetime(text_or_none(node))


def text_as_duration(node: etree._Element) -> timedelta | None:
    return parse_duration(text_or_none(node))


def to_rss_image_builder(
    node: etree._Element, image_builder: RssImageBuilder, namespace: NamespaceFilter = None
) -> RssImageBuilder:
    """Populate ``image_builder`` from an RSS ``<image>`` element."""
    for child in child_elements(node, namespace):
        name = local_name(child)
        if name == "description":
            image_builder.description(text_or_none(child))
        elif name == "height":
            image_builder.height(text_as_int(child))
        elif name == "width":
            image_builder.width(text_as_int(child))
        elif name in ("link", "title", "url"):
            value = text_or_none(child)
            if value is None:
                continue
            getattr(image_builder, name)(value)
    return image_builder


def to_href_only_image_builder(
    node: etree._Element, image_builder: HrefOnlyImageBuilder
) -> HrefOnlyImageBuilder:
    """Populate ``image_builder`` from an ``<ns:image href="..."/>`` element."""
    href = attribute_value(node, "href")
    if href is not None:
        image_builder.href(href)
    return image_builder


def to_person_builder(
    node: etree._Element, person_builder: PersonBuilder, namespace: NamespaceFilter = None
) -> PersonBuilder:
    """Populate ``person_builder`` from ``name``/``email``/``uri`` children."""
    for child in child_elements(node, namespace):
        value = text_or_none(child)
        name = local_name(child)
        if name == "name":
            if value is not None:
                person_builder.name(value)
        elif name == "email":
            person_builder.email(value)
        elif name == "uri":
            person_builder.uri(value)
    return person_builder


def to_rss_category_builder(
    node: etree._Element, category_builder: RssCategoryBuilder
) -> RssCategoryBuilder | None:
    """Populate ``category_builder`` from a ``<category>``; None if it has no text."""
    category = text_or_none(node)
    if category is None:
        return None
    return category_builder.category(category).domain(attribute_value(node, "domain"))


def to_itunes_category_builder(
    node: etree._Element,
    category_builder: ItunesCategoryBuilder,
    namespace: NamespaceFilter = None,
) -> ItunesCategoryBuilder:
    """Populate ``category_builder`` from a ``<ns:category text="...">``.

    Only the first nested category is kept as the subcategory.
    """
    category = attribute_value(node, "text")
    if category is None:
        return category_builder
    category_builder.category(category)

    subcategory_node = find_child(node, "category", namespace)
    if subcategory_node is None:
        return category_builder
    subcategory = attribute_value(subcategory_node, "text")
    if subcategory is not None:
        category_builder.subcategory(subcategory)
    return category_builder


def _resolve_href(node: etree._Element, href: str) -> str | None:
    """Resolve ``href`` against the xml:base or document URL in effect, if any."""
    base = node.base
    if not base:
        return None
    return urljoin(base, href)


def to_link_builder(node: etree._Element, link_builder: LinkBuilder) -> LinkBuilder | None:
    """Populate ``link_builder`` from an ``<atom:link>``; None without ``href``."""
    href = attribute_value(node, "href")
    if href is None:
        return None
    return (
        link_builder.href(href)
        .href_lang(attribute_value(node, "hreflang"))
        .href_resolved(_resolve_href(node, href))
        .length(attribute_value(node, "length"))
        .rel(attribute_value(node, "rel"))
        .title(attribute_value(node, "title"))
        .type(attribute_value(node, "type"))
    )
