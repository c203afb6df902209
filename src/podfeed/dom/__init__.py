"""Value extraction from feed DOM elements."""

from podfeed.dom.dates import parse_datetime, parse_duration
from podfeed.dom.extract import (
    attribute_value,
    child_elements,
    find_child,
    local_name,
    namespace_uri,
    parse_bool,
    parse_int,
    text_or_none,
    trimmed_or_none,
)

__all__ = [
    "attribute_value",
    "child_elements",
    "find_child",
    "local_name",
    "namespace_uri",
    "parse_bool",
    "parse_datetime",
    "parse_duration",
    "parse_int",
    "text_or_none",
    "trimmed_or_none",
]
