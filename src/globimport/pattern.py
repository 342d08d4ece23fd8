"""Wildcard detection, capture extraction and property-name sanitizing."""
from __future__ import annotations

import re

from globimport.errors import CaptureMismatchError
from globimport.models import ImportDeclaration

WILDCARD = "*"

_DISALLOWED_RE = re.compile(r"[^a-zA-Z0-9_]+")
_UNDERSCORE_RUN_RE = re.compile(r"_+")


def is_wildcard_pattern(source: str) -> bool:
    """True iff the import source holds exactly one wildcard marker.

    Sources with two or more markers are treated as ordinary imports.
    """
    return source.count(WILDCARD) == 1


def is_wildcard_import(decl: ImportDeclaration) -> bool:
    return is_wildcard_pattern(decl.source)


def split_at_wildcard(pattern: str) -> tuple[str, str]:
    """Literal text before and after the wildcard marker.

    The marker is the last ``*``: anything earlier belongs to the anchor
    directory the import source was joined onto.
    """
    head, _, tail = pattern.rpartition(WILDCARD)
    return head, tail


def build_capture_regex(pattern: str) -> re.Pattern[str]:
    """Regex view of a wildcard pattern; group 1 is what ``*`` stood for."""
    head, tail = split_at_wildcard(pattern)
    return re.compile(re.escape(head) + "(.*)" + re.escape(tail), re.DOTALL)


def extract_fragment(regex: re.Pattern[str], path: str) -> str:
    """Return the wildcard-matched part of ``path``.

    Raises CaptureMismatchError when the path does not fit, which means the
    glob matcher and the regex disagree about the same pattern.
    """
    match = regex.fullmatch(path)
    if match is None:
        raise CaptureMismatchError(regex.pattern, path)
    return match.group(1)


def sanitize_name(fragment: str) -> str:
    """Turn a captured filename fragment into a property name.

    >>> sanitize_name("foo-bar!!baz")
    'foo_bar_baz'
    >>> sanitize_name("--a--")
    'a'
    """
    name = _DISALLOWED_RE.sub("", fragment.replace("-", "_"))
    name = _UNDERSCORE_RUN_RE.sub("_", name)
    return name.strip("_")
