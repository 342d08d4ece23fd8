"""Filesystem resolution of wildcard import patterns."""
from __future__ import annotations

import fnmatch
import glob
import logging
import os

from globimport.errors import PatternResolutionError
from globimport.pattern import WILDCARD, split_at_wildcard

logger = logging.getLogger("globimport")


def absolute_pattern(source: str, anchor_dir: str) -> str:
    """Join an import source onto the directory of the importing file."""
    return os.path.join(anchor_dir, source)


def _glob_escape(pattern: str) -> str:
    # Only the wildcard marker keeps its glob meaning; "?", "[" and any "*" in
    # the anchor directory are literal.
    head, tail = split_at_wildcard(pattern)
    return glob.escape(head) + WILDCARD + glob.escape(tail)


def _last_sep(text: str) -> int:
    return max(text.rfind("/"), text.rfind(os.sep))


def _first_sep(text: str) -> int:
    found = [i for i in (text.find("/"), text.find(os.sep)) if i != -1]
    return min(found) if found else -1


def _split_segment(pattern: str) -> tuple[str, str, str]:
    """Split a pattern around the path segment holding the wildcard.

    Returns the literal parent directory (with its trailing separator), the
    segment pattern, and the literal remainder (with its leading separator).
    """
    head, tail = split_at_wildcard(pattern)
    cut = _last_sep(head) + 1
    parent, segment_head = head[:cut], head[cut:]
    cut = _first_sep(tail)
    if cut == -1:
        segment_tail, rest = tail, ""
    else:
        segment_tail, rest = tail[:cut], tail[cut:]
    return parent, segment_head + WILDCARD + segment_tail, rest


def _list_names(directory: str, pattern: str) -> list[str]:
    try:
        with os.scandir(directory or os.curdir) as entries:
            names = [entry.name for entry in entries]
    except (FileNotFoundError, NotADirectoryError):
        # A missing literal directory simply has no matches.
        return []
    except OSError as exc:
        raise PatternResolutionError(pattern, str(exc)) from exc
    return names


def resolve_pattern(source: str, anchor_dir: str) -> list[str]:
    """Enumerate filesystem entries matching ``source`` relative to ``anchor_dir``.

    ``*`` matches any run of characters inside one path segment, hidden
    names included. Results keep the literal prefix of the joined pattern
    and are sorted. Raises PatternResolutionError when the anchor or the
    directory holding the wildcard cannot be read.
    """
    pattern = absolute_pattern(source, anchor_dir)
    if not os.path.isdir(anchor_dir):
        raise PatternResolutionError(pattern, f"{anchor_dir} is not a directory")

    parent, segment, rest = _split_segment(pattern)
    name_pattern = _glob_escape(segment)

    matches = []
    for name in _list_names(parent, pattern):
        if not fnmatch.fnmatchcase(name, name_pattern):
            continue
        path = f"{parent}{name}{rest}"
        if rest and not os.path.lexists(path):
            continue
        matches.append(path)

    matches.sort()
    logger.debug("Pattern %s matched %d path(s)", pattern, len(matches))
    return matches


def relative_import_path(path: str, anchor_dir: str) -> str:
    """Import specifier for ``path`` as seen from ``anchor_dir``.

    Always POSIX separators, always starting with ``./`` or ``../``.
    """
    relative = os.path.relpath(path, anchor_dir).replace(os.sep, "/")
    if relative.startswith(("./", "../")):
        return relative
    return f"./{relative}"
