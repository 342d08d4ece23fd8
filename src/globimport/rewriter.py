"""Expansion of one wildcard import into concrete imports and a lookup object."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from globimport.errors import UnsupportedSpecifierError
from globimport.matcher import absolute_pattern, relative_import_path, resolve_pattern
from globimport.models import (
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    ModuleItem,
    ObjectExpression,
    Property,
    VariableDeclaration,
    VarKind,
)
from globimport.pattern import build_capture_regex, extract_fragment, sanitize_name

logger = logging.getLogger("globimport")

SYNTHETIC_PREFIX = "$_import_"


class IdentifierAllocator:
    """Hands out ``$_import_<n>`` names, n = 1, 2, 3, ...

    One allocator lives for exactly one module transform.
    """

    def __init__(self, prefix: str = SYNTHETIC_PREFIX):
        self.prefix = prefix
        self.counter = 0

    def next(self) -> Identifier:
        self.counter += 1
        return Identifier(f"{self.prefix}{self.counter}")


@dataclass(frozen=True)
class ExpandedImport:
    """One matched file of a wildcard import."""
    ident: Identifier
    key: str
    source: str


def _shape(decl: ImportDeclaration) -> str:
    if not decl.specifiers:
        return "no specifiers"
    names = []
    for spec in decl.specifiers:
        if isinstance(spec, ImportDefaultSpecifier):
            names.append("default")
        elif isinstance(spec, ImportNamespaceSpecifier):
            names.append("namespace")
        elif isinstance(spec, ImportSpecifier):
            names.append("named")
        else:
            raise TypeError(f"Unknown import specifier: {spec!r}")
    return " + ".join(names)


def binding_of(decl: ImportDeclaration) -> Identifier:
    """The local name of the single default specifier, or raise."""
    spec = decl.default_specifier
    if spec is None:
        raise UnsupportedSpecifierError(decl.source, _shape(decl))
    return spec.local


def expand_wildcard(
    decl: ImportDeclaration, anchor_dir: str, allocator: IdentifierAllocator
) -> list[ExpandedImport]:
    """Resolve a wildcard import into one entry per matching path, in match order."""
    regex = build_capture_regex(absolute_pattern(decl.source, anchor_dir))
    expanded: list[ExpandedImport] = []
    for path in resolve_pattern(decl.source, anchor_dir):
        fragment = extract_fragment(regex, path)
        expanded.append(
            ExpandedImport(
                ident=allocator.next(),
                key=sanitize_name(fragment),
                source=relative_import_path(path, anchor_dir),
            )
        )
    _warn_on_key_clashes(decl.source, expanded)
    return expanded


def _warn_on_key_clashes(source: str, expanded: list[ExpandedImport]) -> None:
    seen: dict[str, str] = {}
    for entry in expanded:
        if not entry.key:
            logger.warning("%s: %s produces an empty property name", source, entry.source)
        if entry.key in seen:
            logger.warning(
                "%s: %s and %s both map to %r, the later one wins",
                source, seen[entry.key], entry.source, entry.key,
            )
        seen[entry.key] = entry.source


def build_items(binding: Identifier, expanded: list[ExpandedImport]) -> list[ModuleItem]:
    """N default imports followed by the aggregating const declaration."""
    items: list[ModuleItem] = [
        ImportDeclaration(source=entry.source, specifiers=[ImportDefaultSpecifier(entry.ident)])
        for entry in expanded
    ]
    items.append(
        VariableDeclaration(
            name=binding,
            init=ObjectExpression([Property(key=e.key, value=e.ident) for e in expanded]),
            kind=VarKind.CONST,
        )
    )
    return items


def split_wildcard_import(
    decl: ImportDeclaration, anchor_dir: str, allocator: IdentifierAllocator
) -> list[ModuleItem]:
    """Replacement statements for one wildcard import."""
    binding = binding_of(decl)
    expanded = expand_wildcard(decl, anchor_dir, allocator)
    logger.debug("Expanded %s into %d import(s) bound to %s", decl.source, len(expanded), binding.name)
    return build_items(binding, expanded)
