"""Minimal reader and printer for module source text.

The reader only understands top-level ``import`` declarations; everything
between them is kept verbatim as RawStatement spans. Comments, string
literals and template literals are blanked out before imports are looked
for, so text inside them is never taken for a declaration. It is meant for
the CLI, not as a general purpose parser.
"""
from __future__ import annotations

import json
import re

from globimport.models import (
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    Module,
    ModuleItem,
    ObjectExpression,
    RawStatement,
    Script,
    VariableDeclaration,
)

_NAME = r"[A-Za-z_$][\w$]*"

# Fill characters used by _mask. Newlines are always kept.
_COMMENT_FILL = "\x00"
_STRING_FILL = " "

# Runs on masked text. A declaration starts at the beginning of the text or
# after whitespace, ";" or a comment, and ends with ";" or at a line end.
# import x from "..."; import { a, b as c } from '...'; import * as ns from "...";
# import x, { a } from "..."; import x, * as ns from "..."; import "...";
_IMPORT_RE = re.compile(
    rf"""(?<![^\s;\x00])import\s+
    (?:(?P<clause>
        {_NAME}(?:\s*,\s*(?:\{{[^}}]*\}}|\*\s*as\s+{_NAME}))?
        |\{{[^}}]*\}}
        |\*\s*as\s+{_NAME}
    )\s*from\s*)?
    (?P<quote>['"])(?P<source>[^'"\n]*)(?P=quote)
    (?:[ \t]*;|(?=[ \t\x00]*(?:\r?\n|\Z)))
    [ \t]*(?:\r?\n)?""",
    re.VERBOSE,
)

_NAMESPACE_RE = re.compile(rf"\*\s*as\s+({_NAME})")
_IDENTIFIER_RE = re.compile(_NAME)


def _fill(chunk: str, fill: str) -> str:
    return "".join(c if c == "\n" else fill for c in chunk)


def _quoted_end(text: str, start: int, quote: str, stop_at_newline: bool) -> int:
    """Index just past the closing ``quote`` of a literal opened at ``start``."""
    i = start + 1
    while i < len(text):
        c = text[i]
        if c == "\\":
            i += 2
            continue
        if c == quote:
            return i + 1
        if c == "\n" and stop_at_newline:
            return i
        i += 1
    return len(text)


def _mask(text: str) -> str:
    """Same-length copy of ``text`` with comments and literal contents blanked.

    Comments and template literals become _COMMENT_FILL; the inside of
    quoted strings becomes _STRING_FILL while the quotes stay in place.
    """
    out = []
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = n if end == -1 else end + 2
            out.append(_fill(text[i:end], _COMMENT_FILL))
        elif text.startswith("//", i):
            end = text.find("\n", i)
            end = n if end == -1 else end
            out.append(_fill(text[i:end], _COMMENT_FILL))
        elif c == "`":
            end = _quoted_end(text, i, "`", stop_at_newline=False)
            out.append(_fill(text[i:end], _COMMENT_FILL))
        elif c in "'\"":
            end = _quoted_end(text, i, c, stop_at_newline=True)
            closed = end > i + 1 and text[end - 1] == c
            inner_end = end - 1 if closed else end
            out.append(c + _fill(text[i + 1:inner_end], _STRING_FILL) + text[inner_end:end])
        else:
            end = i + 1
            out.append(c)
        i = end
    return "".join(out)


def _parse_named(body: str) -> list[ImportSpecifier]:
    specifiers = []
    for item in body.split(","):
        item = item.strip()
        if not item:
            continue
        if " as " in item:
            imported, local = (part.strip() for part in item.split(" as ", 1))
            specifiers.append(ImportSpecifier(Identifier(local), imported=imported))
        else:
            specifiers.append(ImportSpecifier(Identifier(item)))
    return specifiers


def _parse_clause(clause: str | None) -> list:
    if not clause:
        return []
    clause = clause.strip()
    if clause.startswith("{"):
        return _parse_named(clause[1:-1])
    ns = _NAMESPACE_RE.fullmatch(clause)
    if ns:
        return [ImportNamespaceSpecifier(Identifier(ns.group(1)))]

    default, _, rest = clause.partition(",")
    specifiers: list = [ImportDefaultSpecifier(Identifier(default.strip()))]
    rest = rest.strip()
    if rest.startswith("{"):
        specifiers.extend(_parse_named(rest[1:-1]))
    elif rest:
        specifiers.append(ImportNamespaceSpecifier(Identifier(_NAMESPACE_RE.fullmatch(rest).group(1))))
    return specifiers


def parse_module(text: str) -> Module:
    """Split source text into import declarations and raw spans."""
    masked = _mask(text)
    body: list[ModuleItem] = []
    pos = 0
    for match in _IMPORT_RE.finditer(masked):
        if match.start() > pos:
            body.append(RawStatement(text[pos:match.start()]))
        clause = match.group("clause")
        if clause:
            clause = clause.replace(_COMMENT_FILL, " ")
        body.append(
            ImportDeclaration(
                source=text[match.start("source"):match.end("source")],
                specifiers=_parse_clause(clause),
            )
        )
        pos = match.end()
    if pos < len(text):
        body.append(RawStatement(text[pos:]))
    return Module(body=body)


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _property_key(key: str) -> str:
    if _IDENTIFIER_RE.fullmatch(key):
        return key
    return _quote(key)


def print_import(decl: ImportDeclaration) -> str:
    if not decl.specifiers:
        return f"import {_quote(decl.source)};"

    parts = []
    named = []
    for spec in decl.specifiers:
        if isinstance(spec, ImportDefaultSpecifier):
            parts.append(spec.local.name)
        elif isinstance(spec, ImportNamespaceSpecifier):
            parts.append(f"* as {spec.local.name}")
        elif isinstance(spec, ImportSpecifier):
            if spec.imported and spec.imported != spec.local.name:
                named.append(f"{spec.imported} as {spec.local.name}")
            else:
                named.append(spec.local.name)
        else:
            raise TypeError(f"Unknown import specifier: {spec!r}")
    if named:
        parts.append("{ " + ", ".join(named) + " }")
    return f"import {', '.join(parts)} from {_quote(decl.source)};"


def print_object(obj: ObjectExpression) -> str:
    if not obj.properties:
        return "{}"
    props = ", ".join(f"{_property_key(p.key)}: {p.value.name}" for p in obj.properties)
    return "{ " + props + " }"


def print_declaration(decl: VariableDeclaration) -> str:
    return f"{decl.kind.value} {decl.name.name} = {print_object(decl.init)};"


def print_item(item: ModuleItem) -> str:
    if isinstance(item, RawStatement):
        return item.text
    if isinstance(item, ImportDeclaration):
        return print_import(item) + "\n"
    if isinstance(item, VariableDeclaration):
        return print_declaration(item) + "\n"
    raise TypeError(f"Unknown module item: {item!r}")


def print_module(program: Module | Script) -> str:
    return "".join(print_item(item) for item in program.body)
