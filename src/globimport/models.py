"""Module tree nodes the transform reads and produces."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class VarKind(Enum):
    """Variable declaration keywords."""
    CONST = "const"
    LET = "let"
    VAR = "var"


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class ImportDefaultSpecifier:
    """``import foo from "..."``"""
    local: Identifier


@dataclass(frozen=True)
class ImportSpecifier:
    """``import { bar } from "..."`` or ``import { bar as baz } from "..."``"""
    local: Identifier
    imported: str | None = None


@dataclass(frozen=True)
class ImportNamespaceSpecifier:
    """``import * as ns from "..."``"""
    local: Identifier


AnySpecifier = Union[ImportDefaultSpecifier, ImportSpecifier, ImportNamespaceSpecifier]


@dataclass
class ImportDeclaration:
    source: str
    specifiers: list[AnySpecifier] = field(default_factory=list)

    @property
    def default_specifier(self) -> ImportDefaultSpecifier | None:
        if len(self.specifiers) == 1 and isinstance(self.specifiers[0], ImportDefaultSpecifier):
            return self.specifiers[0]
        return None


@dataclass(frozen=True)
class Property:
    key: str
    value: Identifier


@dataclass
class ObjectExpression:
    properties: list[Property] = field(default_factory=list)


@dataclass
class VariableDeclaration:
    """A single-declarator variable declaration."""
    name: Identifier
    init: ObjectExpression
    kind: VarKind = VarKind.CONST


@dataclass
class RawStatement:
    """Any other top-level statement, carried through verbatim."""
    text: str


ModuleItem = Union[ImportDeclaration, VariableDeclaration, RawStatement]


@dataclass
class Module:
    body: list[ModuleItem] = field(default_factory=list)

    @property
    def imports(self) -> list[ImportDeclaration]:
        return [item for item in self.body if isinstance(item, ImportDeclaration)]


@dataclass
class Script:
    """A program without module syntax; never contains imports."""
    body: list[ModuleItem] = field(default_factory=list)


Program = Union[Module, Script]
