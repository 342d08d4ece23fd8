"""Module-level wildcard import transform."""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from globimport.errors import GlobImportError, MissingFilenameError
from globimport.models import ImportDeclaration, Module, ModuleItem, Program, RawStatement, Script, VariableDeclaration
from globimport.pattern import is_wildcard_import
from globimport.rewriter import IdentifierAllocator, split_wildcard_import

logger = logging.getLogger("globimport")


def anchor_directory(file_name: str, root: str | None = None) -> str:
    """Directory wildcard patterns of ``file_name`` are resolved against.

    A relative file name is first placed under ``root`` (the current
    directory when omitted); an absolute one is used as is.
    """
    root = root if root is not None else os.getcwd()
    return os.path.dirname(os.path.join(root, file_name))


class GlobImporter:
    """Rewrites the wildcard imports of one file.

    The synthetic identifier counter starts over on every fold_module call
    and is never shared with other instances.
    """

    def __init__(self, file_name: str, root: str | None = None):
        self.file_name = file_name
        self.anchor_dir = anchor_directory(file_name, root)
        self.allocator = IdentifierAllocator()
        self.expanded_count = 0
        self.generated_imports = 0

    def fold_item(self, item: ModuleItem) -> list[ModuleItem]:
        if isinstance(item, ImportDeclaration):
            if not is_wildcard_import(item):
                return [item]
            items = split_wildcard_import(item, self.anchor_dir, self.allocator)
            self.expanded_count += 1
            # Everything but the trailing const declaration is an import.
            self.generated_imports += len(items) - 1
            return items
        if isinstance(item, (VariableDeclaration, RawStatement)):
            return [item]
        raise TypeError(f"Unknown module item: {item!r}")

    def fold_module(self, module: Module) -> Module:
        """Return a new module with every wildcard import expanded in place.

        Raises GlobImportError; the input module is never modified.
        """
        self.allocator = IdentifierAllocator()
        self.expanded_count = 0
        self.generated_imports = 0

        body: list[ModuleItem] = []
        for item in module.body:
            body.extend(self.fold_item(item))
        return Module(body=body)

    def fold_program(self, program: Program) -> Program:
        if isinstance(program, Module):
            return self.fold_module(program)
        if isinstance(program, Script):
            return program
        raise TypeError(f"Unknown program: {program!r}")


@dataclass
class TransformResult:
    """Outcome of transforming one file: a rewritten program or an error."""
    file_name: str
    program: Program | None = None
    error: GlobImportError | None = None
    expanded: int = 0
    generated_imports: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "file": self.file_name,
            "ok": self.ok,
            "expanded": self.expanded,
            "generated_imports": self.generated_imports,
            "error": self.error.to_dict() if self.error else None,
        }


def transform_module(program: Program, file_name: str, root: str | None = None) -> TransformResult:
    """Expand wildcard imports of ``program`` read from ``file_name``.

    Never returns a partially rewritten program: on any GlobImportError the
    result carries the error and no program.
    """
    importer = GlobImporter(file_name, root=root)
    try:
        rewritten = importer.fold_program(program)
    except GlobImportError as exc:
        logger.debug("Transform of %s failed: %s", file_name, exc)
        return TransformResult(file_name=file_name, error=exc)

    return TransformResult(
        file_name=file_name,
        program=rewritten,
        expanded=importer.expanded_count,
        generated_imports=importer.generated_imports,
    )


@dataclass
class TransformMetadata:
    """Context values a host supplies alongside the parsed program."""
    filename: str | None = None
    cwd: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> TransformMetadata:
        return cls(filename=data.get("filename"), cwd=data.get("cwd"))


def process_transform(program: Program, metadata: Mapping | TransformMetadata) -> Program:
    """Host entry point: transform ``program`` or raise GlobImportError."""
    if not isinstance(metadata, TransformMetadata):
        metadata = TransformMetadata.from_mapping(metadata)
    if not metadata.filename:
        raise MissingFilenameError()

    result = transform_module(program, metadata.filename, root=metadata.cwd)
    if result.error is not None:
        raise result.error
    return result.program
