"""Shared fixtures for globimport tests."""
from __future__ import annotations

import pytest

from globimport.models import (
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
)


def default_import(name: str, source: str) -> ImportDeclaration:
    return ImportDeclaration(source=source, specifiers=[ImportDefaultSpecifier(Identifier(name))])


def named_import(name: str, source: str) -> ImportDeclaration:
    return ImportDeclaration(source=source, specifiers=[ImportSpecifier(Identifier(name))])


def namespace_import(name: str, source: str) -> ImportDeclaration:
    return ImportDeclaration(source=source, specifiers=[ImportNamespaceSpecifier(Identifier(name))])


@pytest.fixture
def project(tmp_path):
    """A small source tree: src/main.js importing from src/components/."""
    components = tmp_path / "src" / "components"
    components.mkdir(parents=True)
    for name in ("button.js", "text-input.js"):
        (components / name).write_text("export default {};\n")
    return tmp_path
