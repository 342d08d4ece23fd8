"""Tests for globimport module tree nodes."""
from __future__ import annotations

from globimport.models import (
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    Module,
    RawStatement,
    VarKind,
)


class TestImportDeclaration:
    def test_default_specifier(self):
        spec = ImportDefaultSpecifier(Identifier("foo"))
        assert ImportDeclaration("./*.js", [spec]).default_specifier == spec

    def test_no_specifiers(self):
        assert ImportDeclaration("./a.css").default_specifier is None

    def test_named_is_not_default(self):
        decl = ImportDeclaration("./a.js", [ImportSpecifier(Identifier("a"))])
        assert decl.default_specifier is None

    def test_namespace_is_not_default(self):
        decl = ImportDeclaration("./a.js", [ImportNamespaceSpecifier(Identifier("ns"))])
        assert decl.default_specifier is None

    def test_default_with_extra_specifier_is_not_single_default(self):
        decl = ImportDeclaration(
            "./a.js",
            [ImportDefaultSpecifier(Identifier("a")), ImportSpecifier(Identifier("b"))],
        )
        assert decl.default_specifier is None


class TestModule:
    def test_imports_only_returns_declarations(self):
        decl = ImportDeclaration("./a.js", [ImportDefaultSpecifier(Identifier("a"))])
        module = Module([RawStatement("x;\n"), decl])
        assert module.imports == [decl]

    def test_var_kind_values(self):
        assert VarKind.CONST.value == "const"
        assert VarKind.LET.value == "let"
        assert VarKind.VAR.value == "var"
