"""
Test suite for package syntax and structure validation.

Validates:
1. All Python modules have valid syntax
2. All library modules import cleanly
3. Public exports are present
"""

import ast
import importlib

import pytest


class TestPackageSyntaxValidation:
    """Validate Python syntax in all package modules."""

    def test_all_files_have_valid_syntax(self, python_files_in_package):
        """All Python files should parse without syntax errors."""
        errors = []

        for py_file in python_files_in_package:
            try:
                ast.parse(py_file.read_text(encoding="utf-8"))
            except SyntaxError as e:
                errors.append(f"{py_file}: {e.msg} (line {e.lineno})")

        assert not errors, "Syntax errors found:\n" + "\n".join(errors)

    def test_entry_point_defines_main(self, package_root):
        """The Pulumi entry point should define and call main()."""
        tree = ast.parse((package_root / "__main__.py").read_text(encoding="utf-8"))

        functions = {n.name for n in tree.body if isinstance(n, ast.FunctionDef)}
        calls = [
            n.value.func.id
            for n in tree.body
            if isinstance(n, ast.Expr) and isinstance(n.value, ast.Call) and isinstance(n.value.func, ast.Name)
        ]
        assert "main" in functions
        assert "main" in calls


class TestPackageImports:
    """Validate that library modules import without side effects."""

    @pytest.mark.parametrize(
        "module",
        [
            "tracer_iac",
            "tracer_iac.exceptions",
            "tracer_iac.schema",
            "tracer_iac.configs",
            "tracer_iac.configs.environment",
            "tracer_iac.sources",
            "tracer_iac.utils",
        ],
    )
    def test_module_importable(self, module):
        """Each library module should import."""
        assert importlib.import_module(module) is not None

    def test_schema_exports(self):
        """Schema package should export its public names."""
        schema = importlib.import_module("tracer_iac.schema")

        for name in schema.__all__:
            assert hasattr(schema, name), f"tracer_iac.schema missing {name}"
