"""Tests for the rewrite engine."""

import pytest

from modular_imports.casing import Casing
from modular_imports.config import RewriteConfig
from modular_imports.engine import Disposition, RewriteResult, rewrite
from modular_imports.exceptions import ConfigurationError, PolicyError
from modular_imports.nodes import DefaultSpecifier, ImportDeclaration, NamedSpecifier, NamespaceSpecifier
from tests.test_utils import (
    LIBRARY,
    TRANSFORMS_DIR,
    create_config,
    default_import,
    member_import,
    namespace_import,
    sources,
)


class TestImportTransformations:
    def test_unconfigured_module_is_left_alone(self):
        declaration = member_import("Grid", source="react-dom")

        assert rewrite(declaration, create_config()) is None

    def test_default_import_is_unchanged(self):
        assert rewrite(default_import("Bootstrap"), create_config()) is None

    def test_namespace_import_is_unchanged(self):
        assert rewrite(namespace_import("Bootstrap"), create_config()) is None

    def test_member_imports(self):
        result = rewrite(member_import("Grid", "Row as row"), create_config())

        assert sources(result) == ["react-bootstrap/lib/Grid", "react-bootstrap/lib/Row"]
        assert [d.specifiers for d in result.declarations] == [
            (DefaultSpecifier("Grid"),),
            (DefaultSpecifier("row"),),
        ]
        assert result.disposition is Disposition.REPLACE

    def test_mixed_default_and_member_imports(self):
        result = rewrite(member_import("Grid", "Row as row", default="Bootstrap"), create_config())

        first = result.declarations[0]
        assert first.source == LIBRARY
        assert first.specifiers == (DefaultSpecifier("Bootstrap"),)
        assert sources(result)[1:] == ["react-bootstrap/lib/Grid", "react-bootstrap/lib/Row"]
        assert result.styles == ()

    def test_mixed_namespace_keeps_original_source(self):
        declaration = ImportDeclaration(LIBRARY, (NamespaceSpecifier("B"), NamedSpecifier("Grid")))

        result = rewrite(declaration, create_config())

        assert result.declarations[0] == ImportDeclaration(LIBRARY, (NamespaceSpecifier("B"),))

    def test_original_declaration_is_not_mutated(self):
        declaration = member_import("Grid", default="Bootstrap")
        before = ImportDeclaration(declaration.source, declaration.specifiers)

        rewrite(declaration, create_config())

        assert declaration == before

    def test_each_rewritten_declaration_has_one_specifier(self):
        result = rewrite(member_import("A", "B", "C as c"), create_config())

        assert all(len(d.specifiers) == 1 for d in result.declarations)

    def test_template_placeholder_variants(self):
        config = create_config(transform="lib/${ member }/${MEMBER}")

        result = rewrite(member_import("Grid"), config)

        assert sources(result) == ["lib/Grid/Grid"]


class TestConfigurationErrors:
    def test_missing_transform_raises(self):
        config = RewriteConfig.from_dict({LIBRARY: {"style": True}})

        with pytest.raises(ConfigurationError) as excinfo:
            rewrite(member_import("Grid"), config)

        assert "transform option is required for module react-bootstrap" in str(excinfo.value)
        assert excinfo.value.details["module"] == LIBRARY

    def test_missing_transform_raises_before_looking_at_specifiers(self):
        config = RewriteConfig.from_dict({LIBRARY: {"preventFullImport": True}})

        # A full import would otherwise be a policy error.
        with pytest.raises(ConfigurationError):
            rewrite(default_import("Bootstrap"), config)

    def test_missing_transform_ignored_for_other_modules(self):
        config = RewriteConfig.from_dict({LIBRARY: {}})

        assert rewrite(member_import("X", source="lodash"), config) is None


class TestPreventFullImport:
    @pytest.mark.parametrize("declaration", [default_import("Bootstrap"), namespace_import("Bootstrap")])
    def test_full_imports_raise(self, declaration):
        with pytest.raises(PolicyError) as excinfo:
            rewrite(declaration, create_config(preventFullImport=True))

        assert "import of entire module react-bootstrap not allowed" in str(excinfo.value)
        assert excinfo.value.details == {"module": LIBRARY, "policy": "preventFullImport"}

    def test_mixed_import_raises(self):
        with pytest.raises(PolicyError):
            rewrite(member_import("Grid", default="Bootstrap"), create_config(preventFullImport=True))

    def test_member_imports_are_allowed(self):
        result = rewrite(member_import("Grid"), create_config(preventFullImport=True))

        assert sources(result) == ["react-bootstrap/lib/Grid"]


class TestStyleOption:
    def test_default_import_adds_full_style(self):
        result = rewrite(default_import("Bootstrap"), create_config(style=True))

        assert result.transforms == ()
        assert sources(result) == ["react-bootstrap/lib/style.css"]
        assert result.declarations[0].is_style_only
        assert result.disposition is Disposition.INSERT_AFTER

    def test_namespace_import_adds_full_style(self):
        result = rewrite(namespace_import("Bootstrap"), create_config(style=True))

        assert sources(result) == ["react-bootstrap/lib/style.css"]

    def test_empty_style_mapping_adds_full_style(self):
        result = rewrite(default_import("Bootstrap"), create_config(style={}))

        assert sources(result) == ["react-bootstrap/lib/style.css"]
        assert result.disposition is Disposition.INSERT_AFTER

    def test_member_imports_add_member_styles(self):
        result = rewrite(member_import("Grid", "Row as row"), create_config(style=True))

        assert sources(result) == [
            "react-bootstrap/lib/Grid",
            "react-bootstrap/lib/Row",
            "react-bootstrap/lib/Grid/style.css",
            "react-bootstrap/lib/Row/style.css",
        ]
        assert [d.is_style_only for d in result.declarations] == [False, False, True, True]

    def test_named_style(self):
        result = rewrite(member_import("Grid", "Row as row"), create_config(style="index"))

        assert [d.source for d in result.styles] == [
            "react-bootstrap/lib/Grid/index.css",
            "react-bootstrap/lib/Row/index.css",
        ]

    def test_mixed_import_only_adds_full_style(self):
        result = rewrite(member_import("Grid", "Row as row", default="Bootstrap"), create_config(style=True))

        assert [d.source for d in result.styles] == ["react-bootstrap/lib/style.css"]
        assert sources(result)[:3] == [LIBRARY, "react-bootstrap/lib/Grid", "react-bootstrap/lib/Row"]
        assert result.disposition is Disposition.REPLACE

    def test_ignored_styles_with_kebab_case(self):
        config = create_config(kebabCase=True, style={"ignore": ["row"]})

        result = rewrite(member_import("Style", "Grid", "Row as row"), config)

        assert [d.source for d in result.styles] == [
            "react-bootstrap/lib/style/style.css",
            "react-bootstrap/lib/grid/style.css",
        ]
        assert len(result.transforms) == 3

    def test_ignored_full_style(self):
        config = create_config(style={"name": "theme", "ignore": ["theme"]})

        assert rewrite(default_import("Bootstrap"), config) is None

    def test_style_uses_module_style_name_for_full_import(self):
        result = rewrite(default_import("Bootstrap"), create_config(style={"name": "index"}))

        assert sources(result) == ["react-bootstrap/lib/index.css"]


class TestCasingOptions:
    @pytest.mark.parametrize(
        "option, expected",
        [
            ("camelCase", "react-bootstrap/lib/camelMe"),
            ("kebabCase", "react-bootstrap/lib/camel-me"),
            ("snakeCase", "react-bootstrap/lib/camel_me"),
        ],
    )
    def test_casing_flags(self, option, expected):
        result = rewrite(member_import("CamelMe"), create_config(**{option: True}))

        assert sources(result) == [expected]

    def test_casing_applies_to_imported_name_not_alias(self):
        result = rewrite(member_import("KebabMe as Other"), create_config(casing="kebab"))

        assert sources(result) == ["react-bootstrap/lib/kebab-me"]
        assert result.declarations[0].specifiers == (DefaultSpecifier("Other"),)

    def test_first_flag_wins(self):
        config = create_config(camelCase=True, snakeCase=True)

        assert config[LIBRARY].casing is Casing.CAMEL
        assert sources(rewrite(member_import("SnakeMe"), config)) == ["react-bootstrap/lib/snakeMe"]


class TestSkipDefaultConversion:
    def test_keeps_named_specifiers(self):
        declaration = member_import("Grid", "Row as row")

        result = rewrite(declaration, create_config(skipDefaultConversion=True))

        assert [d.specifiers for d in result.declarations] == [
            (NamedSpecifier("Grid"),),
            (NamedSpecifier("Row", "row"),),
        ]
        assert result.declarations[1].specifiers[0] is declaration.specifiers[1]


class TestFunctionTransforms:
    def test_callable_receives_member_name_only(self):
        calls = []

        def transform(*args):
            calls.append(args)
            return f"fn/{args[0]}"

        result = rewrite(member_import("Grid"), create_config(transform=transform))

        assert calls == [("Grid",)]
        assert sources(result) == ["fn/Grid"]

    def test_callable_receives_style_arguments(self):
        calls = []

        def transform(*args):
            calls.append(args)
            return "${member}"

        result = rewrite(member_import("Grid", default="B"), create_config(transform=transform, style=True))

        assert calls == [("style", "style", False), ("Grid",)]
        # Return values are used verbatim.
        assert [d.source for d in result.styles] == ["${member}"]

    def test_callable_style_for_members(self):
        calls = []

        def transform(name, style_name=None, has_import_name=False):
            calls.append((name, style_name, has_import_name))
            return name

        rewrite(member_import("Grid"), create_config(transform=transform, style="index"))

        assert calls == [("Grid", None, False), ("Grid", "index", True)]

    def test_transform_file(self):
        config = create_config(transform=str(TRANSFORMS_DIR / "member_path.py"), style=True)

        result = rewrite(member_import("Grid"), config)

        assert sources(result) == ["custom-lib/grid", "custom-lib/grid/style.css"]


class TestRelativeSources:
    def test_relative_source_resolved_against_file(self, tmp_path):
        library = str(tmp_path / "local" / "path")
        config = create_config(library=library, transform=library + "/${member}", style=True)
        filename = tmp_path / "src.js"

        result = rewrite(member_import("LocalThing", source="./local/path"), config, filename=filename)

        assert sources(result) == [library + "/LocalThing", library + "/LocalThing/style.css"]

    def test_parent_relative_source(self, tmp_path):
        library = str(tmp_path / "shared")
        config = create_config(library=library, transform="shared/${member}")

        result = rewrite(
            member_import("Button", source="../shared"), config, filename=tmp_path / "app" / "index.js"
        )

        assert sources(result) == ["shared/Button"]

    def test_verbatim_relative_key_wins(self, tmp_path):
        config = create_config(library="./components", transform="components/${member}")

        result = rewrite(member_import("Card", source="./components"), config, filename=tmp_path / "a.js")

        assert sources(result) == ["components/Card"]

    def test_mixed_relative_import_keeps_written_source(self, tmp_path):
        library = str(tmp_path / "ui")
        config = create_config(library=library, transform="ui/${member}")

        result = rewrite(member_import("Card", source="./ui", default="UI"), config, filename=tmp_path / "a.js")

        assert result.declarations[0].source == "./ui"


class TestRewriteResult:
    def test_iteration_and_length(self):
        result = RewriteResult(transforms=("a",), styles=("b", "c"))

        assert list(result) == ["a", "b", "c"]
        assert len(result) == 3

    def test_style_only_result_inserts_after(self):
        assert RewriteResult(styles=("b",)).disposition is Disposition.INSERT_AFTER
