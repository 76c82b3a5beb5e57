"""Tests for the value oracle."""

import pytest

from sassvars.casing import resolve_case
from sassvars.errors import MarkerNotFoundError, RenderError
from sassvars.oracle import LibsassRenderer, MarkerFactory, ValueOracle
from sassvars.sources import resolve_source

from tests.helpers import FIXTURES, CountingRenderer, StaticRenderer

TOKEN = "feedface"


def _oracle(renderer=None) -> ValueOracle:
    return ValueOracle(renderer=renderer or LibsassRenderer(), markers=MarkerFactory(TOKEN))


class TestBuildSource:
    def test_probe_layout(self):
        source = resolve_source(FIXTURES / "cases.scss")
        oracle = _oracle()
        text = oracle.build_source(source, oracle.markers.markers(["my-var"]))
        assert text.splitlines() == [
            f'@import "{(FIXTURES / "cases.scss").as_posix()}";',
            f"#vars_{TOKEN} {{",
            '  @if variable-exists("my-var") {',
            f"    --my-var_{TOKEN}: #{{inspect($my-var)}};",
            "  }",
            "}",
        ]


class TestResolveWithCannedOutput:
    def test_case_applied_to_names_not_values(self):
        css = f"#vars_{TOKEN} {{\n  --my-var_{TOKEN}: Some-Value;\n}}\n"
        oracle = _oracle(StaticRenderer(css))
        source = resolve_source(FIXTURES / "cases.scss")
        values = oracle.resolve(source, ["my-var"], resolve_case("constant"))
        assert values == {"MY_VAR": "Some-Value"}

    def test_empty_request_skips_render(self):
        renderer = StaticRenderer("")
        values = _oracle(renderer).resolve(resolve_source(FIXTURES / "cases.scss"), [])
        assert values == {}
        assert renderer.sources == []

    def test_invalid_name_rejected_before_render(self):
        renderer = StaticRenderer("")
        with pytest.raises(MarkerNotFoundError) as exc_info:
            _oracle(renderer).resolve(resolve_source(FIXTURES / "cases.scss"), ["not a name"])
        assert exc_info.value.detail == MarkerNotFoundError.INVALID_NAME
        assert renderer.sources == []


    def test_names_accepted_like_declarations(self):
        css = f"#vars_{TOKEN} {{\n  --élan_{TOKEN}: 3px;\n  ----x_{TOKEN}: 2;\n}}\n"
        oracle = _oracle(StaticRenderer(css))
        values = oracle.resolve(resolve_source(FIXTURES / "cases.scss"), ["élan", "--x"])
        assert values == {"élan": "3px", "--x": "2"}


class TestResolveWithLibsass:
    def test_simple_values(self):
        source = resolve_source(FIXTURES / "cases.scss")
        values = _oracle().resolve(source, ["my-var", "another-cool-var"])
        assert values == {"my-var": "1rem", "another-cool-var": "turquoise"}

    def test_imported_and_map_values(self):
        source = resolve_source(FIXTURES / "entry.scss")
        values = _oracle().resolve(source, ["scssvar", "sassvar", "mapvar"])
        assert values == {"scssvar": "69", "sassvar": "42", "mapvar": "(abc: 123)"}

    def test_computed_and_string_values(self):
        source = resolve_source(FIXTURES / "strings.scss")
        values = _oracle().resolve(source, ["copy-var", "test-var"])
        assert values == {"copy-var": "red", "test-var": '"red; blue"'}

    def test_indented_entry(self):
        source = resolve_source(FIXTURES / "indented.sass")
        assert _oracle().resolve(source, ["sassvar"]) == {"sassvar": "42"}

    def test_undeclared_variable_is_missing_marker(self):
        source = resolve_source(FIXTURES / "cases.scss")
        with pytest.raises(MarkerNotFoundError) as exc_info:
            _oracle().resolve(source, ["my-var", "nope"])
        assert exc_info.value.names == ["nope"]

    def test_single_render_per_call(self):
        renderer = CountingRenderer()
        source = resolve_source(FIXTURES / "cases.scss")
        _oracle(renderer).resolve(source, ["my-var", "another-cool-var"])
        assert renderer.calls == 1

    def test_compiler_error(self):
        source = resolve_source(FIXTURES / "incompatible.scss")
        with pytest.raises(RenderError) as exc_info:
            _oracle().resolve(source, ["bad"])
        assert exc_info.value.cause is not None
