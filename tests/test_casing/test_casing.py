"""Tests for case conversion."""

import pytest

from sassvars.casing import CASES, identity, resolve_case, split_words
from sassvars.errors import ConfigError


class TestSplitWords:
    @pytest.mark.parametrize(
        "text, words",
        [
            ("my-var", ["my", "var"]),
            ("MY_VAR", ["MY", "VAR"]),
            ("coolVarBro", ["cool", "Var", "Bro"]),
            ("HTMLColor", ["HTML", "Color"]),
            ("grid-12-col", ["grid", "12", "col"]),
            ("--leading--", ["leading"]),
            ("", []),
        ],
    )
    def test_split(self, text, words):
        assert split_words(text) == words


class TestConverters:
    def test_constant(self):
        assert resolve_case("constant")("another-cool-var") == "ANOTHER_COOL_VAR"

    def test_camel(self):
        assert resolve_case("camel")("cool-var-bro") == "coolVarBro"

    def test_pascal(self):
        assert resolve_case("pascal")("cool-var-bro") == "CoolVarBro"

    def test_param(self):
        assert resolve_case("param")("coolVarBro") == "cool-var-bro"
        assert resolve_case("kebab") is resolve_case("param")

    def test_snake(self):
        assert resolve_case("snake")("MY_VAR") == "my_var"

    def test_dot_path_header(self):
        assert resolve_case("dot")("my-var") == "my.var"
        assert resolve_case("path")("my-var") == "my/var"
        assert resolve_case("header")("my-var") == "My-Var"

    def test_lower_upper_no(self):
        assert resolve_case("lower")("My-Var") == "my-var"
        assert resolve_case("upper")("my-var") == "MY-VAR"
        assert resolve_case("no")("myVar") == "my var"

    def test_all_converters_are_deterministic(self):
        for fn in CASES.values():
            assert fn("some-Name_1") == fn("some-Name_1")


class TestResolveCase:
    def test_none_is_identity(self):
        assert resolve_case(None) is identity
        assert resolve_case("") is identity

    @pytest.mark.parametrize("spelling", ["camel", "camelCase", "camel_case", "camel-case", "CamelCase"])
    def test_spellings(self, spelling):
        assert resolve_case(spelling)("a-b") == "aB"

    def test_callable_passthrough(self):
        fn = str.title
        assert resolve_case(fn) is fn

    def test_unknown(self):
        with pytest.raises(ConfigError, match="unknown case"):
            resolve_case("sarcastic")


class TestRoundTrip:
    @pytest.mark.parametrize(
        "sass_case, output_case, name",
        [
            ("param", "constant", "my-var"),
            ("param", "camel", "another-cool-var"),
            ("camel", "constant", "coolVarBro"),
            ("snake", "pascal", "dark_var"),
        ],
    )
    def test_inverse_pairs_recover_name(self, sass_case, output_case, name):
        to_output = resolve_case(output_case)
        to_sass = resolve_case(sass_case)
        assert to_sass(to_output(name)) == name
