"""Tests for dialect inference and import path resolution."""

from pathlib import Path

import pytest

from sassvars.errors import ImportResolutionError, UnknownExtensionError
from sassvars.model import Dialect, SourceFile
from sassvars.sources import resolve_import, resolve_source

from tests.helpers import FIXTURES

PROBE = FIXTURES / "probe"


class TestExplicitExtension:
    def test_scss(self):
        assert resolve_source(PROBE / "only_scss.scss") == SourceFile(
            path=PROBE / "only_scss.scss", dialect=Dialect.SCSS
        )

    def test_sass(self):
        assert resolve_source(PROBE / "only_sass.sass") == SourceFile(
            path=PROBE / "only_sass.sass", dialect=Dialect.SASS
        )

    def test_accepts_strings(self):
        source = resolve_source(str(PROBE / "only_scss.scss"))
        assert source.path == PROBE / "only_scss.scss"

    def test_partial_with_extension(self):
        source = resolve_source(PROBE / "partial.scss")
        assert source.path == PROBE / "_partial.scss"

    def test_missing_file(self):
        with pytest.raises(ImportResolutionError):
            resolve_source(PROBE / "nope.scss")

    def test_unknown_extension(self):
        with pytest.raises(UnknownExtensionError) as exc_info:
            resolve_source("abc.html")
        assert exc_info.value.extension == ".html"


class TestProbing:
    def test_probes_scss(self):
        assert resolve_source(PROBE / "only_scss").dialect is Dialect.SCSS

    def test_probes_sass(self):
        assert resolve_source(PROBE / "only_sass").dialect is Dialect.SASS

    def test_sass_wins_when_both_exist(self):
        source = resolve_source(PROBE / "both")
        assert source == SourceFile(path=PROBE / "both.sass", dialect=Dialect.SASS)

    def test_probes_partial(self):
        assert resolve_source(PROBE / "partial").path == PROBE / "_partial.scss"

    def test_nothing_found(self):
        with pytest.raises(ImportResolutionError) as exc_info:
            resolve_source(PROBE / "nothing")
        assert "nothing" in str(exc_info.value)

    def test_relative_path_made_absolute(self, monkeypatch):
        monkeypatch.chdir(PROBE)
        source = resolve_source("only_scss")
        assert source.path.is_absolute()
        assert source.path == PROBE / "only_scss.scss"


class TestResolveImport:
    def test_relative_to_importing_directory(self):
        assert resolve_import(FIXTURES / "entry.scss", "indented") == FIXTURES / "indented"

    def test_parent_directory(self):
        assert resolve_import(PROBE / "both.scss", "../entry.scss") == FIXTURES / "entry.scss"

    def test_absolute_import(self, tmp_path: Path):
        target = tmp_path / "abs.scss"
        assert resolve_import(FIXTURES / "entry.scss", str(target)) == target
