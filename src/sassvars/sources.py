"""Locating stylesheet files and inferring their dialect."""

from __future__ import annotations

import os
from pathlib import Path

from sassvars.errors import ImportResolutionError, UnknownExtensionError
from sassvars.model.source import Dialect, SourceFile

__all__ = ["STYLESHEET_EXTENSIONS", "resolve_import", "resolve_source"]

STYLESHEET_EXTENSIONS = tuple(d.extension for d in Dialect)

# Probe order for extensionless paths: indented syntax wins over SCSS.
_PROBE_ORDER = (Dialect.SASS, Dialect.SCSS)


def resolve_source(path: str | os.PathLike[str]) -> SourceFile:
    """Return the :class:`SourceFile` for *path*.

    ``.sass`` and ``.scss`` paths are taken as-is (or as the partial
    ``_<name>`` next to them when only that exists).  A path without an
    extension is probed as ``<path>.sass``, ``<path>.scss`` and then as the
    partials ``_<name>.sass``, ``_<name>.scss``; the first existing file wins.
    """
    path = Path(os.path.abspath(path))
    extension = path.suffix

    if extension:
        dialect = Dialect.from_extension(extension)
        if dialect is None:
            raise UnknownExtensionError(path, extension)
        for candidate in (path, path.with_name(f"_{path.name}")):
            if candidate.is_file():
                return SourceFile(path=candidate, dialect=dialect)
        raise ImportResolutionError(path)

    candidates = [path.with_name(f"{path.name}{d.extension}") for d in _PROBE_ORDER]
    candidates += [path.with_name(f"_{path.name}{d.extension}") for d in _PROBE_ORDER]
    for candidate in candidates:
        if candidate.is_file():
            return SourceFile(path=candidate, dialect=Dialect.from_extension(candidate.suffix))
    raise ImportResolutionError(path)


def resolve_import(importing: str | os.PathLike[str], import_path: str) -> Path:
    """Resolve *import_path* against the directory of the *importing* file."""
    return Path(os.path.abspath(Path(importing).parent / import_path))
