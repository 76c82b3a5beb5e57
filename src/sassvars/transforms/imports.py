"""Stylesheet import transform: import requests become constant bindings.

A host (bundler plugin, code generator) describes each import of a
stylesheet it meets in consuming code::

    StylesheetImport("./theme.scss", default="theme", names={"primary": "primary"})

and receives the values to bind in its place: a frozen mapping of every
variable for the default binding, and one plain value per named binding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Union

from sassvars.lookup import VarLookup
from sassvars.sources import STYLESHEET_EXTENSIONS, resolve_import

Value = Union[str, Mapping[str, str]]
Bindings = dict[str, Value]


def is_stylesheet_import(source: str) -> bool:
    """True when an import source refers to a Sass or SCSS file."""
    return source.lower().endswith(STYLESHEET_EXTENSIONS)


@dataclass(frozen=True)
class StylesheetImport:
    """One import statement of a stylesheet in consuming code."""

    source: str  # relative to the importing file
    default: str | None = None  # local name bound to the whole mapping
    names: dict[str, str] = field(default_factory=dict)  # imported -> local


class SassImportTransform:
    """Resolve stylesheet imports through a :class:`VarLookup`."""

    def __init__(self, lookup: VarLookup | None = None) -> None:
        self.lookup = lookup or VarLookup()

    def apply(self, importer: Path | str, request: StylesheetImport) -> Bindings:
        if not is_stylesheet_import(request.source):
            raise ValueError(f"not a stylesheet import: {request.source!r}")

        path = resolve_import(importer, request.source)
        bindings: Bindings = {}

        if request.default is not None:
            bindings[request.default] = MappingProxyType(self.lookup.extract_all(path))

        if request.names:
            values = self.lookup.extract_named(path, request.names.keys())
            for imported, local in request.names.items():
                bindings[local] = values[imported]

        return bindings
