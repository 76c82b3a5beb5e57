"""Name discovery: every variable declared in a file's import closure."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from sassvars.model.stylesheet import VariableDeclaration
from sassvars.parser import parse_stylesheet
from sassvars.sources import resolve_import, resolve_source

logger = logging.getLogger(__name__)

__all__ = ["NameDiscovery", "discover_names"]


class NameDiscovery:
    """Collect top-level variable names from a stylesheet and its imports.

    Each call walks the import graph from scratch.  A file reached twice in
    one walk (an import cycle, or two imports of a shared file) is parsed only
    once; the resulting name set is the same as for a full traversal.
    """

    def discover(self, path: str | os.PathLike[str]) -> set[str]:
        names: set[str] = set()
        self._walk(Path(path), names, visited=set())
        return names

    def _walk(self, path: Path, names: set[str], visited: set[Path]) -> None:
        source = resolve_source(path)
        if source.path in visited:
            logger.debug("already visited %s, skipping", source.path)
            return
        visited.add(source.path)

        stylesheet = parse_stylesheet(source.read(), source.dialect, path=source.path)
        for statement in stylesheet.statements:
            if isinstance(statement, VariableDeclaration):
                names.add(statement.name)
                continue
            if not statement.followable:
                logger.debug(
                    "%s:%s: not following import %s",
                    source.path,
                    statement.line,
                    ", ".join(statement.paths) or "<none>",
                )
                continue
            for import_path in statement.paths:
                self._walk(resolve_import(source.path, import_path), names, visited)


def discover_names(path: str | os.PathLike[str]) -> set[str]:
    """Return the set of variable names declared in *path*'s import closure."""
    return NameDiscovery().discover(path)
