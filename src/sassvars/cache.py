"""Per-engine store of resolved variable values."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class ResolutionCache:
    """Resolved ``{output name: value}`` entries keyed by absolute file path.

    Entries only grow: a cached name is never removed, and a later value for
    the same name never replaces the first one.  Not thread-safe; one cache
    belongs to one engine.
    """

    def __init__(self) -> None:
        self._entries: dict[Path, dict[str, str]] = {}
        self._complete: set[Path] = set()

    def __contains__(self, path: Path) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def entry(self, path: Path) -> dict[str, str]:
        """The live entry for *path*, created empty on first access."""
        return self._entries.setdefault(path, {})

    def get(self, path: Path) -> dict[str, str]:
        """A copy of the entry for *path*."""
        return dict(self._entries.get(path, {}))

    def missing(self, path: Path, names: Iterable[str]) -> list[str]:
        """Names from *names* not yet cached for *path*, in request order."""
        known = self._entries.get(path, {})
        return [name for name in dict.fromkeys(names) if name not in known]

    def merge(self, path: Path, values: Mapping[str, str]) -> dict[str, str]:
        """Insert new names from *values*; returns the live entry."""
        entry = self.entry(path)
        for name, value in values.items():
            if name not in entry:
                entry[name] = value
            elif entry[name] != value:
                logger.warning(
                    "%s: keeping cached value %r for %s, ignoring %r",
                    path,
                    entry[name],
                    name,
                    value,
                )
        return entry

    def mark_complete(self, path: Path) -> None:
        """Record that every declared name of *path* has been resolved."""
        self.entry(path)
        self._complete.add(path)

    def is_complete(self, path: Path) -> bool:
        return path in self._complete
