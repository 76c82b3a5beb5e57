"""Variable lookup engine: discovery, oracle and cache wired together."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from sassvars.cache import ResolutionCache
from sassvars.config import LookupConfig
from sassvars.discovery import NameDiscovery
from sassvars.errors import CaseMismatchError, MarkerNotFoundError
from sassvars.oracle import LibsassRenderer, MarkerFactory, Renderer, ValueOracle
from sassvars.sources import resolve_source

logger = logging.getLogger(__name__)


class VarLookup:
    """Resolve Sass variables of stylesheet files, memoized per file.

    Every engine owns its own :class:`ResolutionCache`; engines configured
    with different case conventions never share resolved values.  Both
    extraction methods return the complete cached mapping for the file, which
    may contain names resolved by earlier requests.
    """

    def __init__(
        self,
        config: LookupConfig | None = None,
        renderer: Renderer | None = None,
        markers: MarkerFactory | None = None,
    ) -> None:
        self.config = config or LookupConfig()
        self._sass_case = self.config.sass_case_fn
        self._output_case = self.config.output_case_fn
        if renderer is None:
            renderer = LibsassRenderer(
                output_style=self.config.output_style,
                include_paths=self.config.include_paths,
                precision=self.config.precision,
            )
        self.oracle = ValueOracle(renderer=renderer, markers=markers)
        self.discovery = NameDiscovery()
        self.cache = ResolutionCache()

    def extract_all(self, path: str | os.PathLike[str]) -> dict[str, str]:
        """Return every variable of *path*'s import closure, keyed in output case."""
        source = resolve_source(path)
        key = source.path
        if self.cache.is_complete(key):
            logger.debug("cache hit: all variables of %s", key)
            return self.cache.get(key)

        logger.debug("cache miss: all variables of %s", key)
        names = sorted(self.discovery.discover(key))
        known = self.cache.get(key)
        pending = [name for name in names if self._output_case(name) not in known]
        values = self.oracle.resolve(source, pending, self._output_case)
        self.cache.merge(key, values)
        self.cache.mark_complete(key)
        return self.cache.get(key)

    def extract_named(
        self, path: str | os.PathLike[str], names: Iterable[str]
    ) -> dict[str, str]:
        """Make sure the output-case *names* are resolved for *path*.

        Only names not cached yet are sent to the oracle.  Raises
        :class:`CaseMismatchError` when a requested name does not map to a
        declared variable under the configured case functions.
        """
        if isinstance(names, str):
            names = [names]
        requested = list(dict.fromkeys(names))
        source = resolve_source(path)
        key = source.path

        missing = self.cache.missing(key, requested)
        if not missing:
            logger.debug("cache hit: %s from %s", ", ".join(requested), key)
            return self.cache.get(key)

        logger.debug("cache miss: %s from %s", ", ".join(missing), key)
        sass_names = {name: self._sass_case(name) for name in missing}
        try:
            values = self.oracle.resolve(source, sass_names.values(), self._output_case)
        except MarkerNotFoundError as e:
            if e.detail not in (MarkerNotFoundError.NOT_FOUND, MarkerNotFoundError.INVALID_NAME):
                raise
            undeclared = set(e.names)
            raise CaseMismatchError(
                name for name, sass_name in sass_names.items() if sass_name in undeclared
            ) from e

        merged = self.cache.merge(key, values)
        unresolved = [name for name in requested if name not in merged]
        if unresolved:
            raise CaseMismatchError(unresolved)
        return dict(merged)

    def extract(self, path: str | os.PathLike[str], name: str) -> str:
        """Return the value of the single output-case variable *name*."""
        return self.extract_named(path, [name])[name]
