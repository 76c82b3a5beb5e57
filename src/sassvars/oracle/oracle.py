"""The value oracle: computes variable values by asking the Sass compiler."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from sassvars.casing import CaseFn, identity
from sassvars.errors import MarkerNotFoundError
from sassvars.model.source import SourceFile
from sassvars.oracle.markers import MarkerFactory
from sassvars.oracle.render import LibsassRenderer, Renderer
from sassvars.oracle.scrape import MarkerScraper

logger = logging.getLogger(__name__)

_IDENT_RE = re.compile(r"^[\w-]+$")


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class ValueOracle:
    """Resolve variable values of a stylesheet by rendering a probe stylesheet.

    For every requested name the probe emits one custom property, named by a
    unique marker, whose value is the interpolated ``inspect()`` of the
    variable.  Variables that do not exist emit nothing, so they surface as
    missing markers.
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        markers: MarkerFactory | None = None,
        scraper: MarkerScraper | None = None,
    ) -> None:
        self.renderer = renderer or LibsassRenderer()
        self.markers = markers or MarkerFactory()
        self.scraper = scraper or MarkerScraper()

    def build_source(self, source: SourceFile, markers: dict[str, str]) -> str:
        lines = [f"@import {_quote(source.path.as_posix())};", f"{self.markers.block_selector} {{"]
        for name, marker in markers.items():
            lines.append(f"  @if variable-exists({_quote(name)}) {{")
            lines.append(f"    {marker}: #{{inspect(${name})}};")
            lines.append("  }")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def resolve(
        self,
        source: SourceFile,
        names: Iterable[str],
        case_fn: CaseFn = identity,
    ) -> dict[str, str]:
        """Return ``{case_fn(name): value}`` for each stylesheet-case *name*.

        Raises :class:`MarkerNotFoundError` if any value cannot be recovered
        and :class:`RenderError` if the compiler rejects the probe.
        """
        names = list(dict.fromkeys(names))
        if not names:
            return {}
        invalid = [name for name in names if not _IDENT_RE.match(name)]
        if invalid:
            raise MarkerNotFoundError(invalid, detail=MarkerNotFoundError.INVALID_NAME)

        markers = self.markers.markers(names)
        logger.debug("resolving %d variable(s) from %s", len(markers), source.path)
        css = self.renderer.render(self.build_source(source, markers))
        values = self.scraper.scrape(css, markers)
        return {case_fn(name): value for name, value in values.items()}
