"""Renderers: the Sass compiler seen as a text -> text function."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Protocol

import sass

from sassvars.errors import RenderError

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Compile SCSS source text to CSS text."""

    def render(self, source: str) -> str: ...


class LibsassRenderer:
    """Render with libsass through the ``sass`` module."""

    def __init__(
        self,
        output_style: str = "expanded",
        include_paths: Sequence[str] = (),
        precision: int | None = None,
    ) -> None:
        self.output_style = output_style
        self.include_paths = list(include_paths)
        self.precision = precision

    def render(self, source: str) -> str:
        kwargs: dict[str, object] = {
            "string": source,
            "output_style": self.output_style,
            "include_paths": self.include_paths,
        }
        if self.precision is not None:
            kwargs["precision"] = self.precision
        start = time.monotonic()
        try:
            css = sass.compile(**kwargs)
        except sass.CompileError as e:
            raise RenderError(f"Sass compilation failed: {e}", cause=e) from e
        logger.debug(
            "rendered %d bytes of source in %.3fs", len(source), time.monotonic() - start
        )
        return css
