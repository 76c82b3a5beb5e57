from __future__ import annotations

from pathlib import Path

from sassvars.oracle import LibsassRenderer

FIXTURES = Path(__file__).parent / "fixtures"


class CountingRenderer:
    """Wraps a renderer and records every source it is asked to render."""

    def __init__(self, inner=None) -> None:
        self.inner = inner or LibsassRenderer()
        self.sources: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.sources)

    def render(self, source: str) -> str:
        self.sources.append(source)
        return self.inner.render(source)


class StaticRenderer:
    """Returns canned CSS and records the sources it was given."""

    def __init__(self, css: str) -> None:
        self.css = css
        self.sources: list[str] = []

    def render(self, source: str) -> str:
        self.sources.append(source)
        return self.css
