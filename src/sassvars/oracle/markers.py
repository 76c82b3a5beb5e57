"""Unique markers that tag each variable's value in rendered output."""

from __future__ import annotations

import uuid
from collections.abc import Iterable


class MarkerFactory:
    """Derive custom-property markers from one random token.

    The token is drawn once per factory, so every marker produced by the same
    engine shares it.  ``--<name>_<token>`` is injective in *name*.
    """

    def __init__(self, token: str | None = None) -> None:
        self.token = token or uuid.uuid4().hex

    @property
    def block_selector(self) -> str:
        return f"#vars_{self.token}"

    def marker(self, name: str) -> str:
        return f"--{name}_{self.token}"

    def markers(self, names: Iterable[str]) -> dict[str, str]:
        """Return ``{name: marker}`` for *names* (duplicates collapsed)."""
        return {name: self.marker(name) for name in names}
