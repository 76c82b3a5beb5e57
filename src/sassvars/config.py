from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from sassvars.casing import CaseFn, resolve_case
from sassvars.errors import ConfigError

# Option spellings accepted from build-tool configuration.
_ALIASES = {
    "sassCase": "sass_case",
    "outputCase": "output_case",
    "outputStyle": "output_style",
    "includePaths": "include_paths",
}

_OUTPUT_STYLES = ("nested", "expanded", "compact", "compressed")


@dataclass(frozen=True)
class LookupConfig:
    """Configuration for one extraction engine."""

    sass_case: str | CaseFn | None = None  # output name -> declared name
    output_case: str | CaseFn | None = None  # declared name -> output name
    output_style: str = "expanded"
    include_paths: tuple[str, ...] = ()
    precision: int | None = None

    def __post_init__(self) -> None:
        # Fail on bad case names at construction, not at the first lookup.
        resolve_case(self.sass_case)
        resolve_case(self.output_case)
        if self.output_style not in _OUTPUT_STYLES:
            raise ConfigError(
                f"unknown output style {self.output_style!r} "
                f"(expected one of: {', '.join(_OUTPUT_STYLES)})"
            )
        if isinstance(self.include_paths, (str, bytes)):
            raise ConfigError("include_paths must be a sequence of paths")
        object.__setattr__(self, "include_paths", tuple(str(p) for p in self.include_paths))

    @property
    def sass_case_fn(self) -> CaseFn:
        return resolve_case(self.sass_case)

    @property
    def output_case_fn(self) -> CaseFn:
        return resolve_case(self.output_case)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> LookupConfig:
        """Build a config from a plain options mapping.

        Accepts both ``sassCase``/``outputCase`` and ``sass_case``/``output_case``
        spellings.  Unknown keys raise :class:`ConfigError`.
        """
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"unknown option {key!r}")
            kwargs[name] = value
        return cls(**kwargs)
