"""Error hierarchy for variable extraction."""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class SassVarsError(Exception):
    """Base error for all sassvars errors."""


class ConfigError(SassVarsError):
    """Invalid engine options, e.g. an unknown case converter name."""


class ParseError(SassVarsError):
    """Raised when a stylesheet cannot be parsed by its dialect's grammar."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.path = path
        self.line = line
        self.column = column
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class ImportResolutionError(SassVarsError):
    """An ``@import`` or entry path does not match any existing file."""

    def __init__(self, path: Path | str) -> None:
        self.path = path
        super().__init__(f"invalid import {path}")


class UnknownExtensionError(SassVarsError):
    """The path has an extension that is neither ``.sass`` nor ``.scss``."""

    def __init__(self, path: Path | str, extension: str) -> None:
        self.path = path
        self.extension = extension
        super().__init__(f"unknown file extension {extension!r} ({path})")


class RenderError(SassVarsError):
    """The Sass compiler rejected the synthesized stylesheet."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class MarkerNotFoundError(SassVarsError):
    """One or more markers could not be located in the rendered output.

    This is an internal consistency failure between the synthesized
    stylesheet and what the compiler printed.
    """

    NOT_FOUND = "not found"
    INVALID_NAME = "not a valid variable name"

    def __init__(self, names: Iterable[str], detail: str = NOT_FOUND) -> None:
        self.names = sorted(set(names))
        self.detail = detail
        super().__init__(
            f"value marker {detail} in rendered output for: " + ", ".join(self.names)
        )


class CaseMismatchError(SassVarsError):
    """Requested names do not correspond to any declared stylesheet variable."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = sorted(set(names))
        super().__init__(
            "import names must be declared and in the same case as `output_case`: "
            + ", ".join(self.names)
        )
