"""Top-level statements of a parsed stylesheet.

Only the statements that matter for variable discovery are modelled.
Rulesets, mixins and every other construct are parsed (so malformed input is
still rejected) but leave no trace in the model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class VariableDeclaration:
    """``$name: value`` at the top level of a file."""

    name: str  # without the leading "$"
    line: int | None = None


@dataclass(frozen=True)
class ImportDirective:
    """``@import "a", "b"`` at the top level of a file.

    ``paths`` holds the unquoted path literals.  ``followable`` is False when
    any argument is not a quoted literal or the import is a plain CSS import,
    in which case the compiler does not load it as Sass.
    """

    paths: tuple[str, ...]
    followable: bool = True
    line: int | None = None


Statement = Union[VariableDeclaration, ImportDirective]


@dataclass(frozen=True)
class Stylesheet:
    """Top-level declarations and imports in source order."""

    statements: list[Statement] = field(default_factory=list)

    @property
    def variables(self) -> list[VariableDeclaration]:
        return [s for s in self.statements if isinstance(s, VariableDeclaration)]

    @property
    def imports(self) -> list[ImportDirective]:
        return [s for s in self.statements if isinstance(s, ImportDirective)]
