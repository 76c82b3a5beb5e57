"""Source file model: a stylesheet path together with its dialect."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from sassvars.errors import ParseError


class Dialect(str, Enum):
    """The two stylesheet syntaxes, named after their file extensions."""

    SASS = "sass"  # indented syntax
    SCSS = "scss"

    @property
    def extension(self) -> str:
        return f".{self.value}"

    @classmethod
    def from_extension(cls, extension: str) -> Dialect | None:
        for dialect in cls:
            if dialect.extension == extension.lower():
                return dialect
        return None


@dataclass(frozen=True)
class SourceFile:
    """An existing stylesheet on disk."""

    path: Path  # absolute
    dialect: Dialect

    def read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"not valid UTF-8: {e.reason}", path=self.path) from e

    def __str__(self) -> str:
        return str(self.path)
