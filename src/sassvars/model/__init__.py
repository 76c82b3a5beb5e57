from sassvars.model.source import Dialect, SourceFile
from sassvars.model.stylesheet import (
    ImportDirective,
    Statement,
    Stylesheet,
    VariableDeclaration,
)

__all__ = [
    "Dialect",
    "SourceFile",
    "ImportDirective",
    "Statement",
    "Stylesheet",
    "VariableDeclaration",
]
