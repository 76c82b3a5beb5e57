"""sassvars: computed Sass/SCSS variable values as build-time constants."""
from __future__ import annotations

__version__ = "0.1.0"

from sassvars.config import LookupConfig
from sassvars.discovery import NameDiscovery, discover_names
from sassvars.errors import (
    CaseMismatchError,
    ConfigError,
    ImportResolutionError,
    MarkerNotFoundError,
    ParseError,
    RenderError,
    SassVarsError,
    UnknownExtensionError,
)
from sassvars.lookup import VarLookup

__all__ = [
    "__version__",
    "LookupConfig",
    "NameDiscovery",
    "discover_names",
    "VarLookup",
    "SassVarsError",
    "ParseError",
    "ImportResolutionError",
    "UnknownExtensionError",
    "RenderError",
    "MarkerNotFoundError",
    "CaseMismatchError",
    "ConfigError",
]
