"""Render resolved bindings as a Python constants module."""

from __future__ import annotations

import keyword
from collections.abc import Mapping

from sassvars.transforms import Bindings

_HEADER = '''"""Constants generated from {source}. Do not edit."""

from types import MappingProxyType
'''


def _check_identifier(name: str) -> None:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise ValueError(f"{name!r} is not a valid Python identifier")


def _render_mapping(values: Mapping[str, str]) -> str:
    if not values:
        return "MappingProxyType({})"
    lines = ["MappingProxyType({"]
    for key in sorted(values):
        lines.append(f"    {key!r}: {values[key]!r},")
    lines.append("})")
    return "\n".join(lines)


def render_module(bindings: Bindings, source: str = "a stylesheet") -> str:
    """Return Python source binding each name in *bindings* to its value.

    Mappings become read-only ``MappingProxyType`` constants; plain values
    become string constants.
    """
    parts = [_HEADER.format(source=source)]
    for name, value in bindings.items():
        _check_identifier(name)
        if isinstance(value, Mapping):
            parts.append(f"{name} = {_render_mapping(value)}")
        else:
            parts.append(f"{name} = {value!r}")
    return "\n".join(parts) + "\n"
