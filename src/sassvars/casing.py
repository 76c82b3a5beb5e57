"""Case conversion between stylesheet names and output names.

Converters follow the change-case naming family::

    param     my-cool-var
    constant  MY_COOL_VAR
    camel     myCoolVar
    pascal    MyCoolVar
    snake     my_cool_var

Every converter is a pure ``str -> str`` function.  Two are configured per
engine: ``sass_case`` maps a requested (output) name to the name declared in
the stylesheet, ``output_case`` maps a declared name to the exposed key.
"""

from __future__ import annotations

import re
from typing import Callable

from sassvars.errors import ConfigError

__all__ = ["CaseFn", "CASES", "identity", "resolve_case", "split_words"]

CaseFn = Callable[[str], str]

# lower/digit followed by upper: "myVar" -> "my Var"
_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
# run of capitals followed by a capitalized word: "HTMLColor" -> "HTML Color"
_UPPER_WORD_RE = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]+")


def split_words(text: str) -> list[str]:
    """Split *text* into words on case boundaries and non-alphanumerics."""
    text = _LOWER_UPPER_RE.sub(r"\1 \2", text)
    text = _UPPER_WORD_RE.sub(r"\1 \2", text)
    return [w for w in _SEPARATOR_RE.split(text) if w]


def identity(text: str) -> str:
    return text


def no_case(text: str) -> str:
    return " ".join(w.lower() for w in split_words(text))


def camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(w.capitalize() for w in rest)


def pascal_case(text: str) -> str:
    return "".join(w.capitalize() for w in split_words(text))


def constant_case(text: str) -> str:
    return "_".join(w.upper() for w in split_words(text))


def snake_case(text: str) -> str:
    return "_".join(w.lower() for w in split_words(text))


def param_case(text: str) -> str:
    return "-".join(w.lower() for w in split_words(text))


def dot_case(text: str) -> str:
    return ".".join(w.lower() for w in split_words(text))


def path_case(text: str) -> str:
    return "/".join(w.lower() for w in split_words(text))


def header_case(text: str) -> str:
    return "-".join(w.capitalize() for w in split_words(text))


def lower_case(text: str) -> str:
    return text.lower()


def upper_case(text: str) -> str:
    return text.upper()


CASES: dict[str, CaseFn] = {
    "identity": identity,
    "no": no_case,
    "camel": camel_case,
    "pascal": pascal_case,
    "constant": constant_case,
    "snake": snake_case,
    "param": param_case,
    "kebab": param_case,
    "hyphen": param_case,
    "dot": dot_case,
    "path": path_case,
    "header": header_case,
    "lower": lower_case,
    "upper": upper_case,
}

_SUFFIX_RE = re.compile(r"[-_]?case$", re.IGNORECASE)


def _normalize(name: str) -> str:
    # "camelCase", "camel_case", "camel-case" and "camel" are all "camel"
    return _SUFFIX_RE.sub("", name.strip()).lower()


def resolve_case(case: str | CaseFn | None) -> CaseFn:
    """Return the converter for *case*.

    ``None`` (or an empty string) means no conversion.  Strings are looked up
    in :data:`CASES`; callables are returned unchanged.
    """
    if case is None or case == "":
        return identity
    if callable(case):
        return case
    try:
        return CASES[_normalize(case)]
    except KeyError:
        known = ", ".join(sorted(CASES))
        raise ConfigError(f"unknown case {case!r} (expected one of: {known})") from None
