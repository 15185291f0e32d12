"""Case conversion for imported member names.

Member names are split into words the way lodash does it, Unicode
letters included, so paths generated here match those produced by the
JavaScript tooling the configuration format comes from.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

import re
from enum import Enum

# Matched against one class letter per character of the name: U upper-case,
# L other letter, D digit, space for separators. Upper-case run before a
# capitalized word, capitalized/lower word, upper-case run, digit run.
_WORD_RE = re.compile(r"U+(?=UL)|U?L+|U+|D+")


class Casing(Enum):
    """Name transformation applied to a member before path resolution."""

    NONE = "none"
    CAMEL = "camel"
    KEBAB = "kebab"
    SNAKE = "snake"


def _char_class(char: str) -> str:
    if char.isupper():
        return "U"
    if char.isalpha():
        return "L"
    if char.isdigit():
        return "D"
    return " "


def split_words(name: str) -> list[str]:
    """Split ``name`` into words on case transitions, digits and separators.

    >>> split_words("XMLHttpRequest2")
    ['XML', 'Http', 'Request', '2']
    """
    classes = "".join(_char_class(c) for c in name)
    return [name[m.start() : m.end()] for m in _WORD_RE.finditer(classes)]


def camel_case(name: str) -> str:
    words = [w.lower() for w in split_words(name)]
    if not words:
        return ""
    return words[0] + "".join(w.capitalize() for w in words[1:])


def kebab_case(name: str) -> str:
    return "-".join(w.lower() for w in split_words(name))


def snake_case(name: str) -> str:
    return "_".join(w.lower() for w in split_words(name))


_CONVERTERS = {
    Casing.CAMEL: camel_case,
    Casing.KEBAB: kebab_case,
    Casing.SNAKE: snake_case,
}


def apply_case(name: str, casing: Casing) -> str:
    """Return ``name`` converted according to ``casing`` (identity for ``NONE``)."""
    converter = _CONVERTERS.get(casing)
    if converter is None:
        return name
    return converter(name)


def casing_from_flags(camel: bool = False, kebab: bool = False, snake: bool = False) -> Casing:
    """Map the legacy ``camelCase``/``kebabCase``/``snakeCase`` booleans to one ``Casing``.

    When several flags are set the first one in camel, kebab, snake order
    wins without complaint, matching existing configurations.
    """
    if camel:
        return Casing.CAMEL
    if kebab:
        return Casing.KEBAB
    if snake:
        return Casing.SNAKE
    return Casing.NONE
