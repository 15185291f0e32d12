"""In-memory model of ECMAScript import declarations.

The rewrite engine never parses or prints source text. Hosts hand it
``ImportDeclaration`` values and receive new ones back; a host backed by
a real syntax tree can supply its own :class:`NodeFactory` so that the
engine constructs native nodes instead of these dataclasses.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Union


@dataclass(frozen=True)
class DefaultSpecifier:
    """``import local from 'module'``"""

    local: str


@dataclass(frozen=True)
class NamespaceSpecifier:
    """``import * as local from 'module'``"""

    local: str


@dataclass(frozen=True)
class NamedSpecifier:
    """``import { imported as local } from 'module'``

    ``local`` defaults to ``imported`` when the member is not aliased.
    """

    imported: str
    local: str = ""

    def __post_init__(self) -> None:
        if not self.local:
            object.__setattr__(self, "local", self.imported)

    @property
    def is_aliased(self) -> bool:
        return self.local != self.imported


Specifier = Union[DefaultSpecifier, NamespaceSpecifier, NamedSpecifier]


@dataclass(frozen=True)
class ImportDeclaration:
    """A single ``import`` statement: a source module and its specifiers."""

    source: str
    specifiers: tuple[Specifier, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.specifiers, tuple):
            object.__setattr__(self, "specifiers", tuple(self.specifiers))

    @property
    def is_style_only(self) -> bool:
        """True for side-effect imports such as ``import 'lib/style.css'``."""
        return not self.specifiers

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping suitable for YAML or JSON output."""
        return {
            "source": self.source,
            "specifiers": [specifier_to_dict(s) for s in self.specifiers],
        }


def specifier_to_dict(specifier: Specifier) -> dict[str, str]:
    if isinstance(specifier, NamedSpecifier):
        return {"type": "named", "imported": specifier.imported, "local": specifier.local}
    if isinstance(specifier, NamespaceSpecifier):
        return {"type": "namespace", "local": specifier.local}
    return {"type": "default", "local": specifier.local}


class NodeFactory(Protocol):
    """Constructor interface the engine uses to build replacement nodes."""

    def import_declaration(self, specifiers: list[Any], source: str) -> Any: ...

    def default_specifier(self, local: str) -> Any: ...


class DataclassNodeFactory:
    """Builds the dataclass nodes defined in this module."""

    def import_declaration(self, specifiers: list[Specifier], source: str) -> ImportDeclaration:
        return ImportDeclaration(source=source, specifiers=tuple(specifiers))

    def default_specifier(self, local: str) -> DefaultSpecifier:
        return DefaultSpecifier(local=local)


DEFAULT_FACTORY = DataclassNodeFactory()
