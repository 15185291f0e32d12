"""Partition import specifiers into whole-module and member imports.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from collections.abc import Iterable
from typing import Any

from .nodes import NamedSpecifier


def is_member_specifier(specifier: Any) -> bool:
    """Return True for named specifiers (``{ Grid }``, ``{ Row as row }``)."""
    return isinstance(specifier, NamedSpecifier)


def classify(specifiers: Iterable[Any]) -> tuple[list[Any], list[Any]]:
    """Split ``specifiers`` into ``(full, member)`` lists, preserving order.

    Default and namespace specifiers bind the whole module and go to
    ``full``; named specifiers go to ``member``.
    """
    full: list[Any] = []
    member: list[Any] = []
    for specifier in specifiers:
        (member if is_member_specifier(specifier) else full).append(specifier)
    return full, member
