"""Stylesheet imports that accompany rewritten member imports.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .exceptions import ConfigurationError
from .nodes import DEFAULT_FACTORY, NodeFactory
from .transforms import resolve_transform

if TYPE_CHECKING:
    from .config import ModuleConfig

logger = logging.getLogger(__name__)

DEFAULT_STYLE_NAME = "style"


@dataclass(frozen=True)
class StyleOption:
    """Normalized ``style`` option.

    ``name`` is the stylesheet base name (``style`` gives ``style.css``)
    and ``ignore`` lists member names that get no stylesheet import.
    """

    name: str = DEFAULT_STYLE_NAME
    ignore: frozenset[str] = field(default_factory=frozenset)


def parse_style_option(style: Any, module: str | None = None) -> StyleOption | None:
    """Normalize a raw ``style`` option.

    ``True`` selects ``style.css``, a string selects ``<string>.css`` and a
    mapping may set ``name`` and ``ignore``, defaulting the rest. An empty
    mapping still enables ``style.css``. Other falsy values disable style
    imports and return None.
    """
    if isinstance(style, StyleOption):
        return style
    if isinstance(style, Mapping):
        ignore = style.get("ignore") or ()
        if isinstance(ignore, str):
            ignore = (ignore,)
        return StyleOption(name=style.get("name") or DEFAULT_STYLE_NAME, ignore=frozenset(ignore))
    if not style:
        return None
    if style is True:
        return StyleOption()
    if isinstance(style, str):
        return StyleOption(name=style)
    raise ConfigurationError(
        f"style option for module {module} must be a boolean, a string or a mapping",
        module=module,
        config_key="style",
    )


def build_style_import(
    config: ModuleConfig, import_name: str | None = None, factory: NodeFactory = DEFAULT_FACTORY
) -> Any | None:
    """Build the side-effect stylesheet import for ``import_name``.

    Without ``import_name`` the module-wide stylesheet is produced.

    Returns:
        A declaration with no specifiers, or None when styles are disabled
        or the name is listed in ``ignore``.
    """
    style = config.style
    if style is None:
        return None

    has_import_name = bool(import_name)
    name = import_name if import_name else style.name
    if name in style.ignore:
        logger.debug("Skipping ignored style import for %s", name)
        return None

    if config.transform is None:
        raise ConfigurationError("transform option is required to build style imports", config_key="transform")
    path = resolve_transform(config.transform, name, style.name, has_import_name)
    return factory.import_declaration([], path)
