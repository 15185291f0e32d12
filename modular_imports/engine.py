"""Rewrite engine for configured module imports.

Given one import declaration and the configuration of its source module,
``rewrite`` produces the declarations that replace it:

    import Bootstrap, { Grid, Row as row } from 'react-bootstrap';

becomes, with ``transform="react-bootstrap/lib/${member}"``,

    import Bootstrap from 'react-bootstrap';
    import Grid from 'react-bootstrap/lib/Grid';
    import row from 'react-bootstrap/lib/Row';

followed by any stylesheet imports when ``style`` is enabled. The engine
keeps no state between calls; the host decides where the returned
declarations go according to :attr:`RewriteResult.disposition`.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from .casing import apply_case
from .classifier import classify
from .config import ModuleConfig, RewriteConfig
from .exceptions import PolicyError
from .nodes import DEFAULT_FACTORY, ImportDeclaration, NodeFactory
from .paths import resolve_module_source
from .style import build_style_import
from .transforms import resolve_transform

logger = logging.getLogger(__name__)


class Disposition(Enum):
    """How a host applies a :class:`RewriteResult` to its syntax tree."""

    REPLACE = "replace"
    """Replace the original declaration with all result declarations."""
    INSERT_AFTER = "insert_after"
    """Keep the original and insert the (style-only) declarations after it."""


@dataclass(frozen=True)
class RewriteResult:
    """Declarations produced for one original import declaration.

    ``transforms`` holds the rewritten imports, ``styles`` the stylesheet
    imports that follow them.
    """

    transforms: tuple[Any, ...] = ()
    styles: tuple[Any, ...] = ()

    @property
    def declarations(self) -> tuple[Any, ...]:
        return self.transforms + self.styles

    @property
    def disposition(self) -> Disposition:
        return Disposition.REPLACE if self.transforms else Disposition.INSERT_AFTER

    def __iter__(self) -> Iterator[Any]:
        return iter(self.declarations)

    def __len__(self) -> int:
        return len(self.transforms) + len(self.styles)


def rewrite_module_import(
    declaration: ImportDeclaration,
    module_config: ModuleConfig,
    factory: NodeFactory = DEFAULT_FACTORY,
) -> RewriteResult | None:
    """Rewrite ``declaration`` according to the options of its source module.

    Args:
        declaration: The original import declaration.
        module_config: Configuration of the declaration's source module.
        factory: Node constructors used for the new declarations.

    Returns:
        The replacement declarations, or None when nothing changes.

    Raises:
        ConfigurationError: The module has no transform.
        PolicyError: A whole-module import of a ``prevent_full_import`` module.
    """
    transform = module_config.require_transform()
    full_imports, member_imports = classify(declaration.specifiers)

    transforms: list[Any] = []
    styles: list[Any] = []

    if full_imports:
        if module_config.prevent_full_import:
            raise PolicyError(
                f"import of entire module {module_config.module} not allowed due to preventFullImport setting",
                module=module_config.module,
                policy="preventFullImport",
            )
        if member_imports:
            # Keep the whole-module binding on its own line; members get one import each.
            transforms.append(factory.import_declaration(full_imports, declaration.source))
        style_import = build_style_import(module_config, factory=factory)
        if style_import is not None:
            styles.append(style_import)

    has_full_style_imports = bool(styles)

    for member in member_imports:
        import_name = apply_case(member.imported, module_config.casing)
        path = resolve_transform(transform, import_name)

        if module_config.skip_default_conversion:
            specifier = member
        else:
            specifier = factory.default_specifier(member.local)
        transforms.append(factory.import_declaration([specifier], path))

        if not has_full_style_imports:
            style_import = build_style_import(module_config, import_name, factory=factory)
            if style_import is not None:
                styles.append(style_import)

    if not transforms and not styles:
        return None

    logger.debug(
        "Rewrote import of %s into %d import(s) and %d style import(s)",
        declaration.source,
        len(transforms),
        len(styles),
    )
    return RewriteResult(tuple(transforms), tuple(styles))


def rewrite(
    declaration: ImportDeclaration,
    config: RewriteConfig,
    filename: str | Path | None = None,
    factory: NodeFactory = DEFAULT_FACTORY,
) -> RewriteResult | None:
    """Rewrite one import declaration of the file ``filename``.

    Path-like sources (``./x``, ``../x``, ``/x``) that are not configured
    verbatim are resolved against the directory of ``filename`` before the
    configuration lookup.

    Returns:
        None when the source module is not configured or no replacement is
        needed, otherwise the :class:`RewriteResult`.
    """
    module = resolve_module_source(declaration.source, filename, config)
    module_config = config.get(module)
    if module_config is None:
        return None
    return rewrite_module_import(declaration, module_config, factory)


def rewrite_declarations(
    declarations: Sequence[ImportDeclaration],
    config: RewriteConfig,
    filename: str | Path | None = None,
    factory: NodeFactory = DEFAULT_FACTORY,
) -> list[Any]:
    """Rewrite all import declarations of one file and splice the results.

    Every declaration is rewritten before any output is assembled, so an
    error leaves nothing half-applied; ``declarations`` itself is never
    modified.

    Returns:
        A new list of declarations in source order.
    """
    results = [rewrite(declaration, config, filename, factory) for declaration in declarations]

    output: list[Any] = []
    for declaration, result in zip(declarations, results):
        if result is None:
            output.append(declaration)
        elif result.disposition is Disposition.REPLACE:
            output.extend(result.declarations)
        else:
            output.append(declaration)
            output.extend(result.declarations)
    return output
