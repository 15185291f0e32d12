"""Transform rules that turn a member name into a module path.

A transform is either a template string containing a ``${member}``
placeholder or a function. Raw configuration values are normalized into
one of the two variants once, when the configuration is read, so the
engine never has to sniff the option shape again.

A template ending in ``.py`` names a Python file exporting a callable
``transform``; it is loaded here and becomes a function transform.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import importlib.machinery
import importlib.util
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Union

from .exceptions import ConfigurationError, ContractError, LoadError

logger = logging.getLogger(__name__)

MEMBER_PLACEHOLDER_RE = re.compile(r"\$\{\s?member\s?\}", re.IGNORECASE)
LOADABLE_SUFFIX_RE = re.compile(r"\.py$", re.IGNORECASE)
TRANSFORM_ATTRIBUTE = "transform"


@dataclass(frozen=True)
class TemplateTransform:
    """Template such as ``"react-bootstrap/lib/${member}"``."""

    template: str


@dataclass(frozen=True)
class FunctionTransform:
    """Callable transform.

    ``origin`` records the file the function was loaded from, if any.
    """

    function: Callable[..., str]
    origin: str | None = None


Transform = Union[TemplateTransform, FunctionTransform]


@lru_cache(maxsize=None)
def load_transform_function(path: str) -> Callable[..., str]:
    """Load ``path`` as a Python module and return its ``transform`` callable.

    Each distinct path is executed at most once per process.

    Raises:
        LoadError: The file is missing or raises while being executed.
        ContractError: The module has no callable ``transform`` attribute.
    """
    file_path = Path(path)
    try:
        module_name = f"_modular_imports_transform_{file_path.stem}"
        loader = importlib.machinery.SourceFileLoader(module_name, str(file_path))
        spec = importlib.util.spec_from_file_location(module_name, file_path, loader=loader)
        if spec is None or spec.loader is None:
            raise ImportError(f"no loader for {path}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
    except Exception as e:
        raise LoadError(f"failed to load transform file {path}: {e}", path) from e

    function = getattr(module, TRANSFORM_ATTRIBUTE, None)
    if not callable(function):
        raise ContractError(f"expected transform function to be exported from {path}", path)

    logger.debug("Loaded transform function from %s", path)
    return function


def normalize_transform(spec: Any, module: str | None = None) -> Transform:
    """Turn a raw ``transform`` option into a :data:`Transform` variant.

    Args:
        spec: Template string, ``.py`` file path, callable, or an already
            normalized transform.
        module: Module the option belongs to, used in error messages.

    Raises:
        ConfigurationError: ``spec`` is none of the supported shapes.
        LoadError: A ``.py`` reference could not be loaded.
        ContractError: A ``.py`` reference does not export a callable.
    """
    if isinstance(spec, (TemplateTransform, FunctionTransform)):
        return spec
    if callable(spec):
        return FunctionTransform(spec)
    if isinstance(spec, str):
        if LOADABLE_SUFFIX_RE.search(spec):
            return FunctionTransform(load_transform_function(spec), origin=spec)
        return TemplateTransform(spec)
    raise ConfigurationError(
        f"transform option for module {module} must be a string or a callable, got {type(spec).__name__}",
        module=module,
        config_key="transform",
    )


def resolve_transform(
    transform: Transform,
    import_name: str,
    style_name: str | None = None,
    has_import_name: bool = False,
) -> str:
    """Compute the module path for ``import_name``.

    Function transforms receive ``(import_name)`` for member imports and
    ``(import_name, style_name, has_import_name)`` for style imports, and
    their return value is used unchanged.

    For templates, a style name first extends the member: ``Grid`` becomes
    ``Grid/style.css``, or ``style.css`` when resolving the module-wide
    stylesheet (no explicit import name and ``import_name == style_name``).
    Every ``${member}`` placeholder is then replaced.
    """
    if isinstance(transform, FunctionTransform):
        if style_name is None:
            return transform.function(import_name)
        return transform.function(import_name, style_name, has_import_name)

    if style_name:
        if not has_import_name and import_name == style_name:
            import_name += ".css"
        else:
            import_name += "/" + style_name + ".css"
    return MEMBER_PLACEHOLDER_RE.sub(lambda _: import_name, transform.template)
