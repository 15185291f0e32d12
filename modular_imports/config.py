"""Per-module rewrite configuration.

This module defines the immutable configuration the engine reads:
``ModuleConfig`` for one source module and ``RewriteConfig`` mapping
module identifiers to their ``ModuleConfig``. Raw options use the same
keys as the JavaScript plugin configuration (``preventFullImport``,
``skipDefaultConversion``, ``camelCase`` ...); snake_case spellings are
accepted too.

Besides the raising constructors, ``validate_options`` and
``load_config_from_file`` run a validation pass that reports problems as
a :class:`~modular_imports.result.Result`, letting a host refuse a bad
configuration before it rewrites anything.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .casing import Casing, casing_from_flags
from .exceptions import ConfigurationError, ModularImportsError
from .result import Result
from .style import StyleOption, parse_style_option
from .transforms import LOADABLE_SUFFIX_RE, Transform, normalize_transform

logger = logging.getLogger(__name__)

# Raw option spellings accepted for each ModuleConfig field.
_OPTION_ALIASES: dict[str, str] = {
    "transform": "transform",
    "style": "style",
    "casing": "casing",
    "preventFullImport": "prevent_full_import",
    "prevent_full_import": "prevent_full_import",
    "skipDefaultConversion": "skip_default_conversion",
    "skip_default_conversion": "skip_default_conversion",
    "camelCase": "camel_case",
    "camel_case": "camel_case",
    "kebabCase": "kebab_case",
    "kebab_case": "kebab_case",
    "snakeCase": "snake_case",
    "snake_case": "snake_case",
}


def _parse_casing(value: Any, module: str) -> Casing:
    if isinstance(value, Casing):
        return value
    if isinstance(value, str):
        try:
            return Casing(value.lower())
        except ValueError:
            pass
    choices = ", ".join(c.value for c in Casing)
    raise ConfigurationError(
        f"casing option for module {module} must be one of: {choices}", module=module, config_key="casing"
    )


@dataclass(frozen=True)
class ModuleConfig:
    """Rewrite options for one source module.

    ``transform`` may be None so that configurations can be loaded and
    then reported on; rewriting an import of such a module raises
    :class:`ConfigurationError`.
    """

    module: str
    transform: Transform | None = None
    prevent_full_import: bool = False
    style: StyleOption | None = None
    casing: Casing = Casing.NONE
    skip_default_conversion: bool = False

    @classmethod
    def from_dict(cls, module: str, options: Mapping[str, Any]) -> ModuleConfig:
        """Create a config from raw plugin options.

        Args:
            module: Module identifier the options apply to.
            options: Raw option mapping.

        Raises:
            ConfigurationError: An option has an unsupported value.
            LoadError: A ``.py`` transform file could not be loaded.
            ContractError: A ``.py`` transform file exports no callable.
        """
        if not isinstance(options, Mapping):
            raise ConfigurationError(f"options for module {module} must be a mapping", module=module)

        values: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key)
            if name is None:
                logger.debug("Ignoring unknown option %r for module %s", key, module)
                continue
            values[name] = value

        transform = values.get("transform")
        if "casing" in values and values["casing"] is not None:
            casing = _parse_casing(values["casing"], module)
        else:
            casing = casing_from_flags(
                bool(values.get("camel_case")), bool(values.get("kebab_case")), bool(values.get("snake_case"))
            )

        return cls(
            module=module,
            transform=normalize_transform(transform, module) if transform else None,
            prevent_full_import=bool(values.get("prevent_full_import", False)),
            style=parse_style_option(values.get("style"), module),
            casing=casing,
            skip_default_conversion=bool(values.get("skip_default_conversion", False)),
        )

    def require_transform(self) -> Transform:
        """Return the transform or raise ``ConfigurationError`` when it is missing."""
        if self.transform is None:
            raise ConfigurationError(
                f"transform option is required for module {self.module}", module=self.module, config_key="transform"
            )
        return self.transform


@dataclass(frozen=True)
class RewriteConfig(Mapping[str, ModuleConfig]):
    """Immutable mapping from module identifier to :class:`ModuleConfig`.

    Keys are bare package names (``react-bootstrap``) or absolute paths
    for local modules.
    """

    modules: Mapping[str, ModuleConfig] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "modules", MappingProxyType(dict(self.modules)))

    def __getitem__(self, module: str) -> ModuleConfig:
        return self.modules[module]

    def __iter__(self) -> Iterator[str]:
        return iter(self.modules)

    def __len__(self) -> int:
        return len(self.modules)

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> RewriteConfig:
        """Build a configuration from the raw ``{module: options}`` mapping.

        Raises:
            ConfigurationError: The mapping or one of its entries is malformed.
        """
        if not isinstance(options, Mapping):
            raise ConfigurationError("configuration must be a mapping of module names to options")
        return cls({str(module): ModuleConfig.from_dict(str(module), opts) for module, opts in options.items()})

    def missing_transforms(self) -> list[str]:
        return [name for name, module in self.modules.items() if module.transform is None]


def validate_options(options: Mapping[str, Any]) -> Result[RewriteConfig]:
    """Build and validate a configuration without raising.

    Every configured module must have a transform; all offenders are
    reported in one error.

    Returns:
        A ``Result`` holding the ``RewriteConfig`` or the first problem found.
    """
    try:
        config = RewriteConfig.from_dict(options)
    except ModularImportsError as e:
        return Result.failure(e, dict(e.details))

    missing = config.missing_transforms()
    if missing:
        return Result.failure(
            ConfigurationError(
                f"transform option is required for module {', '.join(missing)}", config_key="transform"
            ),
            {"modules": missing},
        )

    if not config:
        return Result.warning(config, ["Configuration does not list any modules"])
    return Result.success(config)


def _anchor_transform_files(modules: dict[str, Any], base: Path) -> dict[str, Any]:
    """Resolve relative ``.py`` transform paths against ``base``."""
    anchored: dict[str, Any] = {}
    for name, options in modules.items():
        transform = options.get("transform") if isinstance(options, Mapping) else None
        if isinstance(transform, str) and LOADABLE_SUFFIX_RE.search(transform) and not Path(transform).is_absolute():
            options = {**options, "transform": str(base / transform)}
        anchored[name] = options
    return anchored


def load_config_from_file(config_file: str | Path) -> Result[RewriteConfig]:
    """Load and validate a ``RewriteConfig`` from a YAML (or JSON) file.

    The document is either the module mapping itself or a mapping with a
    top-level ``modules`` key holding it. Relative ``.py`` transform paths are
    resolved against the directory holding ``config_file``.

    Args:
        config_file: Path to the configuration file.

    Returns:
        A ``Result`` containing the configuration or the loading error.
    """
    import yaml  # type: ignore[import-untyped]

    metadata = {"config_file": str(config_file)}
    try:
        with open(config_file, encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except FileNotFoundError:
        return Result.failure(FileNotFoundError(f"Configuration file not found: {config_file}"), metadata)
    except (OSError, yaml.YAMLError) as e:
        return Result.failure(ValueError(f"Error loading configuration: {e}"), metadata)

    if not isinstance(config_data, dict):
        return Result.failure(ValueError("Configuration file must contain a dictionary"), metadata)

    if isinstance(config_data.get("modules"), dict):
        config_data = config_data["modules"]

    config_data = _anchor_transform_files(config_data, Path(config_file).absolute().parent)

    result = validate_options(config_data)
    if not result.is_error():
        logger.info("Loaded configuration for %d module(s) from %s", len(result.data or {}), config_file)
    return Result(
        status=result.status,
        data=result.data,
        error=result.error,
        warnings=result.warnings,
        metadata={**metadata, **(result.metadata or {})},
    )
