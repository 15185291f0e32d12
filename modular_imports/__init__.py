"""modular_imports package.

Rewrites whole-package and named-member imports of configured modules
into one import per member, optionally adding per-member stylesheet
imports. Submodules are imported lazily when a package-level name is
first accessed.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

__version__ = "2025.1.0"
__author__ = "Jim Schilling"
__description__ = "Per-member import rewriting for modular libraries"

# Public API names. Submodules are imported lazily when accessed.
__all__ = [
    "rewrite",
    "rewrite_declarations",
    "RewriteResult",
    "Disposition",
    "ModuleConfig",
    "RewriteConfig",
    "validate_options",
    "load_config_from_file",
    "ImportDeclaration",
    "DefaultSpecifier",
    "NamespaceSpecifier",
    "NamedSpecifier",
    "Casing",
    "StyleOption",
    "Result",
    "ResultStatus",
    # Exceptions
    "ModularImportsError",
    "ConfigurationError",
    "LoadError",
    "ContractError",
    "PolicyError",
]


def __getattr__(name: str):
    """Lazily import the submodule that defines ``name``."""
    import importlib

    mapping = {
        "cli": "modular_imports.cli",
        "rewrite": "modular_imports.engine",
        "rewrite_declarations": "modular_imports.engine",
        "RewriteResult": "modular_imports.engine",
        "Disposition": "modular_imports.engine",
        "ModuleConfig": "modular_imports.config",
        "RewriteConfig": "modular_imports.config",
        "validate_options": "modular_imports.config",
        "load_config_from_file": "modular_imports.config",
        "ImportDeclaration": "modular_imports.nodes",
        "DefaultSpecifier": "modular_imports.nodes",
        "NamespaceSpecifier": "modular_imports.nodes",
        "NamedSpecifier": "modular_imports.nodes",
        "Casing": "modular_imports.casing",
        "StyleOption": "modular_imports.style",
        "Result": "modular_imports.result",
        "ResultStatus": "modular_imports.result",
        "ModularImportsError": "modular_imports.exceptions",
        "ConfigurationError": "modular_imports.exceptions",
        "LoadError": "modular_imports.exceptions",
        "ContractError": "modular_imports.exceptions",
        "PolicyError": "modular_imports.exceptions",
    }

    if name not in mapping:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = importlib.import_module(mapping[name])
    if name == "cli":
        return module
    return getattr(module, name)


def __dir__():
    return sorted(list(globals().keys()) + __all__)
