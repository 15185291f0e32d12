"""Custom exception classes for the modular-imports rewriter.

Every failure raised by the rewriter is fatal for the file being
processed. Each exception carries a ``details`` mapping with structured
context (the offending module, transform reference, or path) so hosts
can attach source locations and report the problem programmatically.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from typing import Any

PLUGIN_NAME = "modular-imports"


class ModularImportsError(Exception):
    """Base exception for rewrite-related errors.

    The message is prefixed with the plugin name so it can be traced back
    to this package when surfaced by a build host.

    Args:
        message: Human-readable error message.
        details: Optional mapping with structured diagnostic data.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        message = f"{PLUGIN_NAME}: {message}"
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ModularImportsError):
    """Raised when a module's rewrite configuration is invalid.

    The most common cause is a configured module without a ``transform``
    option.

    Args:
        message: Description of the configuration problem.
        module: Optional module identifier the configuration belongs to.
        config_key: Optional configuration key that caused the error.
    """

    def __init__(self, message: str, module: str | None = None, config_key: str | None = None):
        details: dict[str, Any] = {}
        if module:
            details["module"] = module
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)


class LoadError(ModularImportsError):
    """Raised when a transform file cannot be loaded.

    Args:
        message: Description of the load failure.
        path: Path of the transform file.
    """

    def __init__(self, message: str, path: str):
        super().__init__(message, {"path": path})


class ContractError(ModularImportsError):
    """Raised when a loaded transform file does not export a callable."""

    def __init__(self, message: str, path: str):
        super().__init__(message, {"path": path})


class PolicyError(ModularImportsError):
    """Raised when an import violates a module policy such as ``prevent_full_import``.

    Args:
        message: Description of the violation.
        module: Module identifier whose policy was violated.
        policy: Name of the violated policy option.
    """

    def __init__(self, message: str, module: str, policy: str):
        super().__init__(message, {"module": module, "policy": policy})
