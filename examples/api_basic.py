#!/usr/bin/env python3
"""Small API examples for modular-imports.

These examples exercise the public programmatic API in a minimal way.
They are intended for documentation and quick manual testing.
"""

from pathlib import Path

from modular_imports.config import load_config_from_file
from modular_imports.engine import rewrite_declarations
from modular_imports.nodes import DefaultSpecifier, ImportDeclaration, NamedSpecifier


def basic_rewrite_example() -> None:
    """Rewrite the imports of an imaginary ``src/App.js`` and print them."""
    result = load_config_from_file(Path(__file__).with_name("modular-imports.yaml"))
    if result.is_error():
        print(f"Configuration error: {result.error}")
        return

    declarations = [
        ImportDeclaration("react", (DefaultSpecifier("React"),)),
        ImportDeclaration("react-bootstrap", (NamedSpecifier("Grid"), NamedSpecifier("Row", "row"))),
        ImportDeclaration("./components", (NamedSpecifier("UserCard"),)),
    ]

    for declaration in rewrite_declarations(declarations, result.unwrap(), filename="src/App.js"):
        print(declaration.to_dict())


if __name__ == "__main__":
    basic_rewrite_example()
