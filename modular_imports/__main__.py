"""Main entry point for running modular-imports as a module.

This allows users to run the CLI with:
    python -m modular_imports [command] [options]
"""

from .cli import main

if __name__ == "__main__":
    main()
