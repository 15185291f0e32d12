"""Command-line interface for checking modular-imports configurations.

The rewriting itself runs inside a build host; this CLI helps while
writing a configuration. ``validate`` loads a configuration file and
reports problems, and ``preview`` shows the declarations an import would
be rewritten into, as structured YAML or JSON data.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

import json
import logging
from typing import Any

import typer
import yaml  # type: ignore[import-untyped]

from .casing import Casing
from .config import RewriteConfig, load_config_from_file
from .engine import rewrite
from .exceptions import ModularImportsError
from .nodes import DefaultSpecifier, ImportDeclaration, NamedSpecifier, NamespaceSpecifier, Specifier

# Initialize typer app
app = typer.Typer(
    name="modular-imports", help="Preview and validate per-member import rewriting", add_completion=False
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(debug_mode: bool = False) -> None:
    """Set up logging configuration for the application."""
    log_level = logging.DEBUG if debug_mode else logging.INFO
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging_with_level(log_level: str) -> None:
    """Set up logging with a specific level."""
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def parse_member(value: str) -> NamedSpecifier:
    """Parse ``Name`` or ``Name:alias`` into a named specifier."""
    imported, _, local = value.partition(":")
    imported = imported.strip()
    if not imported:
        raise typer.BadParameter(f"Invalid member {value!r}; expected Name or Name:alias")
    return NamedSpecifier(imported=imported, local=local.strip())


def _load_config(config_file: str) -> RewriteConfig:
    result = load_config_from_file(config_file)
    if result.is_error():
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)
    for warning in result.warnings or []:
        typer.echo(f"Warning: {warning}", err=True)
    return result.unwrap()


def _dump(data: dict[str, Any], output_format: str) -> str:
    if output_format == "json":
        return json.dumps(data, indent=2)
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


@app.callback()
def main_callback(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging output", is_flag=True),
    log_level: str = typer.Option("WARNING", "--log-level", help="Set logging level (DEBUG, INFO, WARNING, ERROR)"),
) -> None:
    """Preview and validate per-member import rewriting."""
    if debug:
        setup_logging(debug)
    else:
        setup_logging_with_level(log_level)


@app.command("validate")
def validate(config_file: str = typer.Argument(..., help="YAML or JSON configuration file")) -> None:
    """Validate a configuration file and list the configured modules."""
    config = _load_config(config_file)
    typer.echo(f"Configuration OK: {len(config)} module(s) configured")
    for name, module in config.items():
        options = []
        if module.prevent_full_import:
            options.append("preventFullImport")
        if module.skip_default_conversion:
            options.append("skipDefaultConversion")
        if module.style is not None:
            options.append(f"style={module.style.name}")
        if module.casing is not Casing.NONE:
            options.append(f"casing={module.casing.value}")
        suffix = f" ({', '.join(options)})" if options else ""
        typer.echo(f"  - {name}{suffix}")


@app.command("preview")
def preview(
    config_file: str = typer.Argument(..., help="YAML or JSON configuration file"),
    module: str = typer.Argument(..., help="Source module of the import, e.g. react-bootstrap"),
    members: list[str] = typer.Argument(None, help="Imported members as Name or Name:alias"),
    default: str | None = typer.Option(None, "--default", help="Local name of a default import"),
    namespace: str | None = typer.Option(None, "--namespace", help="Local name of a namespace import"),
    filename: str | None = typer.Option(None, "--filename", help="File containing the import (for relative sources)"),
    output_format: str = typer.Option("yaml", "--format", help="Output format (yaml or json)"),
) -> None:
    """Show the declarations an import would be rewritten into."""
    if output_format not in ("yaml", "json"):
        typer.echo(f"Error: Format must be 'yaml' or 'json', got '{output_format}'", err=True)
        raise typer.Exit(code=1)

    specifiers: list[Specifier] = []
    if default:
        specifiers.append(DefaultSpecifier(default))
    if namespace:
        specifiers.append(NamespaceSpecifier(namespace))
    specifiers.extend(parse_member(m) for m in members or [])
    if not specifiers:
        typer.echo("Error: Nothing to import; pass members, --default or --namespace", err=True)
        raise typer.Exit(code=1)

    config = _load_config(config_file)
    declaration = ImportDeclaration(source=module, specifiers=tuple(specifiers))

    try:
        result = rewrite(declaration, config, filename=filename)
    except ModularImportsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if result is None:
        data = {"module": module, "disposition": "unchanged", "declarations": [declaration.to_dict()]}
    else:
        data = {
            "module": module,
            "disposition": result.disposition.value,
            "declarations": [d.to_dict() for d in result.declarations],
        }
    typer.echo(_dump(data, output_format))


@app.command("version")
def version() -> None:
    """Show the version of modular-imports."""
    from . import __version__

    typer.echo(f"modular-imports {__version__}")


def main() -> None:
    """Main entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
