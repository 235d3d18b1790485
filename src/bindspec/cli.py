"""
bindspec CLI.

Commands:
- check: parse binding files and report diagnostics
- dump: print the parsed declaration tree of one file as JSON
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from bindspec._version import get_version
from bindspec.core.errors import ConfigError, ParseError, SourceError
from bindspec.core.loader import discover_files, parse_file
from bindspec.core.manifest import MANIFEST_NAME, load_manifest

app = typer.Typer(
    help="""bindspec – binding declaration parser

  • check: parse files (or the project in bindspec.toml) and report errors
  • dump:  print one file's declaration tree as JSON
""",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version."""
    if value:
        typer.echo(f"bindspec version {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
) -> None:
    """bindspec CLI main callback for global options."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_parse_error(error: ParseError) -> None:
    """Print parse error as `file:line:col: error[kind]: message`."""
    if error.context:
        ctx = error.context
        typer.echo(
            f"{ctx.file}:{ctx.line}:{ctx.column}: error[{error.kind.value}]: {error.message}",
            err=True,
        )
    else:
        typer.echo(f"error[{error.kind.value}]: {error.message}", err=True)


def _resolve_files(files: list[Path], manifest: Path | None) -> tuple[list[Path], bool]:
    """Files to check and the manifest's recover setting."""
    if files:
        return files, False

    manifest_path = manifest or Path.cwd() / MANIFEST_NAME
    project = load_manifest(manifest_path)
    return discover_files(project.root, project.sources.paths), project.parser.recover


@app.command()
def check(
    files: list[Path] = typer.Argument(None, help="Binding files (default: from bindspec.toml)"),
    manifest: Path | None = typer.Option(
        None, "--manifest", "-m", help="Path to bindspec.toml"
    ),
    recover: bool = typer.Option(
        False, "--recover", help="Report every broken class instead of stopping at the first"
    ),
) -> None:
    """Parse binding files and report errors."""
    try:
        paths, manifest_recover = _resolve_files(files or [], manifest)
    except ConfigError as e:
        typer.echo(f"error: {e.message}", err=True)
        raise typer.Exit(code=1)

    if not paths:
        typer.echo("error: no binding files to check", err=True)
        raise typer.Exit(code=1)

    failed = 0
    total_classes = 0
    for path in paths:
        try:
            result = parse_file(path, recover=recover or manifest_recover)
        except ParseError as e:
            _print_parse_error(e)
            failed += 1
            continue
        except SourceError as e:
            typer.echo(f"error: {e.message}", err=True)
            failed += 1
            continue
        except OSError as e:
            typer.echo(f"{path}: error: {e}", err=True)
            failed += 1
            continue

        for error in result.errors:
            _print_parse_error(error)
        failed += len(result.errors)
        total_classes += len(result.module.classes)

    if failed:
        typer.echo(f"{failed} error(s) in {len(paths)} file(s)", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"OK: {total_classes} classes in {len(paths)} file(s)")


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Binding file to parse"),
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """Print the parsed declaration tree as JSON."""
    try:
        result = parse_file(file)
    except ParseError as e:
        _print_parse_error(e)
        raise typer.Exit(code=1)
    except SourceError as e:
        typer.echo(f"error: {e.message}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"{file}: error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(result.module.model_dump_json(indent=indent))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
