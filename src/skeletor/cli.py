"""Command-line interface for skeletor."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from skeletor import __version__
from skeletor.config import SkeletorConfig, load_config
from skeletor.console import console
from skeletor.manifest import (
    MAX_COMPAT_MANIFEST_VERSION,
    PARAMETER_TYPES,
    ManifestError,
    collect_manifest_errors,
    validate_manifest,
)
from skeletor.templates import get_manifest_path, load_and_validate, load_manifest_file

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_config(
    strict_types: bool | None,
    unique_names: bool | None,
    all_errors: bool | None = None,
) -> SkeletorConfig:
    """Layer command-line flags over the loaded configuration."""
    overrides = SkeletorConfig(
        strict_types=strict_types,
        unique_names=unique_names,
        all_errors=all_errors,
    )
    return load_config().merge(overrides)


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"skeletor [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


@click.group(invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Skeletor - validate project template manifests."""
    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        console.print("[bold]skeletor[/bold] - project template manifests")
        console.print("\nRun [cyan]skeletor --help[/cyan] for available commands.")


@main.group(invoke_without_command=True)
@click.pass_context
def manifest(ctx: click.Context) -> None:
    """Validate and inspect template manifests.

    Use subcommands: skeletor manifest validate, skeletor manifest inspect
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@manifest.command("validate")
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@click.option(
    "--strict-types/--no-strict-types",
    default=None,
    help="Reject unknown parameter types instead of treating them as strings.",
)
@click.option(
    "--unique-names/--no-unique-names",
    default=None,
    help="Reject manifests that declare a parameter name twice.",
)
@click.option(
    "--all-errors/--first-error",
    default=None,
    help="Report every parameter error instead of stopping at the first.",
)
def manifest_validate(
    paths: tuple[Path, ...],
    strict_types: bool | None,
    unique_names: bool | None,
    all_errors: bool | None,
) -> None:
    """Validate one or more template manifests.

    PATHS may be template directories or manifest files.
    """
    config = _resolve_config(strict_types, unique_names, all_errors)
    failed = 0

    for path in paths:
        manifest_path = get_manifest_path(path)
        logger.debug("Validating %s", manifest_path)
        try:
            loaded = load_manifest_file(path)
            if config.all_errors:
                problems = [
                    str(e)
                    for e in collect_manifest_errors(
                        loaded,
                        strict_types=bool(config.strict_types),
                        unique_names=bool(config.unique_names),
                    )
                ]
            else:
                validate_manifest(
                    loaded,
                    strict_types=bool(config.strict_types),
                    unique_names=bool(config.unique_names),
                )
                problems = []
        except ManifestError as e:
            problems = [str(e)]

        if problems:
            failed += 1
            console.print(f"[red]✗[/red] {escape(str(manifest_path))}")
            for problem in problems:
                console.print(f"    [red]{escape(problem)}[/red]")
        else:
            console.print(f"[green]✓[/green] {escape(str(manifest_path))}")

    if failed:
        console.print(
            f"\n[bold red]{failed} of {len(paths)} manifest(s) invalid.[/bold red]"
        )
        raise SystemExit(1)


@manifest.command("inspect")
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--strict-types/--no-strict-types",
    default=None,
    help="Reject unknown parameter types instead of treating them as strings.",
)
@click.option(
    "--unique-names/--no-unique-names",
    default=None,
    help="Reject manifests that declare a parameter name twice.",
)
def manifest_inspect(
    path: Path, strict_types: bool | None, unique_names: bool | None
) -> None:
    """Show the version and parameters of a valid manifest."""
    config = _resolve_config(strict_types, unique_names)
    try:
        loaded = load_and_validate(path, config)
    except ManifestError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1) from None

    console.print(f"[bold]Manifest:[/bold] {escape(str(get_manifest_path(path)))}")
    console.print(f"[bold]Version:[/bold] {escape(loaded.version)}")

    if not loaded.parameters:
        console.print("[dim]No parameters declared.[/dim]")
        return

    table = Table(title="Parameters")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Default")
    table.add_column("Enum")
    table.add_column("Prompt", style="dim")
    for param in loaded.parameters:
        table.add_row(
            escape(param.name),
            escape(param.type),
            escape(param.default_value),
            escape(", ".join(param.enum)),
            escape(param.prompt),
        )
    console.print(table)


@manifest.command("types")
def manifest_types() -> None:
    """List the recognized parameter types."""
    console.print(
        f"[bold]Parameter types[/bold] "
        f"[dim](manifest version <= {MAX_COMPAT_MANIFEST_VERSION})[/dim]\n"
    )
    for type_tag in PARAMETER_TYPES:
        console.print(f"  [cyan]{type_tag}[/cyan]")
