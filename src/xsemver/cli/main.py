"""Command-line interface for xsemver."""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from .._locator import MARKER_FILE_NAME
from ..config import Settings, load_settings
from ..exceptions import SemVerError
from ..semver import SemVer
from ._helpers import console, print_error, print_success, setup_logging

app = typer.Typer(help="Semantic versions kept in a .semver file")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (xsemver.toml or pyproject.toml)",
    ),
]

DirOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--dir",
        "-d",
        help="Directory to start searching for .semver (default: cwd)",
    ),
]

FormatOption = Annotated[
    str | None,
    typer.Option(
        ...,
        "--format",
        "-f",
        help="Tag format template using %M, %m, %p and %s",
    ),
]


def _settings(
    ctx: typer.Context, config: Path | None, directory: Path | None = None
) -> Settings:
    settings = load_settings(config, directory)
    if not (ctx.obj or {}).get("verbose"):
        setup_logging(settings.log_level)
    return settings


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Semantic versions kept in a .semver file."""
    ctx.obj = {"verbose": verbose}
    setup_logging("DEBUG" if verbose else "WARNING")


@app.command()
def init(
    project_dir: Annotated[
        Path,
        typer.Argument(
            ...,
            help="Directory to create .semver in",
            default_factory=lambda: Path.cwd(),
        ),
    ],
    force: Annotated[
        bool, typer.Option(..., "--force", help="Overwrite an existing .semver")
    ] = False,
) -> None:
    """Create a .semver file at version 0.0.0."""
    marker = Path(project_dir) / MARKER_FILE_NAME
    if marker.exists() and not force:
        print_error(f"{marker} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    try:
        Path(project_dir).mkdir(parents=True, exist_ok=True)
        version = SemVer()
        version.save(marker)
    except OSError as e:
        print_error(f"Failed to write {marker}: {e}")
        raise typer.Exit(1) from e

    print_success(f"Initialized {marker} at {version}")


@app.command()
def show(
    ctx: typer.Context,
    fmt: FormatOption = None,
    directory: DirOption = None,
    config: ConfigOption = None,
) -> None:
    """Print the current version."""
    try:
        settings = _settings(ctx, config, directory)
        version = SemVer.find(directory)
        typer.echo(version.format(fmt or settings.tag_format))
    except (SemVerError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def where(
    ctx: typer.Context, directory: DirOption = None, config: ConfigOption = None
) -> None:
    """Print the path of the .semver file in use."""
    try:
        _settings(ctx, config, directory)
        typer.echo(str(SemVer.find_file(directory)))
    except (SemVerError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def special(
    ctx: typer.Context,
    value: Annotated[str, typer.Argument(..., help="Special suffix, '' to clear")],
    directory: DirOption = None,
    config: ConfigOption = None,
) -> None:
    """Set the special (prerelease) suffix and save it."""
    try:
        _settings(ctx, config, directory)
        version = SemVer.find(directory)
        version.special = value
        version.save()
    except (SemVerError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    print_success(f"Version is now {version}")


@app.command()
def parse(
    ctx: typer.Context,
    version_string: Annotated[str, typer.Argument(..., help="String to parse")],
    fmt: FormatOption = None,
    strict: Annotated[
        bool,
        typer.Option(
            ...,
            "--strict",
            help="Fail if the format lacks any of %M, %m or %p",
        ),
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Parse a version string and show its parts."""
    try:
        settings = _settings(ctx, config)
        template = fmt or settings.tag_format
        version = SemVer.parse(version_string, template, allow_missing=not strict)
    except SemVerError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if version is None:
        print_error(f"'{version_string}' does not match '{template}'")
        raise typer.Exit(1)

    table = Table(title=str(version))
    table.add_column("Part", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("major", str(version.major))
    table.add_row("minor", str(version.minor))
    table.add_row("patch", str(version.patch))
    table.add_row("special", version.special)
    console.print(table)


@app.command()
def compare(
    ctx: typer.Context,
    first: Annotated[str, typer.Argument(..., help="First version")],
    second: Annotated[str, typer.Argument(..., help="Second version")],
    fmt: FormatOption = None,
    config: ConfigOption = None,
) -> None:
    """Compare two versions and print <, = or >."""
    try:
        settings = _settings(ctx, config)
        template = fmt or settings.tag_format
        versions: list[SemVer] = []
        for raw in (first, second):
            version = SemVer.parse(raw, template)
            if version is None:
                print_error(f"'{raw}' does not match '{template}'")
                raise typer.Exit(1)
            versions.append(version)
    except SemVerError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    left, right = versions
    typer.echo({-1: "<", 0: "=", 1: ">"}[left.compare(right)])


if __name__ == "__main__":
    app()
