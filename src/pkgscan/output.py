"""Output formatting for pkgscan commands."""

from collections.abc import Sequence

import typer

from pkgscan.models import StorageLocation


def print_names(names: Sequence[str]) -> None:
    """Print one qualified module name per line to stdout."""
    for name in names:
        typer.echo(name)


def print_summary(
    names: Sequence[str],
    namespace: str,
    location: StorageLocation,
    imported: bool = False,
) -> None:
    """Print scan summary line to stderr.

    Args:
        names: Names that were found (or loaded, if imported)
        namespace: Namespace that was scanned ("" for all)
        location: Location that was scanned
        imported: If True, use "loaded" language instead of "found"
    """
    count = len(names)
    verb = "loaded" if imported else "found"
    scope = f"'{namespace}'" if namespace else "all namespaces"
    mode = "archive" if location.is_archive else "directory"
    typer.secho(
        f"✓ {count} module{'s' if count != 1 else ''} {verb} in {scope} "
        f"({mode} {location.base})",
        fg=typer.colors.GREEN,
        bold=True,
        err=True,
    )


def print_error(message: str) -> None:
    """Print error message to stderr."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)
