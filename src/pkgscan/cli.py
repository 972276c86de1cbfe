"""Command-line interface for pkgscan."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from pkgscan import __version__
from pkgscan.config import ENV_BASE
from pkgscan.config import ScanConfig
from pkgscan.exceptions import ActionError
from pkgscan.exceptions import InvalidNamespaceError
from pkgscan.exceptions import NamespaceNotFoundError
from pkgscan.exceptions import PkgscanError
from pkgscan.exceptions import StorageIOError
from pkgscan.exceptions import UnitResolutionError
from pkgscan.finder import Finder
from pkgscan.models import StorageLocation
from pkgscan.output import print_error
from pkgscan.output import print_names
from pkgscan.output import print_summary

app = typer.Typer(help="Find the modules of a package")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pkgscan {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Find the modules of a package."""
    pass


@app.command()
def find(
    namespace: Annotated[
        str, typer.Argument(help="Dotted package name (default: all packages)")
    ] = "",
    base: Annotated[
        Path | None,
        typer.Option(
            "--base",
            "-b",
            envvar=ENV_BASE,
            help="Archive or directory to scan (default: cwd)",
        ),
    ] = None,
    subpackages: Annotated[
        bool,
        typer.Option("--subpackages/--no-subpackages", help="Include subpackages"),
    ] = True,
    load: Annotated[
        bool,
        typer.Option("--import", help="Import each module, list only those that load"),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """List the modules of a package."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = ScanConfig.from_env()
    location = StorageLocation.for_path(base or Path.cwd(), config)

    try:
        finder = Finder(location=location, config=config)
        if load:
            # Modules must be importable from the scanned location
            sys.path.insert(0, str(location.base))
            loaded = []
            finder.set_action(loaded.append).find(namespace, subpackages)
            names = [module.__name__ for module in loaded]
        else:
            names = list(finder.names(namespace, subpackages))
    except (InvalidNamespaceError, NamespaceNotFoundError) as e:
        print_error(str(e))
        raise typer.Exit(1) from None
    except StorageIOError as e:
        print_error(f"Storage error: {e}")
        raise typer.Exit(1) from None
    except (UnitResolutionError, ActionError) as e:
        print_error(f"Import error: {e}")
        raise typer.Exit(1) from None
    except PkgscanError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None

    print_names(names)
    print_summary(names, namespace, location, imported=load)


def main() -> None:
    """Main entry point for the pkgscan CLI."""
    app()


if __name__ == "__main__":
    main()
