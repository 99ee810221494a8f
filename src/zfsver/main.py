import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer

from .config import AppConfig
from .errors import ExitCode, ZfsverError
from .logging_config import setup_logging
from .models import VersionReport
from .search import find_versions
from .versions import NOT_FOUND_MESSAGE, sorted_lines, summary_line


def installed_version() -> str:
    try:
        return version(distribution_name="zfsver")
    except PackageNotFoundError:
        return "unknown (package not installed)"


app: typer.Typer = typer.Typer(
    help=f"zfsver — find earlier versions of a file in ZFS snapshots\n\nVersion: {installed_version()}",
    add_completion=False,
)


def echo_path_text(text: str) -> None:
    # Filenames may carry surrogate-escaped bytes; write them back out as raw bytes.
    typer.echo(os.fsencode(text))


def print_version(is_version: bool) -> None:
    """
    Callback for the --version / -V option.

    Prints the installed version of the 'zfsver' package and stops before
    any path handling happens.
    """
    if not is_version:
        return

    typer.echo(installed_version())
    raise typer.Exit()


def render_report(report: VersionReport, *, verbose: bool, timestamp_format: str) -> list[str]:
    if not report.hits:
        return [NOT_FOUND_MESSAGE]

    if verbose:
        return sorted_lines(report.hits, timestamp_format)

    return [summary_line(report.unique_versions, report.total_snapshots)]


@app.command()
def main(
    files: Annotated[list[str] | None, typer.Argument(help="Path to a regular file on a ZFS dataset.")] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show modification time, size and path of every copy.")
    ] = False,
    workers: Annotated[int | None, typer.Option("--workers", "-j", min=1, help="Snapshots probed in parallel.")] = None,
    config_path: Annotated[Path | None, typer.Option("--config", "-c", help="YAML config file.")] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Log diagnostics to stderr.")] = False,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=print_version,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """
    Search the snapshots of the dataset holding FILE for other copies of it.

    Without --verbose a one-line summary is printed.
    """
    logger = setup_logging(debug=debug)

    if not files or len(files) != 1:
        typer.echo("please supply a single filename")
        raise typer.Exit(code=int(ExitCode.USAGE))

    try:
        cfg: AppConfig = AppConfig.load(config_path)
        if workers is not None:
            cfg.max_workers = workers

        report: VersionReport = find_versions(files[0], cfg)
    except ZfsverError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        echo_path_text(e.message)
        raise typer.Exit(code=int(e.exit_code))

    for line in render_report(report, verbose=verbose, timestamp_format=cfg.timestamp_format):
        echo_path_text(line)


if __name__ == "__main__":
    app()
