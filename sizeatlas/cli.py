from __future__ import annotations
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

import click

from .report import ProgressCounter, print_report
from .scanner import scan_path
from .units import resolve_unit

APP_NAME = "sizeatlas"
try:
    APP_VERSION = version(APP_NAME)
except PackageNotFoundError:
    # запуск из исходников без установки
    APP_VERSION = "0+unknown"
DEFAULT_FORMAT = "B"

logger = logging.getLogger(__name__)

def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(name=APP_NAME, help="A very simple file size displayer.")
@click.argument("path", type=click.Path(path_type=str))
@click.option("-r", "--recursive", is_flag=True, default=False,
              help="Descend into subdirectories.")
@click.option("-f", "--format", "fmt", default=DEFAULT_FORMAT, show_default=True,
              help="Format of size. I.e.: MB, KB, GB, B")
@click.option("--progress/--no-progress", default=None,
              help="Show a live file counter on stderr (default: only on a terminal).")
@click.option("--color/--no-color", default=None,
              help="Force or disable colored output.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Debug logging to stderr.")
@click.version_option(APP_VERSION, prog_name=APP_NAME)
def main(path: str, recursive: bool, fmt: str, progress: Optional[bool],
         color: Optional[bool], verbose: bool):
    setup_logging(verbose)
    unit = resolve_unit(fmt)

    if progress is None:
        progress = sys.stderr.isatty()
    counter = ProgressCounter() if progress else None

    try:
        result = scan_path(path, recursive=recursive, progress=counter)
    except OSError as e:
        logger.debug("Scan of %s failed", path, exc_info=True)
        raise click.ClickException(str(e))
    finally:
        if counter:
            counter.finish()

    print_report(result, unit, color=color)


def run():
    main()
