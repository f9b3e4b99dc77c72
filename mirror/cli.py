from argparse import ArgumentParser
from pathlib import Path
import re
import sys
from typing import Optional
import argh  # type: ignore
from rich.console import Console
from rich.table import Table

from rich_argparse import RichHelpFormatter

from .catalog import Catalog, find_config
from .construct import construct
from .errors import UnknownCategory, UserError
from .failure import FAILURE_TYPES, FailureLevel
from .logging import logger, configure_logger
from .version import __version__

log = logger()


def failure_table(
    catalog: Catalog,
    categories: list[str] | None = None,
    level: FailureLevel | None = None,
) -> Table:
    t = Table(title="Failure Categories", header_style="italic green", show_edge=False)
    t.add_column("category", style="bold yellow")
    t.add_column("code", justify="right")
    t.add_column("level")
    t.add_column("source")
    t.add_column("message")
    t.add_column("hint", style="dim")
    wanted = set(categories) if categories else None
    for name in sorted(wanted or ()):
        if name not in FAILURE_TYPES:
            raise UnknownCategory(name)
    for name, failure in catalog.entries():
        if wanted is not None and name not in wanted:
            continue
        if level is not None and failure.level is not level:
            continue
        t.add_row(
            name,
            "" if failure.code is None else str(failure.code),
            str(failure.level),
            failure.source or "",
            failure.message,
            failure.hint or "",
        )
    return t


def load_catalog(input_file: Optional[str]) -> Catalog:
    if input_file is None:
        return find_config()

    if m := re.match(r"([^\[\]]+)\[([^\[\]\s]+)\]", input_file):
        return Catalog.read(Path(m.group(1)), m.group(2))
    return Catalog.read(Path(input_file))


@argh.arg("categories", nargs="*", help="names of failure categories to show")
@argh.arg(
    "-i",
    "--input-file",
    help="TOML or JSON file with overrides, use a `[...]` suffix to indicate a subsection.",
)
@argh.arg("--level", help="only show categories of this level")
@argh.arg("-v", "--version", help="print version number and exit")
@argh.arg("--debug", help="more verbose logging")
def mirror(
    categories: list[str],
    *,
    input_file: Optional[str] = None,
    level: Optional[str] = None,
    version: bool = False,
    debug: bool = False
):
    """List the failure categories with their (configured) defaults."""
    if version:
        print(f"Mirror {__version__}")
        sys.exit(0)

    configure_logger(debug)
    try:
        catalog = load_catalog(input_file)
        level_filter = construct(FailureLevel, level) if level is not None else None
        table = failure_table(catalog, categories, level_filter)
    except UserError as e:
        log.error(f"Failed: {e}")
        sys.exit(1)

    Console().print(table)


def cli():
    parser = ArgumentParser(formatter_class=RichHelpFormatter)
    argh.set_default_command(parser, mirror)
    argh.dispatch(parser)


if __name__ == "__main__":
    cli()
