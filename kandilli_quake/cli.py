import logging
import sys

import click

from .api import KandilliAPI
from .constants import (
    DEFAULT_MAX_DEPTH, DEFAULT_MIN_MAGNITUDE, DEFAULT_TIMEOUT, OBSERVATORY_URL
)
from .dataset import EarthquakeDataset
from .exceptions import FetchError
from .logger import configure_logging
from .models import Config
from .parser import RecordParser
from .table import print_table

CLI_LOG_FORMAT = "%(levelname)s: %(message)s"


@click.command(help="Lists recent important earthquakes from the Kandilli Observatory bulletin.")
@click.option("-a", "--all", "include_all", is_flag=True, default=False, help="Do not filter unimportant earthquakes.")
@click.option("-d", "--max-depth", default=DEFAULT_MAX_DEPTH, type=float, show_default=True, help="Max depth of an important earthquake in kilometers.")
@click.option("-m", "--min-magnitude", default=DEFAULT_MIN_MAGNITUDE, type=float, show_default=True, help="Min magnitude of an important earthquake.")
@click.option("--url", default=OBSERVATORY_URL, show_default=True, help="Bulletin URL.")
@click.option("--timeout", default=DEFAULT_TIMEOUT, type=float, show_default=True, help="HTTP timeout in seconds.")
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False, writable=True), default=None, help="Also save the listed earthquakes to this file.")
@click.option("--format", "fmt", type=click.Choice(["csv", "json"]), default="csv", show_default=True, help="Format used with --output.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress, not only warnings.")
def main(include_all, max_depth, min_magnitude, url, timeout, output_path, fmt, verbose):
    """
    Fetch the bulletin, keep the important earthquakes and print them as a table.

    Lines that fail to parse are reported as warnings on stdout and skipped.
    A failed fetch prints a diagnostic and exits with status 1.
    """
    configure_logging(
        level=logging.INFO if verbose else logging.WARNING,
        fmt=CLI_LOG_FORMAT,
        stream=sys.stdout,
    )
    config = Config(
        include_all=include_all,
        max_depth=max_depth,
        min_magnitude=min_magnitude,
    )

    try:
        with KandilliAPI(url=url, timeout=timeout) as api:
            page = api.fetch_page()
    except FetchError as e:
        click.echo(f"error while getting observatory page: {e}")
        sys.exit(1)

    ds = EarthquakeDataset.from_page(page, RecordParser()).select(config)
    print_table(ds, echo=click.echo)

    if output_path:
        ds.save(output_path, fmt=fmt)
