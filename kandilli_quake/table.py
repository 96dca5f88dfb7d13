"""Plain-text rendering of earthquake records."""

from __future__ import annotations

from typing import Callable, Iterable, List

from .constants import DISPLAY_DATETIME_FORMAT, NO_RESULTS_MESSAGE
from .models import EarthquakeRecord


def format_row(record: EarthquakeRecord, location_width: int) -> str:
    return "\t".join([
        f"{record.location:<{location_width}}",
        f"{record.magnitude:.1f}M",
        f"{record.depth:02.1f}km",
        record.occurred_at.strftime(DISPLAY_DATETIME_FORMAT),
    ])


def format_table(records: Iterable[EarthquakeRecord]) -> List[str]:
    """
    Render records as tab-separated rows, in the given order.

    The location column is padded to the longest location in `records`.
    An empty input yields the single "no results" line.
    """
    records = list(records)
    if not records:
        return [NO_RESULTS_MESSAGE]
    width = max(len(r.location) for r in records)
    return [format_row(r, width) for r in records]


def print_table(records: Iterable[EarthquakeRecord], echo: Callable[[str], None] = print) -> None:
    for line in format_table(records):
        echo(line)
