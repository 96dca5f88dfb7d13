"""
Extraction of earthquake records from the observatory bulletin.

A bulletin line looks like::

    2023.05.01 12:30:00  38.1234   27.5678        8.5      -.-  4.8  -.-   IZMIR-BORNOVA (AA)

Only lines matching :data:`LINE_PATTERN` are considered; headers, footers and
anything else on the page are skipped without a word.
"""

from __future__ import annotations

import datetime as _dt
import functools
import re
from typing import Iterator, Mapping, Optional, Tuple, Union

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .constants import DATETIME_FORMAT, SOURCE_TZ
from .exceptions import ParseError, TimezoneResolutionError
from .models import EarthquakeRecord

TzLike = Union[str, _dt.tzinfo]

# Groups: 1 date, 2 time, 3 latitude, 4 longitude, 5 depth, 6 magnitude,
# 7 province, 8 epicenter (optional).
LINE_PATTERN = re.compile(
    r"(?P<date>\d{4}\.\d{2}\.\d{2})\s(?P<time>\d{2}:\d{2}:\d{2})\s+"
    r"(?P<latitude>\d+\.\d+)\s+(?P<longitude>\d+\.\d+)\s+(?P<depth>\d+\.\d+)\s+\S+\s+"
    r"(?P<magnitude>\d+\.\d+)\s+\S+\s+"
    r"(?P<province>\w+)-(?P<epicenter>\w+)? ?\(\w+\)"
)


def iter_candidate_lines(page: str) -> Iterator[Tuple[str, re.Match[str]]]:
    """Yield ``(line, match)`` for every line of `page` that looks like an event."""
    for line in page.splitlines():
        m = LINE_PATTERN.search(line)
        if m is not None:
            yield line, m


@functools.lru_cache(maxsize=None)
def _zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise TimezoneResolutionError(name, str(e)) from e


def resolve_timezone(tz: TzLike) -> _dt.tzinfo:
    """Return a tzinfo for a zone name, or `tz` itself if it already is one."""
    if isinstance(tz, _dt.tzinfo):
        return tz
    return _zone(tz)


def _parse_float(field: str, raw: str) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise ParseError(field, raw, str(e)) from e


class RecordParser:
    """
    Turn matched bulletin lines into :class:`EarthquakeRecord` values.

    Parameters
    ----------
    source_tz : str | tzinfo
        Zone the bulletin times are written in.
    local_tz : str | tzinfo | None
        Zone records are converted to for display. ``None`` means the local
        timezone of the process.

    Examples
    --------
    >>> p = RecordParser(local_tz="UTC")
    >>> rec = p.parse("2023.05.01 12:30:00   38.1234   27.5678   8.50  -.- 4.8 -.- Izmir-Bornova (AA)")
    >>> rec.location, rec.depth
    ('Izmir Bornova', 8.5)
    """

    def __init__(self, source_tz: TzLike = SOURCE_TZ, local_tz: Optional[TzLike] = None) -> None:
        self.source_tz = source_tz
        self.local_tz = local_tz

    def parse(self, line: str) -> EarthquakeRecord:
        m = LINE_PATTERN.search(line)
        if m is None:
            raise ParseError("line", line, "not an earthquake line")
        return self.parse_match(m)

    def parse_match(self, match: re.Match[str]) -> EarthquakeRecord:
        return self.parse_fields(match.groupdict())

    def parse_fields(self, fields: Mapping[str, Optional[str]]) -> EarthquakeRecord:
        """
        Build a record from raw field strings.

        `fields` uses the group names of :data:`LINE_PATTERN`. Each field fails
        with its own :class:`ParseError`; nothing is filled with placeholders.
        """
        datetime_str = f"{fields['date']} {fields['time']}"
        source = resolve_timezone(self.source_tz)
        try:
            naive = _dt.datetime.strptime(datetime_str, DATETIME_FORMAT)
        except ValueError as e:
            raise ParseError("date", datetime_str, str(e)) from e
        occurred_at = naive.replace(tzinfo=source)

        latitude = _parse_float("latitude", fields["latitude"])
        longitude = _parse_float("longitude", fields["longitude"])
        depth = _parse_float("depth", fields["depth"])
        magnitude = _parse_float("magnitude", fields["magnitude"])

        if self.local_tz is None:
            occurred_at = occurred_at.astimezone()
        else:
            occurred_at = occurred_at.astimezone(resolve_timezone(self.local_tz))

        province = fields["province"]
        epicenter = fields.get("epicenter")
        location = f"{province} {epicenter}" if epicenter else province

        return EarthquakeRecord(
            location=location,
            latitude=latitude,
            longitude=longitude,
            occurred_at=occurred_at,
            magnitude=magnitude,
            depth=depth,
        )
