from __future__ import annotations

from typing import Iterable, Iterator, List, Literal, Optional

import pandas as pd

from .constants import CANONICAL_FIELDS
from .exceptions import ParseError
from .logger import get_logger
from .models import Config, EarthquakeRecord, to_float32
from .parser import RecordParser, iter_candidate_lines


def is_important(record: EarthquakeRecord, min_magnitude: float, max_depth: float) -> bool:
    """
    True when the event is stronger than `min_magnitude` and shallower than `max_depth`.

    Thresholds are compared at the same single precision as the record fields.
    """
    return (
        record.magnitude > to_float32(min_magnitude)
        and record.depth < to_float32(max_depth)
    )


class EarthquakeDataset:
    """
    Ordered collection of bulletin records with filtering and export helpers.

    Records keep the order in which they appear on the observatory page.

    Key features:
    - Build from a raw page, skipping (and logging) lines that fail to parse.
    - Importance filter, or none at all when ``Config.include_all`` is set.
    - DataFrame view and a single save() for CSV/JSON.

    Parameters
    ----------
    records : iterable of EarthquakeRecord

    Examples
    --------
    >>> ds = EarthquakeDataset.from_page(page)
    >>> ds.filter_important(min_magnitude=4.5, max_depth=70).to_dataframe()
    """

    def __init__(self, records: Iterable[EarthquakeRecord] = ()) -> None:
        self._logger = get_logger()
        self._records: List[EarthquakeRecord] = list(records)

    # ------------- Constructors -------------
    @classmethod
    def from_page(cls, page: str, parser: Optional[RecordParser] = None) -> "EarthquakeDataset":
        """
        Parse every candidate line of `page`.

        A line that matches the bulletin layout but fails to parse is logged as a
        warning and dropped; the remaining lines are still processed.
        """
        parser = parser or RecordParser()
        logger = get_logger()
        records: List[EarthquakeRecord] = []
        for line, match in iter_candidate_lines(page):
            try:
                records.append(parser.parse_match(match))
            except ParseError as e:
                logger.warning("error while parsing earthquake line line=%s: %s", line, e)
        logger.info("Parsed %d earthquake records", len(records))
        return cls(records)

    # ------------- Access -------------
    @property
    def records(self) -> List[EarthquakeRecord]:
        return list(self._records)

    def __iter__(self) -> Iterator[EarthquakeRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    # ------------- Filters (in-place; chainable) -------------
    def filter_important(self, *, min_magnitude: float, max_depth: float) -> "EarthquakeDataset":
        """
        Keep records where magnitude > min_magnitude and depth < max_depth.

        Examples
        --------
        >>> ds.filter_important(min_magnitude=4.5, max_depth=70)
        """
        before = len(self._records)
        self._records = [
            r for r in self._records if is_important(r, min_magnitude, max_depth)
        ]
        self._logger.debug(
            "Importance filter kept %d of %d records (M>%s, depth<%s km)",
            len(self._records), before, min_magnitude, max_depth
        )
        return self

    def select(self, config: Config) -> "EarthquakeDataset":
        """Apply the importance filter from `config` unless it asks for everything."""
        if config.include_all:
            return self
        return self.filter_important(
            min_magnitude=config.min_magnitude,
            max_depth=config.max_depth,
        )

    # ------------- Export -------------
    def to_dataframe(self) -> pd.DataFrame:
        """
        Return the records as a DataFrame with the canonical columns.

        'occurred_at' stays tz-aware, in the display timezone chosen at parse time.
        """
        rows = [
            {
                "occurred_at": r.occurred_at,
                "location": r.location,
                "latitude": r.latitude,
                "longitude": r.longitude,
                "depth_km": r.depth,
                "magnitude": r.magnitude,
            }
            for r in self._records
        ]
        return pd.DataFrame(rows, columns=CANONICAL_FIELDS)

    def save(self, path: str, *, fmt: Literal["csv", "json"] = "csv", **kwargs) -> "EarthquakeDataset":
        """
        Save the current records to disk.

        Parameters
        ----------
        path : str
            File path.
        fmt : {'csv','json'}
            Output format.
        kwargs :
            Passed to pandas writer. For JSON, defaults to orient='records', date_format='iso'.
        """
        df = self.to_dataframe()
        if fmt == "csv":
            df.to_csv(path, index=False, encoding=kwargs.pop("encoding", "utf-8"), **kwargs)
        elif fmt == "json":
            kwargs.setdefault("orient", "records")
            kwargs.setdefault("date_format", "iso")
            kwargs.setdefault("force_ascii", False)
            df.to_json(path, **kwargs)
        else:
            raise ValueError("fmt must be 'csv' or 'json'")
        self._logger.info("Saved %d records to %s", len(df), path)
        return self
