"""
kandilli_quake
A tiny client that reads the Kandilli Observatory bulletin and lists recent important earthquakes.
"""

__version__ = "0.1.0"

from .api import KandilliAPI
from .dataset import EarthquakeDataset, is_important
from .exceptions import FetchError, ParseError, TimezoneResolutionError
from .models import Config, EarthquakeRecord
from .parser import RecordParser

__all__ = [
    "KandilliAPI",
    "EarthquakeDataset",
    "is_important",
    "FetchError",
    "ParseError",
    "TimezoneResolutionError",
    "Config",
    "EarthquakeRecord",
    "RecordParser",
]
