"""Exceptions raised by the library."""

from __future__ import annotations

from typing import Optional


class KandilliError(Exception):
    """Base class for every error raised by kandilli_quake."""


class FetchError(KandilliError):
    """The observatory page could not be retrieved. Fatal for a run."""

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.cause = cause
        message = f"error while getting earthquakes from observatory, url={url}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ParseError(KandilliError):
    """A bulletin line matched the pattern but one of its fields did not parse."""

    def __init__(self, field: str, raw: str, reason: Optional[str] = None) -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        message = f"error while parsing {field} of the earthquake, raw={raw!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TimezoneResolutionError(ParseError):
    """A timezone definition is missing from the tz database."""

    def __init__(self, name: str, reason: Optional[str] = None) -> None:
        super().__init__("timezone", name, reason)
