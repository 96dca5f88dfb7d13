from __future__ import annotations

from typing import Optional

import httpx

from .constants import DEFAULT_TIMEOUT, OBSERVATORY_URL, PAGE_ENCODING
from .exceptions import FetchError
from .logger import get_logger


class KandilliAPI:
    """
    Minimal client for the Kandilli Observatory bulletin page.

    The bulletin is a plain-text (``<pre>``) listing of recent events; this class
    only retrieves it. Extraction of records happens in :mod:`kandilli_quake.parser`.

    Notes
    -----
    - A single GET per call, no retries.
    - Bodies without a declared charset are decoded as iso-8859-9.

    Parameters
    ----------
    url : str, optional
        Bulletin URL. Defaults to the KOERI "lst4" page.
    timeout : float, optional
        HTTP timeout in seconds.
    client : httpx.Client, optional
        An existing httpx client. If not provided, a new client will be created
        and closed by :meth:`close`.

    Examples
    --------
    >>> from kandilli_quake.api import KandilliAPI
    >>> with KandilliAPI() as api:
    ...     page = api.fetch_page()
    """

    def __init__(
        self,
        url: str = OBSERVATORY_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._logger = get_logger()
        self.url = url
        self.timeout = float(timeout)
        self._client = client
        self._owns_client = client is None

    # ---------- Lifecycle ----------
    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                headers={
                    "Accept": "text/html, text/plain, */*",
                    "User-Agent": "kandilli-quake/0.1",
                },
            )
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP client if we created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "KandilliAPI":
        self._ensure_client()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---------- HTTP ----------
    def fetch_page(self, url: Optional[str] = None) -> str:
        """
        Download the bulletin and return its body as text.

        Parameters
        ----------
        url : str, optional
            Overrides the URL given at construction time.

        Returns
        -------
        str
            The full page body.

        Raises
        ------
        FetchError
            On malformed URLs, transport failures, unreadable bodies or non-2xx
            responses. Error pages are never handed to the parser.
        """
        url = url or self.url
        client = self._ensure_client()
        self._logger.debug("GET %s", url)
        try:
            resp = client.get(url)
            resp.raise_for_status()
            if resp.charset_encoding is None:
                resp.encoding = PAGE_ENCODING
            body = resp.text
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(url, e) from e

        self._logger.info("Fetched %d characters from %s", len(body), url)
        return body
