"""Shared HTTP session for the public REST Countries API."""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

USER_AGENT = "deteksi/0.1"

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return a shared requests.Session that retries idempotent GETs on 5xx.

    Backoff is exponential (1s, 2s, 4s). 429 is not retried here so the
    caller can surface a rate-limit message right away.
    """
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update({"Accept": "application/json", "User-Agent": USER_AGENT})
        retry = Retry(
            total=3,
            backoff_factor=1,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        _session.mount("https://", HTTPAdapter(max_retries=retry))
    return _session
