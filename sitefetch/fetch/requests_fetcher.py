import time
from typing import Optional
import requests

from sitefetch.core.config import settings
from .base import BaseFetcher, FetchResult, NetworkFailure, ProtocolFailure

class RequestsFetcher(BaseFetcher):
    """Blocking fetcher: the calling thread waits for the whole body."""

    def __init__(self, timeout_sec: Optional[float] = None):
        self.timeout_sec = timeout_sec if timeout_sec is not None else settings.REQUEST_TIMEOUT

    def fetch(self, url: str) -> FetchResult:
        headers = {"User-Agent": settings.USER_AGENT, "Accept-Language": "en-US,en;q=0.5"}
        start = time.perf_counter()
        try:
            resp = requests.get(url, headers=headers, timeout=self.timeout_sec)
        except requests.Timeout:
            raise NetworkFailure(url, f"Timeout while fetching {url}")
        except requests.RequestException as e:
            raise NetworkFailure(url, f"Failed to fetch {url}: {str(e)}")

        if not resp.ok:
            raise ProtocolFailure(url, int(resp.status_code))

        return FetchResult(
            url=url,
            body=resp.text,
            status_code=int(resp.status_code),
            elapsed_ms=(time.perf_counter() - start) * 1000,
        )
