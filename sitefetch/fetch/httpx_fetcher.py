import time
from typing import Optional
import httpx

from sitefetch.core.config import settings
from .base import AsyncBaseFetcher, FetchResult, NetworkFailure, ProtocolFailure

class HttpxFetcher(AsyncBaseFetcher):
    """
    Asynchronous fetcher. Awaiting the request hands control back to the
    event loop until the response body has arrived.

    Args:
        timeout_sec: Client timeout, defaults to settings.REQUEST_TIMEOUT
        transport: Optional httpx transport, used by tests to stub the network
    """

    def __init__(
        self,
        timeout_sec: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout_sec = timeout_sec if timeout_sec is not None else settings.REQUEST_TIMEOUT
        self.transport = transport

    async def fetch(self, url: str) -> FetchResult:
        headers = {
            "User-Agent": settings.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
        }
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_sec,
                headers=headers,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                body = response.text
                status = response.status_code
        except httpx.TimeoutException:
            raise NetworkFailure(url, f"Timeout while fetching {url}")
        except httpx.HTTPStatusError as e:
            raise ProtocolFailure(url, e.response.status_code)
        except (httpx.InvalidURL, httpx.HTTPError) as e:
            raise NetworkFailure(url, f"Failed to fetch {url}: {str(e)}")

        return FetchResult(
            url=url,
            body=body,
            status_code=status,
            elapsed_ms=(time.perf_counter() - start) * 1000,
        )
