"""
Mock fetchers for development and tests: no network, fixed bodies,
optional artificial latency and injected failures.
"""
import asyncio
import time
from typing import Dict, Iterable, Optional

from sitefetch.core.config import settings
from .base import AsyncBaseFetcher, BaseFetcher, FetchResult, NetworkFailure

def _mock_body(url: str) -> str:
    """Generic mock page, sized by the URL so each site reports a different length"""
    return f"""
        <html>
        <head><title>{url}</title></head>
        <body>
            <h1>Mock page</h1>
            <p>Content served for {url}</p>
        </body>
        </html>
        """


class _MockPlan:
    def __init__(
        self,
        bodies: Optional[Dict[str, str]] = None,
        delays: Optional[Dict[str, float]] = None,
        failing: Optional[Iterable[str]] = None,
        default_delay: Optional[float] = None,
    ):
        self.bodies = dict(bodies or {})
        self.delays = dict(delays or {})
        self.failing = set(failing or ())
        # seconds
        self.default_delay = default_delay if default_delay is not None else settings.MOCK_DELAY_MS / 1000

    def delay_for(self, url: str) -> float:
        return self.delays.get(url, self.default_delay)

    def result_for(self, url: str, elapsed_ms: float) -> FetchResult:
        if url in self.failing:
            raise NetworkFailure(url, f"Mock failure for {url}")
        body = self.bodies[url] if url in self.bodies else _mock_body(url)
        return FetchResult(url=url, body=body, status_code=200, elapsed_ms=elapsed_ms)


class MockFetcher(BaseFetcher, _MockPlan):
    """Blocking mock: sleeps the calling thread for the configured delay."""

    def fetch(self, url: str) -> FetchResult:
        start = time.perf_counter()
        delay = self.delay_for(url)
        if delay:
            time.sleep(delay)
        return self.result_for(url, (time.perf_counter() - start) * 1000)


class AsyncMockFetcher(AsyncBaseFetcher, _MockPlan):
    """Asynchronous mock: yields to the event loop for the configured delay."""

    async def fetch(self, url: str) -> FetchResult:
        start = time.perf_counter()
        delay = self.delay_for(url)
        if delay:
            await asyncio.sleep(delay)
        return self.result_for(url, (time.perf_counter() - start) * 1000)
