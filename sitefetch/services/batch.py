import asyncio
import time
from dataclasses import dataclass, field
from typing import List, Optional

from sitefetch.core.config import settings
from sitefetch.fetch.base import (
    AsyncBaseFetcher,
    BaseFetcher,
    FetchError,
    FetchResult,
    NetworkFailure,
)

SEQUENTIAL = "sequential"
CONCURRENT = "concurrent"
OFFLOADED = "offloaded"

@dataclass
class BatchRun:
    mode: str
    results: List[FetchResult] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def total_characters(self) -> int:
        return sum(r.length for r in self.results)

    @property
    def failures(self) -> int:
        return sum(1 for r in self.results if not r.ok)


def _log_result(result: FetchResult):
    if result.ok:
        print(f"FETCHED {result.url}: {result.length} characters in {result.elapsed_ms:.0f}ms")
    else:
        print(f"FETCH FAILED {result.url}: {result.error}")


def _fetch_blocking(url: str, fetcher: BaseFetcher) -> FetchResult:
    """One blocking fetch; a FetchError becomes an error slot instead of aborting the batch."""
    start = time.perf_counter()
    try:
        result = fetcher.fetch(url)
    except FetchError as e:
        result = FetchResult.failed(url, e, (time.perf_counter() - start) * 1000)
    _log_result(result)
    return result


async def _fetch_async(url: str, fetcher: AsyncBaseFetcher, timeout: float) -> FetchResult:
    start = time.perf_counter()
    try:
        result = await asyncio.wait_for(fetcher.fetch(url), timeout)
    except asyncio.TimeoutError:
        error = NetworkFailure(url, f"Timeout after {timeout}s while fetching {url}")
        result = FetchResult.failed(url, error, (time.perf_counter() - start) * 1000)
    except FetchError as e:
        result = FetchResult.failed(url, e, (time.perf_counter() - start) * 1000)
    _log_result(result)
    return result


def run_sequential(urls: List[str], fetcher: BaseFetcher) -> List[FetchResult]:
    """
    Fetch each URL in turn on the calling thread.

    Total time is the sum of the individual fetch latencies.
    """
    results = []
    for url in urls:
        print(f"FETCHING {url}")
        results.append(_fetch_blocking(url, fetcher))
    return results


async def run_sequential_offloaded(urls: List[str], fetcher: BaseFetcher) -> List[FetchResult]:
    """
    Sequential like run_sequential, but each blocking fetch runs in a worker
    thread so the event loop keeps serving other work while it waits.
    """
    results = []
    for url in urls:
        print(f"FETCHING {url} (worker thread)")
        results.append(await asyncio.to_thread(_fetch_blocking, url, fetcher))
    return results


async def run_concurrent(
    urls: List[str],
    fetcher: AsyncBaseFetcher,
    timeout: Optional[float] = None,
) -> List[FetchResult]:
    """
    Start one fetch per URL without waiting for the others, then wait for all
    of them.

    gather() returns results by position, so the output follows input order
    whatever order the fetches finish in. Total time is bounded by the slowest
    fetch. Each fetch is capped at `timeout` seconds (settings.REQUEST_TIMEOUT
    by default). If a fetch raises anything other than a FetchError, the
    remaining fetches are cancelled before the error is raised.
    """
    if timeout is None:
        timeout = settings.REQUEST_TIMEOUT
    for url in urls:
        print(f"FETCHING {url}")
    tasks = [asyncio.ensure_future(_fetch_async(url, fetcher, timeout)) for url in urls]
    try:
        return list(await asyncio.gather(*tasks))
    except Exception:
        # gather does not cancel the siblings of a failed task
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def _finish(mode: str, results: List[FetchResult], start: float) -> BatchRun:
    run = BatchRun(mode=mode, results=results, elapsed_ms=(time.perf_counter() - start) * 1000)
    print(f"RUN COMPLETE {mode}: {len(results)} sites, {run.failures} failed, {run.elapsed_ms:.0f}ms")
    return run


def timed_sequential(urls: List[str], fetcher: BaseFetcher) -> BatchRun:
    start = time.perf_counter()
    return _finish(SEQUENTIAL, run_sequential(urls, fetcher), start)


async def timed_offloaded(urls: List[str], fetcher: BaseFetcher) -> BatchRun:
    start = time.perf_counter()
    return _finish(OFFLOADED, await run_sequential_offloaded(urls, fetcher), start)


async def timed_concurrent(
    urls: List[str],
    fetcher: AsyncBaseFetcher,
    timeout: Optional[float] = None,
) -> BatchRun:
    start = time.perf_counter()
    return _finish(CONCURRENT, await run_concurrent(urls, fetcher, timeout), start)
