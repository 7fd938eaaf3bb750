from typing import Any, Dict, List, Optional

from sitefetch.core.config import settings
from sitefetch.fetch.base import AsyncBaseFetcher, BaseFetcher
from sitefetch.fetch.httpx_fetcher import HttpxFetcher
from sitefetch.fetch.mock_fetcher import AsyncMockFetcher, MockFetcher
from sitefetch.fetch.requests_fetcher import RequestsFetcher
from sitefetch.fetch.sites import prep_data
from sitefetch.services import batch
from sitefetch.services.report import render_report

def get_fetcher() -> BaseFetcher:
    if settings.USE_MOCK:
        return MockFetcher()
    return RequestsFetcher()

def get_async_fetcher() -> AsyncBaseFetcher:
    if settings.USE_MOCK:
        return AsyncMockFetcher()
    return HttpxFetcher()

def _resolve_urls(urls: Optional[List[str]]) -> List[str]:
    return list(urls) if urls is not None else prep_data()

def build_response(run: batch.BatchRun) -> Dict[str, Any]:
    return {
        "mode": run.mode,
        "elapsed_ms": run.elapsed_ms,
        "total_characters": run.total_characters,
        "failures": run.failures,
        "results": [
            {
                "url": r.url,
                "length": r.length,
                "ok": r.ok,
                "error": r.error,
                "status_code": r.status_code,
                "elapsed_ms": r.elapsed_ms,
            }
            for r in run.results
        ],
        "report": render_report(run),
    }

def process_sequential(urls: Optional[List[str]] = None) -> Dict[str, Any]:
    """Blocking run: one site after another on the calling thread."""
    run = batch.timed_sequential(_resolve_urls(urls), get_fetcher())
    return build_response(run)

async def process_offloaded(urls: Optional[List[str]] = None) -> Dict[str, Any]:
    run = await batch.timed_offloaded(_resolve_urls(urls), get_fetcher())
    return build_response(run)

async def process_concurrent(urls: Optional[List[str]] = None) -> Dict[str, Any]:
    """All sites at once, joined before the report is built."""
    run = await batch.timed_concurrent(_resolve_urls(urls), get_async_fetcher())
    return build_response(run)
