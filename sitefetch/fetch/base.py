from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class FetchResult:
    url: str
    body: Optional[str] = None
    error: Optional[str] = None
    status_code: Optional[int] = None
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def length(self) -> int:
        """Character count of the downloaded body, 0 when nothing was downloaded."""
        return len(self.body) if self.body else 0

    @classmethod
    def failed(cls, url: str, error: Exception, elapsed_ms: float = 0.0) -> "FetchResult":
        return cls(
            url=url,
            error=str(error),
            status_code=getattr(error, "status_code", None),
            elapsed_ms=elapsed_ms,
        )


class FetchError(Exception):
    """A single fetch did not produce a body."""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url


class NetworkFailure(FetchError):
    """Connection, DNS or timeout failure."""


class ProtocolFailure(FetchError):
    """The server answered with a non-success status."""

    def __init__(self, url: str, status_code: int):
        super().__init__(url, f"HTTP error {status_code} for {url}")
        self.status_code = status_code


class BaseFetcher:
    def fetch(self, url: str) -> FetchResult:
        raise NotImplementedError


class AsyncBaseFetcher:
    async def fetch(self, url: str) -> FetchResult:
        raise NotImplementedError
