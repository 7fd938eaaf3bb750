from pydantic import BaseModel, Field
from typing import List, Optional

class SiteResult(BaseModel):
    url: str
    length: int = Field(0, description="Downloaded body length in characters")
    ok: bool = True
    error: Optional[str] = None
    status_code: Optional[int] = None
    elapsed_ms: float = 0.0

class RunRequest(BaseModel):
    urls: Optional[List[str]] = Field(None, description="Sites to fetch; the default list when omitted")

class RunResponse(BaseModel):
    mode: str
    elapsed_ms: float
    total_characters: int
    failures: int
    results: List[SiteResult]
    report: str = Field(description="Rendered text report, one line per site then the total time")
