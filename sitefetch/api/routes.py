from typing import List, Optional
from fastapi import APIRouter, HTTPException, status
from sitefetch.schemas import RunRequest, RunResponse
from sitefetch.fetch.sites import prep_data
from sitefetch.services import race

router = APIRouter()

def _validate_urls(request: Optional[RunRequest]) -> Optional[List[str]]:
    if request is None or request.urls is None:
        return None
    for url in request.urls:
        if not url.startswith(("http://", "https://")):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"URL must start with http:// or https://: {url}"
            )
    return request.urls

@router.post("/run/sequential", response_model=RunResponse)
def run_sequential(request: Optional[RunRequest] = None):
    """
    Download the sites one after another with a blocking client.

    Declared as a plain function so FastAPI runs it in its threadpool;
    the request is tied up for the sum of all download times.
    """
    urls = _validate_urls(request)
    try:
        return RunResponse(**race.process_sequential(urls))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.post("/run/offloaded", response_model=RunResponse)
async def run_offloaded(request: Optional[RunRequest] = None):
    """Download the sites one after another, each blocking fetch in a worker thread"""
    urls = _validate_urls(request)
    try:
        return RunResponse(**await race.process_offloaded(urls))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.post("/run/concurrent", response_model=RunResponse)
async def run_concurrent(request: Optional[RunRequest] = None):
    """
    Download all sites at once and wait for the last one.

    Results come back in the order the sites were listed.
    """
    urls = _validate_urls(request)
    try:
        return RunResponse(**await race.process_concurrent(urls))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.get("/sites")
async def list_sites():
    """Default sites raced by every run"""
    return {"sites": prep_data()}

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Site Fetch Race"}
