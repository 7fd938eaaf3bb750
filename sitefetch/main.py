from fastapi import FastAPI
from contextlib import asynccontextmanager
from sitefetch.api.routes import router
from sitefetch.core.config import settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Report the fetch configuration on startup.
    """
    # Startup
    print("Starting Site Fetch Race...")
    print(f"Request timeout {settings.REQUEST_TIMEOUT}s, mock mode {'on' if settings.USE_MOCK else 'off'}")

    yield

    # Shutdown
    print("Shutting down Site Fetch Race...")

app = FastAPI(
    title="Site Fetch Race",
    description="Compare sequential and concurrent download of a list of web sites",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Site Fetch Race",
        "version": "1.0.0",
        "endpoints": {
            "sequential": "POST /run/sequential",
            "offloaded": "POST /run/offloaded",
            "concurrent": "POST /run/concurrent",
            "sites": "GET /sites",
            "health": "GET /health"
        }
    }
