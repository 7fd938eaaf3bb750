import os

class Settings:
    # Fetching
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")

    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")
    # Artificial latency for mock fetches, in milliseconds
    MOCK_DELAY_MS: int = int(os.getenv("MOCK_DELAY_MS", "0"))

settings = Settings()
