from typing import List

def prep_data() -> List[str]:
    """Return a fresh copy of the sites raced by every run."""
    return [
        "https://www.yahoo.com/",
        "https://www.google.com/",
        "https://www.microsoft.com/",
        "https://www.cnn.com/",
        "https://www.codeproject.com/",
        "https://www.stackoverflow.com/",
        "https://www.github.com/",
        "https://www.youtube.com/",
    ]
