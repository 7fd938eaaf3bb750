from sitefetch.fetch.base import FetchResult
from sitefetch.services.batch import BatchRun

def report_line(result: FetchResult) -> str:
    if result.ok:
        return f"{result.url} downloaded: {result.length} characters long."
    return f"{result.url} failed: {result.error}"

def render_report(run: BatchRun) -> str:
    """Render a run as the text block shown to the user, one line per site then the total time"""
    lines = [report_line(r) for r in run.results]
    lines.append(f"Total execution time {int(run.elapsed_ms)}")
    return "\n".join(lines)
