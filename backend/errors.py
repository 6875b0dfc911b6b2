"""Exceptions raised by the analysis pipeline."""


class AnalysisError(Exception):
    """Base class for pipeline errors."""


class InvalidURLError(AnalysisError, ValueError):
    """The submitted URL is missing or cannot be analysed."""


class PageFetchError(AnalysisError):
    """Every page-weight strategy failed, so the page cannot be scored."""

    def __init__(self, url: str, reasons: list[str] | None = None) -> None:
        self.url = url
        self.reasons = list(reasons or [])
        detail = "; ".join(self.reasons) or "no strategy succeeded"
        super().__init__(f"Could not retrieve the content of {url}: {detail}")
