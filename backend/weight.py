"""Page-weight measurement: transferred byte size of a page's primary response.

Strategies are tried in order until one yields a byte count:
a HEAD probe that reads Content-Length without downloading the body,
then a full GET whose decoded body length is measured.
If every strategy fails the outcome says so; no default weight is substituted.
"""

import logging
from dataclasses import dataclass, field

import requests

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 5

_REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


@dataclass(frozen=True)
class WeightStrategy:
    """One way of measuring a page, with its own timeout."""

    name: str
    method: str
    timeout: float
    reads_body: bool


STRATEGIES: tuple[WeightStrategy, ...] = (
    WeightStrategy(name="probe", method="HEAD", timeout=10, reads_body=False),
    WeightStrategy(name="download", method="GET", timeout=15, reads_body=True),
)


@dataclass(frozen=True)
class WeightOutcome:
    """Result of measuring a page: either a byte count or the reasons it failed."""

    url: str
    page_weight: int | None = None
    strategy: str | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.page_weight is not None


def _content_length(response: requests.Response) -> int | None:
    raw = (response.headers.get("Content-Length") or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value >= 0 else None


def _measure(session: requests.Session, url: str, strategy: WeightStrategy) -> int | None:
    response = session.request(
        strategy.method,
        url,
        timeout=strategy.timeout,
        allow_redirects=True,
        headers=_REQUEST_HEADERS,
    )
    try:
        response.raise_for_status()
        if strategy.reads_body:
            return len(response.content)
        return _content_length(response)
    finally:
        response.close()


def _run_strategies(session: requests.Session, url: str) -> WeightOutcome:
    errors: list[str] = []
    for strategy in STRATEGIES:
        try:
            size = _measure(session, url, strategy)
        except requests.RequestException as exc:
            logger.info("%s %s failed for %s: %s", strategy.name, strategy.method, url, exc)
            errors.append(f"{strategy.name}: {exc}")
            continue

        if size is None:
            logger.info("%s %s for %s gave no Content-Length", strategy.name, strategy.method, url)
            errors.append(f"{strategy.name}: no content length")
            continue

        return WeightOutcome(url=url, page_weight=size, strategy=strategy.name, errors=errors)

    logger.error("Could not measure page weight for %s: %s", url, "; ".join(errors))
    return WeightOutcome(url=url, errors=errors)


def estimate_page_weight(url: str, session: requests.Session | None = None) -> WeightOutcome:
    """
    Measure the transferred size of `url` in bytes.
    Network and HTTP errors are recorded in the outcome, never raised.
    """
    if session is None:
        with requests.Session() as own_session:
            return estimate_page_weight(url, own_session)

    session.max_redirects = MAX_REDIRECTS
    return _run_strategies(session, url)
