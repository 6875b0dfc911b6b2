"""Analysis pipeline: hosting lookup + page weight -> carbon -> eco-score."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from cache import ResultCache
from carbon import calculate_carbon
from errors import PageFetchError
from hosting import check_green_hosting
from models import AnalysisResult
from scoring import calculate_score
from weight import estimate_page_weight

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def analyze_site(url: str) -> AnalysisResult:
    """
    Analyse a normalized URL end to end.

    The hosting lookup and the page-weight measurement run concurrently.
    A failed hosting lookup is already degraded to a non-green descriptor;
    a failed measurement raises PageFetchError.
    """
    logger.info("Analysing %s", url)

    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="analyze") as pool:
        hosting_future = pool.submit(check_green_hosting, url)
        weight_future = pool.submit(estimate_page_weight, url)
        hosting = hosting_future.result()
        weight = weight_future.result()

    if not weight.ok:
        raise PageFetchError(url, weight.errors)

    carbon = calculate_carbon(weight.page_weight, hosting.is_green)
    score = calculate_score(carbon, hosting)

    return AnalysisResult(
        url=url,
        eco_score=score.eco_score,
        ranking=score.ranking,
        hosting=hosting,
        carbon=carbon,
        page_weight=weight.page_weight,
        last_analyzed=_utc_now(),
    )


def analyze_with_cache(url: str, cache: ResultCache) -> tuple[AnalysisResult, bool]:
    """Return (result, cached). Only successful analyses are stored."""
    cached = cache.get(url)
    if cached is not None:
        logger.debug("Cache hit: %s", url)
        return cached, True

    logger.debug("Cache miss: %s", url)
    result = analyze_site(url)
    cache.put(url, result)
    return result, False
