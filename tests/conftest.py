"""Shared test fixtures for the Eco-Score API tests."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from models import AnalysisResult, CarbonEstimate, Equivalence, HostingDescriptor

MIB = 1024 * 1024


def make_response(
    *,
    json_data: object = None,
    headers: dict | None = None,
    content: bytes = b"",
    status_code: int = 200,
) -> MagicMock:
    """Build a stand-in for requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.headers = CaseInsensitiveDict(headers or {})
    response.content = content
    response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    return response


def make_carbon(grams: float, cleaner_than: int = 50) -> CarbonEstimate:
    return CarbonEstimate(
        grams_co2_per_view=grams,
        equivalence=Equivalence(trees_planted=0, kettles_boiled=0, km_driven=0),
        cleaner_than_percent=cleaner_than,
    )


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def green_hosting() -> HostingDescriptor:
    return HostingDescriptor(
        is_green=True,
        hosted_by="Green Host",
        hosted_by_website="https://green.example",
    )


@pytest.fixture
def grey_hosting() -> HostingDescriptor:
    return HostingDescriptor(is_green=False, hosted_by="Unknown")


@pytest.fixture
def sample_result(grey_hosting: HostingDescriptor) -> AnalysisResult:
    """Analysis of a 1 MiB page on non-green hosting."""
    return AnalysisResult(
        url="https://example.org/",
        eco_score=93,
        ranking="A",
        hosting=grey_hosting,
        carbon=CarbonEstimate(
            grams_co2_per_view=0.5,
            equivalence=Equivalence(trees_planted=0.00008, kettles_boiled=0.03, km_driven=0.004),
            cleaner_than_percent=50,
        ),
        page_weight=MIB,
        last_analyzed=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )
