"""Green-hosting lookup against the Green Web Foundation registry.

The registry is keyed by hostname and answers with a JSON verdict such as
{"url": "example.org", "green": true, "hostedby": "...", "hostedbywebsite": "..."}.
A failed lookup never aborts an analysis: the caller gets a conservative,
non-green descriptor instead.
"""

import logging

import requests

from config import GREENCHECK_API_URL
from models import HostingDescriptor
from urls import hostname_of

logger = logging.getLogger(__name__)

LOOKUP_TIMEOUT_SECONDS = 10
UNKNOWN_HOST = "Unknown"
VERIFICATION_ERROR = "verification error"

_REQUEST_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "EcoScoreBot/1.0 (+https://www.thegreenwebfoundation.org/)",
}

UNKNOWN_DESCRIPTOR = HostingDescriptor(is_green=False, hosted_by=UNKNOWN_HOST)
ERROR_DESCRIPTOR = HostingDescriptor(is_green=False, hosted_by=VERIFICATION_ERROR)


def _text_or_none(value: object) -> str | None:
    text = str(value or "").strip()
    return text or None


def check_green_hosting(url: str) -> HostingDescriptor:
    """
    Look up whether the host serving `url` runs on green energy.
    On network, HTTP or JSON failure, returns a non-green descriptor. Never raises.
    """
    domain = hostname_of(url)
    if not domain:
        logger.warning("Green-hosting lookup skipped, no hostname in %s", url)
        return ERROR_DESCRIPTOR

    try:
        response = requests.get(
            f"{GREENCHECK_API_URL}/{domain}",
            timeout=LOOKUP_TIMEOUT_SECONDS,
            headers=_REQUEST_HEADERS,
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Green-hosting lookup failed for %s: %s", domain, exc)
        return ERROR_DESCRIPTOR

    if not isinstance(data, dict) or not isinstance(data.get("green"), bool):
        logger.info("Green-hosting registry gave no verdict for %s", domain)
        return UNKNOWN_DESCRIPTOR

    return HostingDescriptor(
        is_green=data["green"],
        hosted_by=_text_or_none(data.get("hostedby")) or UNKNOWN_HOST,
        hosted_by_website=_text_or_none(data.get("hostedbywebsite")),
    )
