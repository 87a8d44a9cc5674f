"""
Google PageSpeed Insights v5 client.

An API key is optional (requests without one are rate-limited). Define it in a
.env file in the backend root:

PAGESPEED_API_KEY=your_real_key_here

The app loads environment variables automatically using python-dotenv.
"""

import logging
import os
from pathlib import Path

import requests
from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

PAGESPEED_ENDPOINT = os.getenv(
    "PAGESPEED_ENDPOINT", "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"
).strip()
PAGESPEED_API_KEY = os.getenv("PAGESPEED_API_KEY", "").strip()
PAGESPEED_STRATEGY = os.getenv("PAGESPEED_STRATEGY", "DESKTOP").strip().upper() or "DESKTOP"
_timeout_raw = os.getenv("PAGESPEED_TIMEOUT_SECONDS", "").strip()
# Unset means no client-side timeout; the call waits for the API.
PAGESPEED_TIMEOUT_SECONDS = float(_timeout_raw) if _timeout_raw else None

STRATEGIES = ("DESKTOP", "MOBILE")
CATEGORIES = ("PERFORMANCE", "ACCESSIBILITY", "SEO")


class AuditFetchError(Exception):
    """The PageSpeed request failed before a JSON payload was received."""


def build_params(url: str, strategy: str, api_key: str) -> list[tuple[str, str]]:
    params = [("url", url), ("strategy", strategy)]
    params.extend(("category", category) for category in CATEGORIES)
    if api_key:
        params.append(("key", api_key))
    return params


def fetch_audit_payload(
    url: str,
    strategy: str | None = None,
    api_key: str | None = None,
    timeout: float | None = None,
) -> dict:
    """
    Run one PageSpeed analysis for `url` and return the decoded JSON body.

    HTTP error statuses are not raised: the API describes them in the payload's
    `error` object, which the projector reports. Transport failures and
    non-JSON bodies raise AuditFetchError. No retries.
    """
    chosen_strategy = (strategy or PAGESPEED_STRATEGY).upper()
    key = PAGESPEED_API_KEY if api_key is None else api_key
    wait = PAGESPEED_TIMEOUT_SECONDS if timeout is None else timeout

    try:
        response = requests.get(
            PAGESPEED_ENDPOINT,
            params=build_params(url, chosen_strategy, key),
            timeout=wait,
        )
    except requests.RequestException as exc:
        logger.warning("PageSpeed request failed for %s: %s", url, exc)
        raise AuditFetchError(str(exc)) from exc

    try:
        payload = response.json()
    except ValueError as exc:
        logger.warning(
            "PageSpeed returned a non-JSON body for %s (HTTP %s)", url, response.status_code
        )
        raise AuditFetchError(f"Invalid JSON in PageSpeed response: {exc}") from exc

    if not isinstance(payload, dict):
        raise AuditFetchError("Unexpected PageSpeed response shape.")

    logger.info("PageSpeed analysis received for %s (HTTP %s)", url, response.status_code)
    return payload
