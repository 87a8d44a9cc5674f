"""URL pipeline: fetch a PageSpeed payload and project it into results."""

from audit_projector import project_audit
from models import ResultItem
from pagespeed_client import AuditFetchError, fetch_audit_payload
from recommendations import add_recommendation


def run_url_audit(url: str, fetcher=None, strategy: str | None = None) -> list[ResultItem]:
    """
    Pipeline: request PageSpeed analysis -> surface network errors -> project payload.

    `fetcher` takes (url, strategy=...) and returns the payload dict or raises
    AuditFetchError. Defaults to the live PageSpeed client.
    """
    fetch = fetcher or fetch_audit_payload
    results: list[ResultItem] = []
    try:
        payload = fetch(url, strategy=strategy)
    except AuditFetchError as exc:
        add_recommendation(results, f"Network Error: {exc}", "bad")
        return results

    return project_audit(payload, results)
