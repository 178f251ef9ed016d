"""Shared default substitution and money formatting for every rendering strategy."""
from datetime import datetime

CURRENCY_SYMBOL = "€"
PLACEHOLDER_IMAGE = (
    'data:image/svg+xml,%3Csvg xmlns="http://www.w3.org/2000/svg" width="100" height="100"%3E'
    '%3Crect fill="%23ddd" width="100" height="100"/%3E%3C/svg%3E'
)
FALLBACK_URL = "#"
UNKNOWN_STATUS = "Unknown"


def format_money(amount: float | None) -> str:
    return f"{CURRENCY_SYMBOL}{(amount or 0):.2f}"


def image_or_placeholder(image_url: str | None) -> str:
    return image_url or PLACEHOLDER_IMAGE


def url_or_fallback(url: str | None) -> str:
    return url or FALLBACK_URL


def status_or_unknown(status: str | None) -> str:
    return status or UNKNOWN_STATUS


def format_date(value: str | None) -> str | None:
    """Render an ISO timestamp as a calendar date; anything unparseable is shown as-is."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return value
