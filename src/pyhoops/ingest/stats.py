"""Paginated fetch of per-game box scores from the stats API."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from pyhoops.config.settings import DEFAULT_STATS_URL, PER_PAGE
from pyhoops.models import StatRecord


logger = logging.getLogger(__name__)


class FetchFailure(RuntimeError):
    """Raised when any page of a stats fetch cannot be retrieved."""

    def __init__(self, status_code: Optional[int], message: Optional[str] = None):
        self.status_code = status_code
        if message is None:
            message = f"HTTP error! status: {status_code}"
        self.message = message
        super().__init__(message)


def _coerce_date(value: date | str, *, label: str) -> date:
    if isinstance(value, datetime):
        raise ValueError(f"{label} must be a calendar date without a time component, got {value!r}")
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"{label} must be a date or an ISO date string")
    text = value.strip()
    if len(text) != 10:
        raise ValueError(f"{label} must look like YYYY-MM-DD, got {value!r}")
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise ValueError(f"{label} must look like YYYY-MM-DD, got {value!r}") from None


def resolve_window(start_date: date | str, end_date: date | str) -> tuple[date, date]:
    """Validate an inclusive date window before any request goes out."""

    start = _coerce_date(start_date, label="start_date")
    end = _coerce_date(end_date, label="end_date")
    if start > end:
        raise ValueError(f"start_date {start.isoformat()} is after end_date {end.isoformat()}")
    return start, end


def _coerce_total_pages(value: Any, response: httpx.Response) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise FetchFailure(
        response.status_code,
        f"Malformed stats payload from {response.request.url}: meta.total_pages={value!r}",
    )


def _parse_page(response: httpx.Response) -> tuple[List[StatRecord], Optional[int]]:
    try:
        payload: Any = response.json()
        rows = payload["data"]
        records = [StatRecord.model_validate(row) for row in rows]
    except (ValueError, KeyError, TypeError, ValidationError) as exc:
        raise FetchFailure(
            response.status_code,
            f"Malformed stats payload from {response.request.url}: {exc}",
        ) from exc

    meta = payload.get("meta") or {}
    total_pages = meta.get("total_pages") if isinstance(meta, dict) else None
    return records, _coerce_total_pages(total_pages, response)


async def _fetch_pages(
    client: httpx.AsyncClient,
    base_url: str,
    start: date,
    end: date,
    per_page: int,
) -> List[StatRecord]:
    params = {
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "per_page": per_page,
    }
    all_stats: List[StatRecord] = []
    page = 1
    total_pages = 1

    while True:
        try:
            response = await client.get(base_url, params={**params, "page": page})
        except httpx.HTTPError as exc:
            logger.warning("Stats request for page %s failed: %s", page, exc)
            raise FetchFailure(None, f"Request for page {page} failed: {exc}") from exc

        if not response.is_success:
            logger.warning("Stats page %s returned HTTP %s", page, response.status_code)
            raise FetchFailure(response.status_code)

        records, reported_pages = _parse_page(response)
        all_stats.extend(records)
        # A page without pagination metadata is treated as the last one.
        total_pages = reported_pages if reported_pages is not None else page
        logger.debug("Fetched stats page %s/%s (%s rows)", page, total_pages, len(records))

        page += 1
        if page > total_pages:
            break

    logger.info(
        "Fetched %s stat rows across %s page(s) for %s..%s",
        len(all_stats),
        page - 1,
        start.isoformat(),
        end.isoformat(),
    )
    return all_stats


async def fetch_all_stats(
    start_date: date | str,
    end_date: date | str,
    *,
    client: httpx.AsyncClient | None = None,
    base_url: str = DEFAULT_STATS_URL,
    per_page: int = PER_PAGE,
) -> List[StatRecord]:
    """Return every box score between ``start_date`` and ``end_date`` inclusive.

    Pages are requested one at a time, starting at page 1, until the page
    number passes ``meta.total_pages``. Any failed page aborts the whole fetch
    with :class:`FetchFailure`; nothing collected so far is returned.
    """

    start, end = resolve_window(start_date, end_date)
    if client is not None:
        return await _fetch_pages(client, base_url, start, end, per_page)
    async with httpx.AsyncClient() as owned_client:
        return await _fetch_pages(owned_client, base_url, start, end, per_page)
