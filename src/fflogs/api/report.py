"""Endpoints scoped to a single report code."""

import logging
from collections.abc import Iterator
from typing import Any

from fflogs.dispatcher import Dispatcher, encode_component
from fflogs.domain.report import EventsPage, ReportFights
from fflogs.mappers import events_page_from_json, report_fights_from_json

logger = logging.getLogger(__name__)


def fights(dispatcher: Dispatcher, code: str, **params: Any) -> ReportFights:
    """Fights (boss pulls) in the report and the actors that took part in them."""
    data = dispatcher.get(f"report/fights/{encode_component(code)}", params)
    return report_fights_from_json(data)


def events(dispatcher: Dispatcher, code: str, **params: Any) -> EventsPage:
    """One page of damage, healing, cast, buff and debuff events.

    At most 300 events come back per call. When more remain, the page carries
    ``next_page_timestamp``; pass it as ``start`` to fetch the next page, or use
    :func:`iter_events`.
    """
    data = dispatcher.get(f"report/events/{encode_component(code)}", params)
    return events_page_from_json(data)


def iter_events(dispatcher: Dispatcher, code: str, **params: Any) -> Iterator[dict[str, Any]]:
    """Yield every event in the requested window, following ``nextPageTimestamp``.

    Pages are fetched lazily, one request per page. Iteration stops if the
    cursor does not move past the current ``start``.
    """
    page_params = dict(params)
    pages = 0
    while True:
        page = events(dispatcher, code, **page_params)
        pages += 1
        yield from page.events or []
        if page.next_page_timestamp is None:
            break
        current_start = page_params.get("start")
        if current_start is not None and page.next_page_timestamp <= current_start:
            logger.warning(
                "Report %s returned a non-advancing nextPageTimestamp %s (start %s); stopping",
                code,
                page.next_page_timestamp,
                current_start,
            )
            break
        page_params["start"] = page.next_page_timestamp
    logger.debug("Read %d event pages for report %s", pages, code)


def tables(dispatcher: Dispatcher, view: str, code: str, **params: Any) -> Any:
    """Damage, healing or cast totals per actor or ability for *view*.

    This mirrors the Tables panes on the site and can change whenever they do,
    so the JSON is returned as-is.
    """
    return dispatcher.get(f"report/tables/{encode_component(view)}/{encode_component(code)}", params)
