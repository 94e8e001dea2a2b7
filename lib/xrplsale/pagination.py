from __future__ import annotations

from typing import Any, AsyncIterator, Awaitable, Callable

DEFAULT_PAGE_SIZE = 50

PageFetcher = Callable[[int, int], Awaitable[Any]]


def page_info(envelope: Any) -> tuple[int, int] | None:
    if not isinstance(envelope, dict):
        return None
    pagination = envelope.get("pagination")
    if not isinstance(pagination, dict):
        return None
    try:
        return int(pagination["page"]), int(pagination["total_pages"])
    except (KeyError, TypeError, ValueError):
        return None


def page_items(envelope: Any) -> list[Any]:
    if not isinstance(envelope, dict):
        return []
    data = envelope.get("data")
    return list(data) if isinstance(data, list) else []


async def paginate(fetch_page: PageFetcher, *, page_size: int = DEFAULT_PAGE_SIZE) -> AsyncIterator[Any]:
    """Yield every item of a paginated listing, one page request at a time.

    ``fetch_page(page, page_size)`` must return a ``{"data": [...],
    "pagination": {"page": ..., "total_pages": ...}}`` envelope. Pages are
    requested in order starting at 1 and only when the consumer asks for
    more items. A missing ``pagination`` block ends the stream after the
    current page.

    An error from ``fetch_page`` propagates to the consumer after the items
    of earlier pages; no further pages are requested. The generator is
    single-use: once exhausted or failed, start a new one.
    """
    page = 1
    done = False
    while not done:
        envelope = await fetch_page(page, page_size)
        info = page_info(envelope)
        has_more = info is not None and info[0] < info[1]
        page += 1
        done = not has_more
        for item in page_items(envelope):
            yield item
