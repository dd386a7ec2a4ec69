"""
Cursor-based pagination helper.

Drains a listing operation that returns one page per call and a
continuation cursor, until the cursor is exhausted.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Mapping

from src.shared import get_logger

logger = get_logger(__name__)

PageOperation = Callable[..., Mapping[str, Any]]


async def collect_pages(
    operation: PageOperation,
    params: Mapping[str, Any],
    result_key: str,
    token_key: str = "NextToken",
) -> List[Any]:
    """
    Call ``operation`` until it stops returning a continuation cursor.

    The operation is a blocking SDK method; each call runs in a worker
    thread. It is always called at least once. Errors raised by the
    operation propagate unchanged and no call is retried.

    Args:
        operation: Callable accepting ``params`` as keyword arguments
        params: Request parameters; copied, the cursor is written to the copy
        result_key: Name of the array field holding each page's items
        token_key: Name of the continuation cursor field

    Returns:
        Items of every page, in page order
    """
    request: Dict[str, Any] = dict(params)
    items: List[Any] = []
    pages = 0

    while True:
        page = await asyncio.to_thread(operation, **request)
        pages += 1
        items.extend(page.get(result_key) or [])

        token = page.get(token_key)
        if not token:
            break
        request[token_key] = token

    logger.debug("pagination.collected", result_key=result_key, pages=pages, items=len(items))
    return items
