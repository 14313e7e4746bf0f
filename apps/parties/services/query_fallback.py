"""
Fallback execution for party list queries.

List queries filter and order on indexed columns. When the database refuses
such a query (a missing index, an unapplied migration, a permissions
problem) the listing degrades to a bounded scan instead of failing the
request.
"""

import re
from typing import Callable, List, TypeVar

from django.conf import settings
from django.db import DatabaseError, transaction

from config.logging import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

_URL_RE = re.compile(r'https?://\S+')


def scan_limit() -> int:
    """Maximum number of rows a fallback scan may read."""
    return getattr(settings, 'PARTY_SCAN_LIMIT', 500)


def run_with_fallback(
    primary: Callable[[], List[T]],
    fallback: Callable[[], List[T]],
    operation: str,
) -> List[T]:
    """
    Run ``primary``; on a database error run ``fallback`` instead.

    A permission-denied failure returns an empty list, since the fallback
    would hit the same wall.

    Args:
        primary: Indexed query, evaluated to a list
        fallback: Bounded scan that filters and sorts in Python
        operation: Name used in log events

    Returns:
        Results of whichever query succeeded
    """
    try:
        # Savepoint so a failed query does not abort an enclosing transaction
        with transaction.atomic():
            return primary()
    except DatabaseError as e:
        message = str(e)
        lowered = message.lower()

        if 'permission denied' in lowered:
            logger.warning("query_permission_denied", operation=operation, error=message)
            return []

        url_match = _URL_RE.search(message)
        logger.warning(
            "query_fallback",
            operation=operation,
            missing_index='index' in lowered,
            console_url=url_match.group(0) if url_match else None,
            error=message,
        )
        try:
            return fallback()
        except DatabaseError as fallback_error:
            logger.error("query_fallback_failed", operation=operation, error=str(fallback_error))
            raise
