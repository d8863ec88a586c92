"""Handler Support — shared failure path for request handlers.

Invariants:
    - Must be called from inside an ``except`` block (logs the active exception)
    - Leaves the session usable: the failed unit of work is rolled back
"""

import logging

from fina.core.repository_protocols import OwnedRepository

logger = logging.getLogger(__name__)


async def recover_from_failure(
    repository: OwnedRepository, operation: str, user_id: str, **extra: object,
) -> None:
    """Log the in-flight exception and roll back the pending unit of work."""
    logger.error(
        f"{operation} failed",
        exc_info=True,
        extra={"operation": operation, "user_id": user_id, **extra},
    )
    try:
        await repository.rollback()
    except Exception as e:
        logger.warning(
            f"Rollback after failed {operation} also failed: {e}",
            extra={"operation": operation, "user_id": user_id},
        )
