"""The single check behind every stage-boundary contract."""

import logging

from sedinit.contracts.failure import ContractViolation

logger = logging.getLogger(__name__)


def require(condition: bool, message: str, *args) -> None:
    """Raise ContractViolation unless ``condition`` holds.

    ``message`` may carry %-style placeholders filled from ``args``; they are
    only formatted when the check fails, so contracts that loop over every
    road cell do not build a string per cell.

    Examples
    --------
    >>> require(geometry.dmass > 0, "Fine grid contract violated: dmass=%s", geometry.dmass)
    """
    if condition:
        return
    text = message % args if args else message
    logger.error(text)
    raise ContractViolation(text)
