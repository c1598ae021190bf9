"""Batch orchestration for member lookups.

The member endpoint accepts at most ten customer ids per call, so a driver
list of any length is split into contiguous batches that are fetched one
after another. Results are appended in batch order, which keeps the output
in input order for a deterministic run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from core.domain.errors import IRacingApiError
from core.domain.models import Member
from core.interfaces.member_source import MemberSource
from core.logger import get_logger

# Hard cap from the API's query size limits.
MAX_BATCH_SIZE = 10

logger = get_logger("roster")


class BatchErrorPolicy(str, Enum):
    """What to do when one batch fails."""

    ABORT = "abort"
    CONTINUE = "continue"


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress, warnings)."""

    warning: Callable[[str], None] | None = None
    batch_done: Callable[[int, int], None] | None = None


def chunk_ids(ids: Sequence[int], size: int = MAX_BATCH_SIZE) -> list[list[int]]:
    """Split `ids` into contiguous batches of at most `size` items."""

    if size < 1:
        raise ValueError("batch size must be positive")
    return [list(ids[start : start + size]) for start in range(0, len(ids), size)]


async def fetch_all(
    source: MemberSource,
    ids: Sequence[int],
    *,
    policy: BatchErrorPolicy = BatchErrorPolicy.ABORT,
    hooks: PipelineHooks | None = None,
) -> list[Member]:
    """Fetch every id in sequential batches and merge the members in order.

    With `BatchErrorPolicy.ABORT` the first failing batch propagates its error
    and nothing is returned. `BatchErrorPolicy.CONTINUE` drops the failing
    batch, reports it through `hooks.warning` and keeps going.
    """

    hooks = hooks or PipelineHooks()
    batches = chunk_ids(ids)
    members: list[Member] = []

    for index, batch in enumerate(batches, start=1):
        logger.info("Fetching batch %d/%d (%d drivers)", index, len(batches), len(batch))
        try:
            members.extend(await source.get_members(batch))
        except IRacingApiError as exc:
            if policy is BatchErrorPolicy.ABORT:
                raise
            message = f"batch {index} ({batch[0]}..{batch[-1]}) skipped: {exc}"
            if hooks.warning:
                hooks.warning(message)
            else:
                logger.warning(message)
            continue
        if hooks.batch_done:
            hooks.batch_done(index, len(batches))

    return members
