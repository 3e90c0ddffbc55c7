"""Optimistic updates with a pure inverse on failure.

A Transform pairs a state change with the function that undoes it. The
caller's commit either succeeds, or the inverse restores the prior state.
No retries.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

S = TypeVar("S")


@dataclass(frozen=True)
class Transform(Generic[S]):
    name: str
    apply: Callable[[S], S]
    inverse: Callable[[S], S]


@dataclass
class UpdateResult(Generic[S]):
    """Result of an optimistic update attempt."""

    success: bool
    state: S
    error: str = ""


async def apply_with_rollback(
    state: S,
    transform: Transform[S],
    commit: Callable[[S], Awaitable[None]],
) -> UpdateResult[S]:
    """Apply ``transform`` to ``state`` and persist it via ``commit``.

    Returns the new state on success. If ``commit`` raises, the inverse is
    applied to the optimistic state and the restored state is returned with
    ``success=False``.
    """
    optimistic = transform.apply(state)
    try:
        await commit(optimistic)
    except Exception as e:
        logger.warning(
            "optimistic_update_reverted",
            transform=transform.name,
            error=str(e),
            error_type=type(e).__name__,
        )
        return UpdateResult(success=False, state=transform.inverse(optimistic), error=str(e))

    return UpdateResult(success=True, state=optimistic)


def _flip_completed(state: dict) -> dict:
    return {**state, "completed": not state["completed"]}


# Flipping is its own inverse.
TOGGLE_COMPLETED: Transform[dict] = Transform(
    name="toggle_completed",
    apply=_flip_completed,
    inverse=_flip_completed,
)
