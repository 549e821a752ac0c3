"""
Status model shared by tasks and columns.

A task belongs to whichever column carries the same ``status`` string. Three
static statuses are always shown for every board without being stored as
column rows; custom columns are appended after them in ``order``.
"""
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

TODO = "TODO"
IN_PROGRESS = "IN_PROGRESS"
DONE = "DONE"

DEFAULT_TASK_STATUS = TODO

# (status, display label), in display order
STATIC_COLUMNS: Tuple[Tuple[str, str], ...] = (
    (TODO, "TODO"),
    (IN_PROGRESS, "DOING"),
    (DONE, "DONE"),
)
STATIC_STATUSES = tuple(status for status, _ in STATIC_COLUMNS)

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class EffectiveColumn:
    status: str
    title: str
    is_static: bool
    column_id: Optional[str] = None
    order: Optional[int] = None


def derive_status_key(title: str) -> str:
    """Turn a column title into its status key: ``"In Review"`` -> ``"IN_REVIEW"``.

    Surrounding whitespace is dropped first, so ``"In Review "`` gives
    ``"IN_REVIEW"``; a plain uppercase-and-replace on the client would give
    ``"IN_REVIEW_"``. Idempotent. Titles that normalize to the same key share
    a key; callers that care about collisions must check for them.
    """
    return _WHITESPACE_RUN.sub("_", title.strip().upper())


def is_static(status: str) -> bool:
    return status in STATIC_STATUSES


def is_deletable(status: str) -> bool:
    """Static statuses can never be removed through the column-delete operation."""
    return not is_static(status)


def next_column_order(existing_columns: Iterable) -> int:
    return max((column.order for column in existing_columns), default=-1) + 1


def assign_task_status(task, target_status: str):
    """Move ``task`` to ``target_status``. Any string is accepted."""
    task.status = target_status
    return task


def effective_columns(board) -> List[EffectiveColumn]:
    """Columns as displayed for ``board``.

    The static columns come first in fixed order. A stored column whose status
    is static only overrides the label at the static position. Stored columns
    follow by ``order``; a repeated status is shown once, first one wins.
    """
    stored = sorted(board.columns, key=lambda column: column.order)

    overrides = {}
    for column in stored:
        if is_static(column.status) and column.status not in overrides:
            overrides[column.status] = column

    result = []
    for status, label in STATIC_COLUMNS:
        override = overrides.get(status)
        result.append(EffectiveColumn(
            status=status,
            title=override.title if override else label,
            is_static=True,
            column_id=override.id if override else None,
            order=override.order if override else None,
        ))

    seen = set(STATIC_STATUSES)
    for column in stored:
        if column.status in seen:
            continue
        seen.add(column.status)
        result.append(EffectiveColumn(
            status=column.status,
            title=column.title,
            is_static=False,
            column_id=column.id,
            order=column.order,
        ))
    return result


def group_tasks(board) -> Tuple[List[Tuple[EffectiveColumn, list]], list]:
    """Partition ``board.tasks`` under its effective columns.

    Returns ``(groups, unassigned)`` where ``unassigned`` holds tasks whose
    status matches no column.
    """
    columns = effective_columns(board)
    by_status = {column.status: [] for column in columns}
    unassigned = []
    for task in board.tasks:
        bucket = by_status.get(task.status)
        if bucket is None:
            unassigned.append(task)
        else:
            bucket.append(task)
    return [(column, by_status[column.status]) for column in columns], unassigned
