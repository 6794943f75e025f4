"""In-memory counterpart of the SQL search predicate.

Fake repositories use :func:`apply_filter` so that service tests observe the
same filtering, ordering and pagination rules as the CRUD layer.
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

from elitescope.crud._filters import SearchFilter

RowT = TypeVar("RowT")


def _matches(row: Any, filters: SearchFilter, text_fields: Sequence[str]) -> bool:
    text = filters.text
    if text is not None and text_fields:
        if not any(text in (getattr(row, f) or "").lower() for f in text_fields):
            return False
    return all(getattr(row, k) == v for k, v in filters.active_exact.items())


def sort_rows(
    rows: Iterable[RowT], key: Optional[Callable[[RowT], Any]], *, descending: bool = False
) -> List[RowT]:
    """Sort by ``key`` with ``id`` as tie-breaker; rows whose key is None go last."""
    by_id = sorted(rows, key=lambda r: r.id)
    if key is None:
        return by_id
    present = [r for r in by_id if key(r) is not None]
    missing = [r for r in by_id if key(r) is None]
    present.sort(key=key, reverse=descending)
    return present + missing


def apply_filter(
    rows: Iterable[RowT],
    filters: SearchFilter,
    *,
    text_fields: Sequence[str] = (),
    sort_key: Optional[Callable[[RowT], Any]] = None,
    descending: bool = False,
    where: Optional[Callable[[RowT], bool]] = None,
) -> List[RowT]:
    """Filter, order and paginate ``rows`` like ``CRUDBase.search``."""
    kept = [
        r for r in rows if _matches(r, filters, text_fields) and (where is None or where(r))
    ]
    ordered = sort_rows(kept, sort_key, descending=descending)
    return ordered[filters.offset : filters.offset + filters.limit]
