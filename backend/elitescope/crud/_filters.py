"""Search predicate shared by every catalog and content listing.

A :class:`SearchFilter` describes *what* the caller asked for; the CRUD base
turns it into SQL. Text search is a case-insensitive literal substring match
OR'd across the entity's text columns; categorical filters are exact matches;
everything provided is AND'ed together.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE metacharacters so ``value`` matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


@dataclass(frozen=True)
class SearchFilter:
    """Optional free-text query, exact-match filters and pagination."""

    query: Optional[str] = None
    exact: Mapping[str, Any] = field(default_factory=dict)
    limit: int = 20
    offset: int = 0

    @property
    def text(self) -> Optional[str]:
        """Lower-cased query, or None when it is missing or blank."""
        if self.query is None or not self.query.strip():
            return None
        return self.query.strip().lower()

    @property
    def active_exact(self) -> Dict[str, Any]:
        """Exact-match filters that were actually provided.

        Empty strings count as not provided.
        """
        return {k: v for k, v in self.exact.items() if v is not None and v != ""}
