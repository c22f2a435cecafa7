"""Query helpers shared by the directory repositories."""

from typing import Any

from sqlalchemy import ColumnElement, or_

from storerate.domain.shared.pagination import SortOrder

_LIKE_ESCAPE = "\\"


def contains_ci(column: Any, term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match with LIKE wildcards escaped."""
    escaped = (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", f"{_LIKE_ESCAPE}%")
        .replace("_", f"{_LIKE_ESCAPE}_")
    )
    return column.ilike(f"%{escaped}%", escape=_LIKE_ESCAPE)


def any_contains_ci(columns: list[Any], term: str) -> ColumnElement[bool]:
    return or_(*(contains_ci(column, term) for column in columns))


def normalize_term(value: str | None) -> str | None:
    """Blank filter values are treated as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def order_by_clause(column: Any, order: SortOrder) -> Any:
    return column.desc() if order == SortOrder.DESC else column.asc()
