"""Helpers for building parameterized SQL fragments.

Placeholders are named ``:p1``, ``:p2``, ... and always derived from the
length of the values list at the moment a value is appended, so numbering
stays sequential whatever subset of fields or criteria is present.
"""

from typing import Any, Dict, List, Mapping, Tuple

from jobly.errors import BadRequestError


def placeholder(values: List[Any]) -> str:
    """Placeholder referencing the last value appended to ``values``."""
    return f":p{len(values)}"


def bind_params(values: List[Any]) -> Dict[str, Any]:
    """Turn positional values into the mapping ``text()`` statements bind."""
    return {f"p{i}": value for i, value in enumerate(values, start=1)}


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so ``term`` matches literally (``ESCAPE '\\'``)."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def sql_for_partial_update(
    data: Mapping[str, Any], column_map: Mapping[str, str]
) -> Tuple[str, List[Any]]:
    """Build the SET clause of a partial UPDATE.

    Args:
        data: Fields to change, e.g. ``{"title": "Dev", "salary": 100}``.
        column_map: Logical field name to storage column name. Fields missing
            from the map are rejected.

    Returns:
        ``('"title"=:p1, "salary"=:p2', ["Dev", 100])``. Callers append the
        row identifier to the values list and reference it with
        ``placeholder(values)``.

    Raises:
        BadRequestError: ``data`` is empty or names an unknown field.
    """
    if not data:
        raise BadRequestError("No data")

    cols: List[str] = []
    values: List[Any] = []
    for field, value in data.items():
        column = column_map.get(field)
        if column is None:
            raise BadRequestError(f"Cannot update field: {field}")
        values.append(value)
        cols.append(f'"{column}"={placeholder(values)}')

    return ", ".join(cols), values


def sql_for_filter(criteria: Mapping[str, Any], alias: str = "j") -> Tuple[str, List[Any]]:
    """Build the WHERE clause for a job search.

    Supported criteria:
      - ``title``: case-insensitive substring match; ``%`` and ``_`` in the
        term match literally. The term is lowered in Python, but SQLite's
        ``LOWER()`` only folds ASCII on the column side, so non-ASCII
        capitals in stored titles only match on PostgreSQL.
      - ``minSalary``: inclusive lower bound; 0 is a real bound
      - ``hasEquity``: only ``True`` filters (equity > 0)

    Returns ``(" WHERE ...", values)``, or ``("", [])`` when no criterion is
    active.
    """
    expressions: List[str] = []
    values: List[Any] = []

    title = criteria.get("title")
    if title:
        values.append(f"%{escape_like(title.lower())}%")
        expressions.append(f"LOWER({alias}.title) LIKE {placeholder(values)} ESCAPE '\\'")

    min_salary = criteria.get("minSalary")
    if min_salary is not None:
        values.append(min_salary)
        expressions.append(f"{alias}.salary >= {placeholder(values)}")

    if criteria.get("hasEquity") is True:
        expressions.append(f"{alias}.equity > 0")

    if not expressions:
        return "", values
    return " WHERE " + " AND ".join(expressions), values
