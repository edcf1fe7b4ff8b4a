"""
SQL helpers.

`sql_for_partial_update` turns a sparse update payload into the SET part
of an UPDATE statement, mapping API field names to column names.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from ourimpact.core.exceptions import BadRequestError


@dataclass(frozen=True)
class PartialUpdate:
    """
    Compiled SET clause.

    `set_cols[i]` is the assignment for `columns[i]`, bound to `values[i]`
    through the placeholder `:p{i + 1}`.
    """

    columns: List[str] = field(default_factory=list)
    set_cols: List[str] = field(default_factory=list)
    values: List[Any] = field(default_factory=list)

    @property
    def set_clause(self) -> str:
        return ", ".join(self.set_cols)

    def params(self) -> Dict[str, Any]:
        """Bound values keyed by placeholder name."""
        return {f"p{idx}": value for idx, value in enumerate(self.values, start=1)}

    def as_values(self) -> Dict[str, Any]:
        """Column -> value mapping, for `update(table).values(...)`."""
        return dict(zip(self.columns, self.values))


def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
) -> PartialUpdate:
    """
    Compile a partial update.

    Args:
        data: Fields to change, e.g. {"firstName": "Aliya", "userCity": "Paris"}
        js_to_sql: Allowed API field names mapped to their column names,
            e.g. {"firstName": "first_name", "userCity": "city_name"}

    Returns:
        PartialUpdate with one assignment per field, in `data` order:
        columns=["first_name", "city_name"],
        set_cols=['"first_name"=:p1', '"city_name"=:p2'],
        values=["Aliya", "Paris"]

    Raises:
        BadRequestError: If `data` is empty or names a field that is not
            in `js_to_sql`.
    """
    keys = list(data.keys())
    if not keys:
        raise BadRequestError("No data")

    unknown = [key for key in keys if key not in js_to_sql]
    if unknown:
        raise BadRequestError(f"Cannot update field(s): {', '.join(unknown)}")

    columns = [js_to_sql[key] for key in keys]
    set_cols = [f'"{column}"=:p{idx}' for idx, column in enumerate(columns, start=1)]
    return PartialUpdate(
        columns=columns,
        set_cols=set_cols,
        values=[data[key] for key in keys],
    )
