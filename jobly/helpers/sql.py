"""
Helpers for building parameterized SQL fragments.

Every fragment is a piece of SQL text using numbered placeholders
($1, $2, ...) plus the list of values those placeholders refer to.
The Nth placeholder always refers to the Nth value: clauses are appended
together with their values through ClauseBuilder, which derives the
placeholder numbers from the values collected so far.

Example:
    >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
    ...                        {"firstName": "first_name"})
    QueryFragment(clause='"first_name"=$1, "age"=$2', values=['Aliya', 32])
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional

from jobly.core.errors import ValidationError


@dataclass(frozen=True)
class QueryFragment:
    """A partial SQL clause and its positionally aligned values."""
    clause: str
    values: List[Any] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.clause)

    @property
    def next_placeholder(self) -> str:
        """Placeholder for a value appended after this fragment's values."""
        return f"${len(self.values) + 1}"


class ClauseBuilder:
    """
    Collects clauses and their values in emission order.

    Each `{}` in a clause template is replaced by the next placeholder,
    and the matching value is recorded in the same call, so the text and
    the values can never drift apart.
    """

    def __init__(self, separator: str = " AND "):
        self.separator = separator
        self._clauses: List[str] = []
        self._values: List[Any] = []

    def add(self, template: str, *values: Any) -> "ClauseBuilder":
        if template.count("{}") != len(values):
            raise ValueError(
                f"Clause {template!r} expects {template.count('{}')} value(s), got {len(values)}"
            )
        start = len(self._values) + 1
        placeholders = [f"${start + i}" for i in range(len(values))]
        self._clauses.append(template.format(*placeholders))
        self._values.extend(values)
        return self

    def __len__(self) -> int:
        return len(self._clauses)

    def build(self) -> QueryFragment:
        return QueryFragment(self.separator.join(self._clauses), list(self._values))


def column_for(field_name: str, field_map: Mapping[str, str]) -> str:
    """Return the column for `field_name`, or the name itself when unmapped."""
    return field_map.get(field_name, field_name)


def sql_for_partial_update(
    data: Mapping[str, Any],
    field_map: Mapping[str, str],
    updatable: Optional[Iterable[str]] = None,
) -> QueryFragment:
    """
    Build the SET clause of a partial update.

    Args:
        data: Fields to change, in the order they should appear
        field_map: External field name -> column name
        updatable: Fields callers may change; anything else is rejected

    Returns:
        QueryFragment like '"first_name"=$1, "age"=$2' with values in the
        same order. The caller appends the row key and addresses it with
        `fragment.next_placeholder`.

    Raises:
        ValidationError: If data is empty or names a field not in `updatable`
    """
    if not data:
        raise ValidationError("No data")

    if updatable is not None:
        allowed = set(updatable)
        unknown = [name for name in data if name not in allowed]
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(unknown)}")

    builder = ClauseBuilder(separator=", ")
    for name, value in data.items():
        builder.add(f'"{column_for(name, field_map)}"={{}}', value)
    return builder.build()


def where(fragment: QueryFragment) -> str:
    """WHERE clause for a predicate fragment; empty when there are no predicates."""
    return f"WHERE {fragment.clause}" if fragment else ""


def with_order_by(predicates: QueryFragment, order_by: str) -> QueryFragment:
    """Wrap a predicate fragment into `[WHERE ...] ORDER BY <order_by>`."""
    parts = [where(predicates), f"ORDER BY {order_by}"]
    return QueryFragment(" ".join(p for p in parts if p), list(predicates.values))


def job_filter_predicates(criteria) -> QueryFragment:
    """
    Predicates for a job search, always in the order title, minSalary, hasEquity.

    A criterion is absent only when it is None, so `min_salary=0` still
    yields `salary >= $n`. `has_equity` adds a constant predicate and no value.
    """
    builder = ClauseBuilder()
    if criteria.title is not None:
        builder.add("title ILIKE {}", f"%{criteria.title}%")
    if criteria.min_salary is not None:
        builder.add("salary >= {}", criteria.min_salary)
    if criteria.has_equity:
        builder.add("equity > 0")
    return builder.build()


def sql_for_job_filter(criteria) -> QueryFragment:
    """`[WHERE ...] ORDER BY title` fragment for a job search."""
    return with_order_by(job_filter_predicates(criteria), "title")


def company_filter_predicates(criteria) -> QueryFragment:
    """Predicates for a company search: nameLike, minEmployees, maxEmployees."""
    if (
        criteria.min_employees is not None
        and criteria.max_employees is not None
        and criteria.min_employees > criteria.max_employees
    ):
        raise ValidationError("minEmployees cannot be greater than maxEmployees")

    builder = ClauseBuilder()
    if criteria.name_like is not None:
        builder.add("name ILIKE {}", f"%{criteria.name_like}%")
    if criteria.min_employees is not None:
        builder.add("num_employees >= {}", criteria.min_employees)
    if criteria.max_employees is not None:
        builder.add("num_employees <= {}", criteria.max_employees)
    return builder.build()


def sql_for_company_filter(criteria) -> QueryFragment:
    """`[WHERE ...] ORDER BY name` fragment for a company search."""
    return with_order_by(company_filter_predicates(criteria), "name")
