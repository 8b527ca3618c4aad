"""
Store client used by the repositories.

Statements are written with PostgreSQL-style positional placeholders
($1, $2, ...). The client binds them by position through SQLAlchemy so the
same SQL runs on PostgreSQL in production and SQLite in tests.
"""

import logging
import re
from typing import Any, Dict, List, Sequence

from sqlalchemy import text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\$(\d+)")
ILIKE_RE = re.compile(r"\bILIKE\b", re.IGNORECASE)


class Store:
    """
    Thin wrapper around a SQLAlchemy engine exposing `execute(sql, params)`.

    Each call runs in its own transaction and returns the result rows as
    dicts (an empty list for statements that return nothing).
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        statement, bind = self._prepare(sql, params)
        logger.debug(f"Executing: {' '.join(sql.split())} | {len(bind)} param(s)")

        with self.engine.begin() as conn:
            result = conn.execute(text(statement), bind)
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings()]

    def _prepare(self, sql: str, params: Sequence[Any]):
        """Rewrite $n markers to named binds and check they match `params`."""
        indices = {int(n) for n in PLACEHOLDER_RE.findall(sql)}
        if indices != set(range(1, len(params) + 1)):
            raise ValueError(
                f"Placeholders {sorted(indices)} do not match {len(params)} parameter(s)"
            )

        statement = PLACEHOLDER_RE.sub(lambda m: f":p{m.group(1)}", sql)
        # SQLite has no ILIKE; its LIKE is already case-insensitive for ASCII
        if self.engine.dialect.name == "sqlite":
            statement = ILIKE_RE.sub("LIKE", statement)

        bind = {f"p{i}": value for i, value in enumerate(params, start=1)}
        return statement, bind
