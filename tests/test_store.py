"""
Tests for the store client.
"""

import pytest


class TestStore:
    """Tests for positional placeholders and result mapping"""

    def test_positional_params_bound_in_order(self, store):
        rows = store.execute("SELECT $2 AS b_val, $1 AS a_val", ["a", "b"])
        assert rows == [{"b_val": "b", "a_val": "a"}]

    def test_repeated_placeholder(self, store):
        rows = store.execute("SELECT $1 AS x, $1 AS y", [3])
        assert rows == [{"x": 3, "y": 3}]

    def test_placeholder_count_mismatch(self, store):
        with pytest.raises(ValueError):
            store.execute("SELECT $1, $2", [1])
        with pytest.raises(ValueError):
            store.execute("SELECT 1", [1])
        with pytest.raises(ValueError):
            store.execute("SELECT $2", [1, 2])

    def test_statement_without_rows(self, store):
        result = store.execute(
            "INSERT INTO companies (handle, name, description) VALUES ($1, $2, $3)",
            ["c9", "C9", "Nine"],
        )
        assert result == []
        assert store.execute("SELECT handle FROM companies") == [{"handle": "c9"}]

    def test_ilike_case_insensitive_on_sqlite(self, store):
        store.execute(
            "INSERT INTO companies (handle, name, description) VALUES ($1, $2, $3)",
            ["big", "BigCorp", "Big"],
        )
        rows = store.execute("SELECT handle FROM companies WHERE name ILIKE $1", ["%corp%"])
        assert rows == [{"handle": "big"}]

    def test_each_statement_commits(self, store):
        store.execute(
            "INSERT INTO companies (handle, name, description) VALUES ($1, $2, $3)",
            ["c1", "C1", "One"],
        )
        with store.engine.connect() as conn:
            count = conn.exec_driver_sql("SELECT COUNT(*) FROM companies").scalar()
        assert count == 1
