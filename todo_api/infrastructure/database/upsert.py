"""Dialect-specific INSERT ... ON CONFLICT DO UPDATE"""
from typing import Any, Dict, Iterable

from sqlalchemy import Table
from sqlalchemy.dialects import postgresql, sqlite

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def build_upsert(
    table: Table,
    values: Dict[str, Any],
    conflict_columns: Iterable[str],
    dialect_name: str,
):
    """Build an upsert that updates every non-conflict column on conflict"""
    try:
        insert = _INSERT_BY_DIALECT[dialect_name]
    except KeyError:
        raise ValueError(f"Upsert is not supported for dialect: {dialect_name}")

    conflict_columns = list(conflict_columns)
    stmt = insert(table).values(**values)
    update_columns = {
        name: stmt.excluded[name] for name in values if name not in conflict_columns
    }
    return stmt.on_conflict_do_update(index_elements=conflict_columns, set_=update_columns)
