"""
Fauna API: Generic CRUD Service
================================

What:  One parametrized service behind every resource router (especies,
       usuarios, avistamientos, imagenes).
How:   Built from an ORM model and an optional column projection. Each
       operation compiles exactly one Core statement against the model's
       table and runs it on the request's session:

           list    → SELECT <projection> FROM t [WHERE scope]
           create  → INSERT INTO t (...) VALUES (...) RETURNING <projection>
           update  → UPDATE t SET ... WHERE id = :id RETURNING <projection>
           delete  → DELETE FROM t WHERE id = :id [AND scope]

       Any failure while binding or executing becomes a StoreError carrying
       the caller's per-route message; the original exception is logged and
       chained, never returned to the client.
Who:   Called by the handlers generated in routes/crud.py and routes/imagenes.py.

Statements are built from `Model.__table__`, so keys are real column names
(including `contraseña`) and result rows map column name → value.

Binding:
    Bodies and path ids arrive untyped. Each value is cast to its column's
    type the way PostgreSQL casts a text parameter:

        Integer  "7" → 7          "abc", 1.5, true → rejected
        Date     "2024-03-10"     "not-a-date"     → rejected
        String   123 → "123"      {...}, [...]      → rejected
        JSON     anything

    A rejected value fails the statement exactly like a database error.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sqlalchemy import Column, Date, Integer, String, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from fauna_api.exceptions import StoreError

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def coerce_value(column: Column, value: Any) -> Any:
    """
    Cast an untyped request value to the Python type of `column`.

    Raises:
        ValueError / TypeError when the database would reject the value.
    """
    if value is None:
        return None
    column_type = column.type

    if isinstance(column_type, Integer):
        if isinstance(value, bool):
            raise TypeError(f"{column.name}: boolean is not an integer")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            return int(value.strip())
        raise TypeError(f"{column.name}: {type(value).__name__} is not an integer")

    if isinstance(column_type, Date):
        if isinstance(value, str):
            text = value.strip()
            try:
                return date.fromisoformat(text)
            except ValueError:
                return datetime.fromisoformat(text).date()
        raise TypeError(f"{column.name}: {type(value).__name__} is not a date")

    if isinstance(column_type, String):
        if isinstance(value, (dict, list)):
            raise TypeError(f"{column.name}: {type(value).__name__} is not text")
        if isinstance(value, bool):
            return "true" if value else "false"
        return value if isinstance(value, str) else str(value)

    return value


class CrudService:
    """
    Stateless CRUD operations over a single table.

    Args:
        model:       Declarative ORM class (its `__table__` is used).
        projection:  Column names returned by list/create/update. Defaults to
                     every column of the table.
    """

    def __init__(self, model: Any, projection: Optional[Sequence[str]] = None):
        self.table = model.__table__
        names = projection or [column.name for column in self.table.columns]
        self.columns = [self.table.c[name] for name in names]
        self.writable = {column.name for column in self.table.columns if not column.primary_key}

    def _bind(self, name: str, value: Any, error_message: str) -> Any:
        try:
            return coerce_value(self.table.c[name], value)
        except (TypeError, ValueError) as exc:
            logger.error(
                "%s (table=%s): value for %s rejected: %s",
                error_message,
                self.table.name,
                name,
                str(exc),
            )
            raise StoreError(
                message=error_message,
                context={"table": self.table.name, "column": name, "error_type": type(exc).__name__},
            ) from exc

    def _conditions(self, scope: Mapping[str, Any], error_message: str) -> list:
        return [
            self.table.c[name] == self._bind(name, value, error_message)
            for name, value in scope.items()
        ]

    def _values(self, values: Mapping[str, Any], error_message: str) -> Row:
        # Full overwrite: every writable key present in the payload is written,
        # including explicit None.
        return {
            name: self._bind(name, value, error_message)
            for name, value in values.items()
            if name in self.writable
        }

    async def _execute(
        self,
        db: AsyncSession,
        statement: Executable,
        error_message: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        try:
            return await db.execute(statement)
        except Exception as exc:
            logger.error(
                "%s (table=%s): %s",
                error_message,
                self.table.name,
                str(exc),
                exc_info=True,
            )
            raise StoreError(
                message=error_message,
                context={"table": self.table.name, "error_type": type(exc).__name__, **(context or {})},
            ) from exc

    async def list(
        self,
        db: AsyncSession,
        error_message: str,
        scope: Optional[Mapping[str, Any]] = None,
    ) -> List[Row]:
        """
        Return every row of the table (optionally filtered by `scope`).

        No ORDER BY: rows come back in whatever order the database returns.
        """
        statement = select(*self.columns).where(*self._conditions(scope or {}, error_message))
        result = await self._execute(db, statement, error_message)
        return [dict(row) for row in result.mappings().all()]

    async def create(self, db: AsyncSession, values: Mapping[str, Any], error_message: str) -> Row:
        """Insert one row and return it as stored, including generated columns."""
        statement = (
            insert(self.table)
            .values(**self._values(values, error_message))
            .returning(*self.columns)
        )
        result = await self._execute(db, statement, error_message)
        row = result.mappings().first()
        logger.info("Created %s row id=%s", self.table.name, row.get("id") if row else None)
        return dict(row) if row is not None else {}

    async def update(
        self,
        db: AsyncSession,
        row_id: Any,
        values: Mapping[str, Any],
        error_message: str,
    ) -> Optional[Row]:
        """
        Overwrite all writable fields of the row with `row_id`.

        Returns the updated row, or None when no row has that id. A missing
        id is not treated as an error.
        """
        key = self._bind("id", row_id, error_message)
        statement = (
            update(self.table)
            .where(self.table.c.id == key)
            .values(**self._values(values, error_message))
            .returning(*self.columns)
        )
        result = await self._execute(db, statement, error_message, {"id": key})
        row = result.mappings().first()
        if row is None:
            logger.info("Update on %s matched no row for id=%s", self.table.name, key)
            return None
        return dict(row)

    async def delete(
        self,
        db: AsyncSession,
        row_id: Any,
        error_message: str,
        scope: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """
        Delete the row with `row_id` (and matching `scope`, if given).

        Idempotent: deleting an absent id is not an error. Returns the number
        of rows removed, for logging only.
        """
        key = self._bind("id", row_id, error_message)
        statement = delete(self.table).where(
            self.table.c.id == key, *self._conditions(scope or {}, error_message)
        )
        result = await self._execute(db, statement, error_message, {"id": key})
        removed = result.rowcount or 0
        logger.info("Deleted %s row(s) from %s for id=%s", removed, self.table.name, key)
        return removed
