"""
Generic SQLite repository shared by the entity services.

``EntityService`` implements the CRUD operations every entity needs
against a single table.  Subclasses declare the table, the writable
columns and the ``Read`` schema rows are converted to, then add their
own query methods.

All queries use parameterised statements.  Column and table names are
class attributes, never request input.  Writes that break a UNIQUE or
FOREIGN KEY constraint raise ``ValueError``.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from pitch_planner_api.app.core.db import get_connection


def to_db_value(value: Any) -> Any:
    """Convert a Python value into something SQLite stores as-is."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class EntityService:
    """Base class for services backed by one table with an integer ``id``."""

    table: ClassVar[str]
    columns: ClassVar[Tuple[str, ...]]
    read_schema: ClassVar[Type[BaseModel]]

    @classmethod
    def _row_to_read(cls, row: sqlite3.Row) -> BaseModel:
        return cls.read_schema(**dict(row))

    @classmethod
    def _values(cls, data: Dict[str, Any]) -> List[Any]:
        return [to_db_value(data.get(column)) for column in cls.columns]

    @classmethod
    def _execute_write(cls, cursor: sqlite3.Cursor, sql: str, params: List[Any]) -> None:
        try:
            cursor.execute(sql, params)
        except sqlite3.IntegrityError as exc:
            raise ValueError(f"{cls.table} record violates a constraint: {exc}") from exc

    @classmethod
    async def create(cls, data: Dict[str, Any], entity_id: Optional[int] = None) -> BaseModel:
        """Insert a new record and return it.

        ``entity_id`` is only given for tables whose key is assigned by
        the caller (profiles reuse the user id); otherwise SQLite picks
        the next id.
        """
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            columns = list(cls.columns)
            values = cls._values(data)
            if entity_id is not None:
                columns.insert(0, "id")
                values.insert(0, entity_id)
            placeholders = ", ".join("?" for _ in columns)
            cls._execute_write(
                cursor,
                f"INSERT INTO {cls.table} ({', '.join(columns)}) VALUES ({placeholders})",
                values,
            )
            new_id = entity_id if entity_id is not None else cursor.lastrowid
            conn.commit()
            logger.info("Created %s %s", cls.table, new_id)
            row = cursor.execute(f"SELECT * FROM {cls.table} WHERE id = ?", (new_id,)).fetchone()
            return cls._row_to_read(row)
        finally:
            conn.close()

    @classmethod
    async def update(cls, entity_id: int, data: Dict[str, Any]) -> Optional[BaseModel]:
        """Overwrite every writable column of an existing record.

        Columns missing from ``data`` are set to NULL.  Returns ``None``
        if no record has ``entity_id``.
        """
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            assignments = ", ".join(f"{column} = ?" for column in cls.columns)
            cls._execute_write(
                cursor,
                f"UPDATE {cls.table} SET {assignments} WHERE id = ?",
                [*cls._values(data), entity_id],
            )
            if cursor.rowcount == 0:
                return None
            conn.commit()
            logger.info("Updated %s %s", cls.table, entity_id)
            row = cursor.execute(f"SELECT * FROM {cls.table} WHERE id = ?", (entity_id,)).fetchone()
            return cls._row_to_read(row)
        finally:
            conn.close()

    @classmethod
    async def partial_update(cls, entity_id: int, changes: Dict[str, Any]) -> Optional[BaseModel]:
        """Merge ``changes`` into an existing record.

        Only known columns whose value is not ``None`` are written, so
        absent and null fields keep their stored value.  Returns ``None``
        if no record has ``entity_id``.
        """
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            row = cursor.execute(f"SELECT * FROM {cls.table} WHERE id = ?", (entity_id,)).fetchone()
            if not row:
                return None
            updates = {
                column: to_db_value(value)
                for column, value in changes.items()
                if column in cls.columns and value is not None
            }
            if updates:
                assignments = ", ".join(f"{column} = ?" for column in updates)
                cls._execute_write(
                    cursor,
                    f"UPDATE {cls.table} SET {assignments} WHERE id = ?",
                    [*updates.values(), entity_id],
                )
                conn.commit()
                logger.info("Partially updated %s %s: %s", cls.table, entity_id, sorted(updates))
                row = cursor.execute(f"SELECT * FROM {cls.table} WHERE id = ?", (entity_id,)).fetchone()
            return cls._row_to_read(row)
        finally:
            conn.close()

    @classmethod
    async def find_by_id(cls, entity_id: int) -> Optional[BaseModel]:
        conn = get_connection()
        try:
            row = conn.execute(f"SELECT * FROM {cls.table} WHERE id = ?", (entity_id,)).fetchone()
            if not row:
                return None
            return cls._row_to_read(row)
        finally:
            conn.close()

    @classmethod
    async def exists_by_id(cls, entity_id: int) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(f"SELECT 1 FROM {cls.table} WHERE id = ?", (entity_id,)).fetchone()
            return row is not None
        finally:
            conn.close()

    @classmethod
    async def find_all(cls) -> List[BaseModel]:
        conn = get_connection()
        try:
            rows = conn.execute(f"SELECT * FROM {cls.table} ORDER BY id ASC").fetchall()
            return [cls._row_to_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def find_by_column_containing_ignore_case(cls, column: str, text: str) -> List[BaseModel]:
        """Return records whose ``column`` contains ``text``, ignoring case."""
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT * FROM {cls.table} WHERE instr(casefold({column}), ?) > 0 ORDER BY id ASC",
                (text.casefold(),),
            ).fetchall()
            return [cls._row_to_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def delete_by_id(cls, entity_id: int) -> bool:
        """Delete a record.  Returns ``True`` if a row was removed."""
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"DELETE FROM {cls.table} WHERE id = ?", (entity_id,))
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Deleted %s %s", cls.table, entity_id)
            return affected > 0
        finally:
            conn.close()
