"""
SQLite repository for person records.

Every method opens its own connection via
:func:`~person_crud_api.app.core.db.get_connection` and closes it
before returning.  All queries use parameterized statements.  Lookups
that find nothing return ``None`` rather than raising; database errors
(``sqlite3.Error``) are left to propagate to the caller.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from person_crud_api.app.core.db import get_connection
from person_crud_api.app.schemas.person import Person


logger = logging.getLogger(__name__)


class PersonRepository:
    """Store for :class:`Person` records keyed by ``id``."""

    def find_all(self) -> List[Person]:
        """Return every stored person ordered by id."""
        conn = get_connection()
        try:
            rows = conn.execute("SELECT * FROM persons ORDER BY id ASC").fetchall()
            return [self._row_to_person(row) for row in rows]
        finally:
            conn.close()

    def find_by_id(self, person_id: int) -> Optional[Person]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM persons WHERE id = ?", (person_id,)
            ).fetchone()
            if not row:
                return None
            return self._row_to_person(row)
        finally:
            conn.close()

    def save(self, person: Person) -> Person:
        """Insert or overwrite ``person`` and return the stored record.

        Without an ``id`` a new row is inserted and the database assigns
        the identifier.  With an ``id`` all editable columns of that row
        are replaced; if no such row exists it is inserted under the
        given identifier.
        """
        values = (
            person.first_name,
            person.last_name,
            person.email,
            person.phone_number,
            person.address,
            person.age,
        )
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if person.id is None:
                cursor.execute(
                    """
                    INSERT INTO persons (first_name, last_name, email, phone_number, address, age)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    values,
                )
                person_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    INSERT INTO persons (id, first_name, last_name, email, phone_number, address, age)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        first_name = excluded.first_name,
                        last_name = excluded.last_name,
                        email = excluded.email,
                        phone_number = excluded.phone_number,
                        address = excluded.address,
                        age = excluded.age
                    """,
                    (person.id, *values),
                )
                person_id = person.id
            conn.commit()
            row = cursor.execute(
                "SELECT * FROM persons WHERE id = ?", (person_id,)
            ).fetchone()
            logger.debug("Saved person %s", person_id)
            return self._row_to_person(row)
        finally:
            conn.close()

    def delete(self, person: Person) -> None:
        """Remove the row matching ``person.id``.

        Does nothing for a person that was never persisted or is
        already gone.
        """
        if person.id is None:
            return
        conn = get_connection()
        try:
            conn.execute("DELETE FROM persons WHERE id = ?", (person.id,))
            conn.commit()
        finally:
            conn.close()

    def exists_by_id(self, person_id: int) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM persons WHERE id = ?", (person_id,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def count(self) -> int:
        conn = get_connection()
        try:
            row = conn.execute("SELECT COUNT(*) AS total FROM persons").fetchone()
            return int(row["total"])
        finally:
            conn.close()

    @staticmethod
    def _row_to_person(row: sqlite3.Row) -> Person:
        """Convert a database row to a :class:`Person`."""
        return Person(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
            phone_number=row["phone_number"],
            address=row["address"],
            age=row["age"],
        )
