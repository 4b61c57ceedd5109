"""Queries on the test tables."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, selectinload

from apptemplate.models import TestTable


@dataclass
class TestTableRepository:
    """Reads TestTable rows from the database."""

    __test__ = False

    db: Engine

    def get_list_test_table(self) -> list[TestTable]:
        """Return every row, without details."""
        with Session(self.db) as session:
            return list(session.scalars(select(TestTable)).all())

    def get_detail_test_table(self, record_id: int) -> TestTable | None:
        """Return the row with the given id and its detail, or None when absent."""
        stmt = (
            select(TestTable)
            .options(selectinload(TestTable.detail))
            .where(TestTable.id == record_id)
            .order_by(TestTable.id)
            .limit(1)
        )
        with Session(self.db) as session:
            return session.scalars(stmt).first()