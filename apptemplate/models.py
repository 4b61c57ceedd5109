"""Database tables of the application."""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class TestJoinTable(Base):
    __tablename__ = "test_join_tables"
    __test__ = False

    id: Mapped[int] = mapped_column(primary_key=True)
    id_master: Mapped[int]
    is_detail: Mapped[str] = mapped_column(String(255))


class TestTable(Base):
    __tablename__ = "test_tables"
    __test__ = False

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    detail: Mapped[Optional[TestJoinTable]] = relationship(
        primaryjoin="TestTable.id == foreign(TestJoinTable.id_master)",
        uselist=False,
        viewonly=True,
    )