"""
Database models for the library catalog (authoritative ORM definitions).

Two tables mirror the two collections of the catalog. ``Books.author_id``
is deliberately not a foreign key: a book may reference an author that was
never created, and the GraphQL layer resolves such a reference to null.
"""

import uuid

from sqlalchemy import Integer, MetaData, PrimaryKeyConstraint, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def _uuid_str() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Authors(Base):
    __tablename__ = "Authors"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="authors_pkey"),
    )

    id: Mapped[str] = mapped_column(String(36), default=_uuid_str)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)


class Books(Base):
    __tablename__ = "Books"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="books_pkey"),
    )

    id: Mapped[str] = mapped_column(String(36), default=_uuid_str)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    genre: Mapped[str | None] = mapped_column(String(100))
    author_id: Mapped[str] = mapped_column(String(36), nullable=False)
