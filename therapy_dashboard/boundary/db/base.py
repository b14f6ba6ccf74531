"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and the integer primary key mixin
shared by the three dashboard tables.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class IntegerIdMixin:
    """
    Mixin providing a server-assigned integer primary key.

    Ids are generated by the database (SERIAL / autoincrement), are never
    updated, and are never reused.

    Attributes:
        id: Integer primary key, auto-generated on insert
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
