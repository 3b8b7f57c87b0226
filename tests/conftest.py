import uuid
from datetime import date, datetime, time
from decimal import Decimal

import pytest
from sqlalchemy import DateTime, Interval, LargeBinary, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


@pytest.fixture
def Base():
    """A fresh declarative base, so every test owns its own metadata."""
    class Base(DeclarativeBase):
        pass

    return Base


@pytest.fixture
def account(Base):

    class Account(Base):

        __tablename__ = 'accounts'

        id: Mapped[int] = mapped_column(primary_key=True)
        description: Mapped[str]
        number: Mapped[str]
        inserted_at: Mapped[datetime]
        updated_at: Mapped[datetime]

    return Account


@pytest.fixture
def account_receivable(Base):

    class AccountReceivable(Base):

        __tablename__ = 'account_receivables'

        id: Mapped[int] = mapped_column(primary_key=True)
        description: Mapped[str]
        amount: Mapped[float]
        inserted_at: Mapped[datetime]
        updated_at: Mapped[datetime]

    return AccountReceivable


@pytest.fixture
def all_types(Base):

    class AllTypes(Base):
        """all types are in this table"""

        __tablename__ = 'all_types'

        id: Mapped[int] = mapped_column(primary_key=True)
        integer: Mapped[int]
        flt: Mapped[float]
        amount: Mapped[Decimal]
        string: Mapped[str] = mapped_column(String(40))
        clob: Mapped[str] = mapped_column(Text, doc='this contains a long text')
        large_binary: Mapped[bytes] = mapped_column(LargeBinary)
        naive: Mapped[datetime]
        zoned: Mapped[datetime] = mapped_column(DateTime(timezone=True))
        at_time: Mapped[time]
        day: Mapped[date]
        uid: Mapped[uuid.UUID]
        boolean: Mapped[bool]
        interval = mapped_column(Interval)
        renamed: Mapped[str] = mapped_column('renamed_column')

    return AllTypes
