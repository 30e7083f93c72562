"""SQLAlchemy models for shopledger database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Numeric,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Company(Base):
    """Company settings model (a single row)."""

    __tablename__ = "company"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    currency = Column(String, nullable=False)
    fiscal_year_start_month = Column(Integer, nullable=False)
    updated_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Party(Base):
    """Client or vendor model.

    ``position`` keeps the collection order of the snapshot.
    """

    __tablename__ = "parties"

    pk = Column(Integer, primary_key=True)
    kind = Column(String, nullable=False)
    party_id = Column(String, nullable=False)
    position = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    opening_balance = Column(Numeric(18, 4), nullable=False, default=0)

    __table_args__ = (UniqueConstraint("kind", "party_id", name="uq_party_kind_id"),)


class LedgerEntry(Base):
    """Ledger entry model.

    Party references are plain columns with no foreign key: deleting a party
    must leave its entries in place.
    """

    __tablename__ = "ledger_entries"

    pk = Column(Integer, primary_key=True)
    entry_id = Column(String, nullable=False, unique=True)
    position = Column(Integer, nullable=False)
    date = Column(String, nullable=False)
    entry_type = Column(String, nullable=False)
    party_type = Column(String, nullable=True)
    party_id = Column(String, nullable=True)
    ref = Column(String, nullable=False, default="")
    desc = Column(String, nullable=False, default="")
    category = Column(String, nullable=False, default="")
    amount = Column(Numeric(18, 4), nullable=False, default=0)
    paid = Column(Numeric(18, 4), nullable=False, default=0)
    method = Column(String, nullable=False, default="")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
