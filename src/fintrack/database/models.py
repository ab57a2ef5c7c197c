"""SQLAlchemy models for fintrack database."""

from datetime import datetime, UTC
from uuid import uuid4
from sqlalchemy import (
    Column,
    String,
    DateTime,
    Date,
    Numeric,
    Enum,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from fintrack.domain.entities import AMOUNT_PRECISION, AMOUNT_SCALE, TransactionType

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return uuid4().hex


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(String(32), primary_key=True, default=_new_id)
    amount = Column(Numeric(AMOUNT_PRECISION, AMOUNT_SCALE), nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    type = Column(
        Enum(TransactionType, values_callable=lambda e: [m.value for m in e], name="transaction_type"),
        nullable=False,
    )
    category = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    __table_args__ = (Index("ix_transactions_date", "date"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
