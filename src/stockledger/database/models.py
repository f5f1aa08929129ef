"""SQLAlchemy models for stockledger database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Item(Base):
    """Catalog item model.

    ``name`` is the business key but carries no unique constraint.
    ``name_key`` holds the normalized name used for matching.
    """

    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    name_key = Column(String, nullable=False, index=True)
    unit = Column(String, nullable=False)
    alt_unit = Column(String, default="-", nullable=False)
    factor = Column(String, default="Manual", nullable=False)
    alert_qty = Column(Numeric(14, 4), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Transaction(Base):
    """Stock movement model.

    There is no foreign key to ``items``: ``item_name`` is free text and
    ``item_key`` is its normalized form.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    date = Column(String, nullable=False)
    type = Column(String, nullable=True)
    item_name = Column(String, nullable=False)
    item_key = Column(String, nullable=False, index=True)
    quantity = Column(Numeric(14, 4), nullable=False)
    alt_qty = Column(String, default="0", nullable=True)
    unit = Column(String, default="", nullable=True)
    alt_unit = Column(String, default="", nullable=True)
    rate = Column(Numeric(12, 2), default=0, nullable=True)
    remarks = Column(String, default="", nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
