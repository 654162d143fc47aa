"""SQLAlchemy models for the transaction store."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class DecimalString(TypeDecorator):
    """Decimal stored as its exact string form.

    SQLite keeps NUMERIC values as floating point, which rounds large amounts
    and amounts with many decimal places.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    # Append order
    seq = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(String, unique=True, nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=False, default="")
    category = Column(String, nullable=False)
    amount = Column(DecimalString, nullable=False)
    reference = Column(String, nullable=False, default="")
    contra_account = Column(String, nullable=True)


def create_session_factory(database_url: str = "sqlite://") -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory over an in-memory SQLite database."""
    # One shared connection, otherwise every connection gets its own empty database
    engine = create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
