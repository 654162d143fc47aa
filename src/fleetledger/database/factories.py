"""Store factory functions for creating transaction store instances."""

from fleetledger.database.sqlalchemy_db import SQLAlchemyTransactionStore


def create_memory_store() -> SQLAlchemyTransactionStore:
    """Create a transaction store backed by a private in-memory SQLite database.

    The store lasts as long as the returned object; nothing is written to disk.
    """
    return SQLAlchemyTransactionStore("sqlite://")
