"""Transaction store layer for fleetledger."""

from fleetledger.database.base import TransactionStore
from fleetledger.database.factories import create_memory_store

__all__ = ["TransactionStore", "create_memory_store"]
