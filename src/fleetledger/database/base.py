"""Abstract transaction store interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from fleetledger.domain.entities import Transaction


class TransactionStore(ABC):
    """Append-only store of transactions owned by the caller for one session."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize the store schema (create tables, etc.)."""
        pass

    @abstractmethod
    def append_transaction(self, transaction: Transaction) -> None:
        """Append one transaction.

        Raises:
            ConflictError: If a transaction with the same id exists
        """
        pass

    @abstractmethod
    def append_transactions(self, transactions: Sequence[Transaction]) -> int:
        """Append a batch of transactions atomically.

        Either every transaction is stored or none is.

        Returns:
            Number of transactions appended

        Raises:
            ConflictError: If any id already exists or repeats within the batch
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by id."""
        pass

    @abstractmethod
    def transaction_exists(self, transaction_id: str) -> bool:
        """Check whether a transaction id is already stored."""
        pass

    @abstractmethod
    def list_transactions(self, newest_first: bool = False) -> list[Transaction]:
        """List transactions in append order, or reversed when newest_first."""
        pass

    @abstractmethod
    def search_transactions(self, term: str) -> list[Transaction]:
        """Find transactions whose description or reference contains term.

        Matching is case-insensitive; results are ordered by date, newest first.
        """
        pass

    @abstractmethod
    def count_transactions(self) -> int:
        """Return the number of stored transactions."""
        pass
