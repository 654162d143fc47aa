"""SQLAlchemy transaction store implementation."""

from typing import Optional, Sequence

import structlog
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fleetledger.database.base import TransactionStore
from fleetledger.database.models import Transaction, create_session_factory
from fleetledger.database.mappers import transaction_to_domain, transaction_to_orm
from fleetledger.domain.entities import Transaction as DomainTransaction
from fleetledger.domain.errors import ConflictError, duplicate_transaction_id

logger = structlog.get_logger(__name__)


class SQLAlchemyTransactionStore(TransactionStore):
    """SQLAlchemy-based implementation of TransactionStore."""

    def __init__(self, database_url: str = "sqlite://"):
        """Initialize SQLAlchemy store.

        Args:
            database_url: SQLAlchemy database URL; the default is a private
                in-memory SQLite database that lives as long as this object
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the store."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the store."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def append_transaction(self, transaction: DomainTransaction) -> None:
        """Append one transaction."""
        self.append_transactions([transaction])

    def append_transactions(self, transactions: Sequence[DomainTransaction]) -> int:
        """Append a batch of transactions in a single commit."""
        ids = [txn.id for txn in transactions]
        seen: set[str] = set()
        for transaction_id in ids:
            if transaction_id in seen:
                raise ConflictError(duplicate_transaction_id(transaction_id))
            seen.add(transaction_id)

        session = self._get_session()
        session.add_all([transaction_to_orm(txn) for txn in transactions])
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            existing = next(
                (transaction_id for transaction_id in ids if self.transaction_exists(transaction_id)),
                ids[0] if ids else "",
            )
            raise ConflictError(duplicate_transaction_id(existing))

        logger.debug("transactions_appended", count=len(ids))
        return len(ids)

    def get_transaction(self, transaction_id: str) -> Optional[DomainTransaction]:
        """Get transaction by id."""
        session = self._get_session()
        txn = (
            session.query(Transaction)
            .filter(Transaction.transaction_id == transaction_id)
            .first()
        )
        if txn is None:
            return None
        return transaction_to_domain(txn)

    def transaction_exists(self, transaction_id: str) -> bool:
        """Check whether a transaction id is already stored."""
        session = self._get_session()
        return (
            session.query(Transaction)
            .filter(Transaction.transaction_id == transaction_id)
            .first()
            is not None
        )

    def list_transactions(self, newest_first: bool = False) -> list[DomainTransaction]:
        """List transactions in append order."""
        session = self._get_session()
        order = Transaction.seq.desc() if newest_first else Transaction.seq
        transactions = session.query(Transaction).order_by(order).all()
        return [transaction_to_domain(txn) for txn in transactions]

    def search_transactions(self, term: str) -> list[DomainTransaction]:
        """Find transactions by description or reference, newest date first."""
        session = self._get_session()
        needle = term.lower()
        transactions = (
            session.query(Transaction)
            .filter(
                or_(
                    func.lower(Transaction.description).contains(needle, autoescape=True),
                    func.lower(Transaction.reference).contains(needle, autoescape=True),
                )
            )
            .order_by(Transaction.date.desc(), Transaction.seq.desc())
            .all()
        )
        return [transaction_to_domain(txn) for txn in transactions]

    def count_transactions(self) -> int:
        """Return the number of stored transactions."""
        session = self._get_session()
        return session.query(Transaction).count()
