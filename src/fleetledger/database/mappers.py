"""Mapper functions to convert between domain models and SQLAlchemy models."""

from fleetledger.domain import entities as domain
from fleetledger.database.models import Transaction as ORMTransaction


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.transaction_id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        category=domain.TransactionCategory(orm_transaction.category),
        amount=orm_transaction.amount,
        reference=orm_transaction.reference,
        contra_account=orm_transaction.contra_account,
    )


def transaction_to_orm(transaction: domain.Transaction) -> ORMTransaction:
    """Convert domain Transaction entity to a new SQLAlchemy Transaction model."""
    return ORMTransaction(
        transaction_id=transaction.id,
        date=transaction.date,
        description=transaction.description,
        category=transaction.category.value,
        amount=transaction.amount,
        reference=transaction.reference,
        contra_account=transaction.contra_account,
    )
