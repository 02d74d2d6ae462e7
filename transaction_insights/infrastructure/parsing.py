"""Pydantic schema for raw transaction records and conversion to domain objects"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from transaction_insights.domain.models import Transaction
from transaction_insights.domain.exceptions import InvalidTransactionDataError


class TransactionSchema(BaseModel):
    """Transaction record as exported by the payments system (camelCase keys)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    mtn: int
    amount: float = Field(..., ge=0, description="Transferred value")
    sender_full_name: str = Field(..., min_length=1)
    sender_age: Optional[int] = None
    beneficiary_full_name: str = Field(..., min_length=1)
    beneficiary_age: Optional[int] = None
    issue_id: Optional[int] = None
    issue_solved: bool = False
    issue_message: Optional[str] = None

    def to_domain(self) -> Transaction:
        return Transaction(**self.model_dump())

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionSchema":
        return cls(
            mtn=transaction.mtn,
            amount=transaction.amount,
            sender_full_name=transaction.sender_full_name,
            sender_age=transaction.sender_age,
            beneficiary_full_name=transaction.beneficiary_full_name,
            beneficiary_age=transaction.beneficiary_age,
            issue_id=transaction.issue_id,
            issue_solved=transaction.issue_solved,
            issue_message=transaction.issue_message,
        )


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
        for err in error.errors()
    )


def parse_transactions(records: Any) -> List[Transaction]:
    """
    Validate raw records and convert them to domain transactions.

    Raises:
        InvalidTransactionDataError: payload is not a list, or a record is malformed
    """
    if not isinstance(records, list):
        raise InvalidTransactionDataError(
            f"Expected a list of transactions, got {type(records).__name__}"
        )

    transactions = []
    for index, record in enumerate(records):
        try:
            transactions.append(TransactionSchema.model_validate(record).to_domain())
        except ValidationError as e:
            raise InvalidTransactionDataError(f"Invalid transaction at index {index}: {_describe(e)}") from e

    return transactions
