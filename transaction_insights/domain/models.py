"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass(frozen=True)
class Transaction:
    """Money transfer between two clients, optionally flagged with a compliance issue"""

    mtn: int
    amount: float
    sender_full_name: str
    beneficiary_full_name: str
    sender_age: Optional[int] = None
    beneficiary_age: Optional[int] = None
    issue_id: Optional[int] = None
    issue_solved: bool = False
    issue_message: Optional[str] = None

    @property
    def has_issue(self) -> bool:
        return self.issue_id is not None

    @property
    def has_open_issue(self) -> bool:
        """Issue flagged and not yet solved"""
        return self.issue_id is not None and not self.issue_solved

    @property
    def has_solved_issue(self) -> bool:
        return self.issue_id is not None and self.issue_solved


@dataclass(frozen=True)
class TopSender:
    """Sender with the largest total sent amount"""

    name: str
    total_amount: float


@dataclass
class TransactionReport:
    """Every statistic computed for a single dataset"""

    transaction_count: int
    total_amount: float
    sender_full_name: str
    total_amount_sent_by_sender: float
    max_amount: float
    unique_client_count: int
    client_full_name: str
    client_open_issue_count: int
    client_has_no_open_issues: bool
    transactions_by_beneficiary: Dict[str, List[Transaction]]
    unsolved_issue_ids: Set[int]
    solved_issue_messages: List[Optional[str]]
    top_transactions: List[Transaction]
    top_sender: TopSender
    top_limit: int = field(default=3)
