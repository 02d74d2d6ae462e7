"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from transaction_insights.domain.models import TopSender, TransactionReport
from transaction_insights.infrastructure.parsing import TransactionSchema


class TransactionsRequest(BaseModel):
    """Request body carrying one dataset"""

    transactions: List[TransactionSchema] = Field(..., description="Dataset to analyze")

    def to_domain(self):
        return [t.to_domain() for t in self.transactions]


class ReportRequest(TransactionsRequest):
    """Request body for POST /v1/report"""

    sender_full_name: Optional[str] = Field(None, min_length=1, description="Client whose sent total is reported")
    client_full_name: Optional[str] = Field(None, min_length=1, description="Client checked for open issues")
    top_limit: Optional[int] = Field(None, gt=0, description="Size of the amount ranking")


class TopSenderResponse(BaseModel):
    """Response for POST /v1/senders/top"""

    name: str
    total_amount: float

    @classmethod
    def from_domain(cls, top_sender: TopSender) -> "TopSenderResponse":
        return cls(name=top_sender.name, total_amount=top_sender.total_amount)


class TopTransactionsResponse(BaseModel):
    """Response for POST /v1/transactions/top"""

    limit: int
    transactions: List[TransactionSchema]


class BeneficiaryGroupsResponse(BaseModel):
    """Response for POST /v1/transactions/by-beneficiary"""

    beneficiaries: Dict[str, List[TransactionSchema]]


class ReportResponse(BaseModel):
    """Response for POST /v1/report"""

    transaction_count: int
    total_amount: float
    sender_full_name: str
    total_amount_sent_by_sender: float
    max_amount: float
    unique_client_count: int
    client_full_name: str
    client_open_issue_count: int
    client_has_no_open_issues: bool
    transactions_by_beneficiary: Dict[str, List[TransactionSchema]]
    unsolved_issue_ids: List[int]
    solved_issue_messages: List[Optional[str]]
    top_transactions: List[TransactionSchema]
    top_sender: TopSenderResponse

    @classmethod
    def from_report(cls, report: TransactionReport) -> "ReportResponse":
        return cls(
            transaction_count=report.transaction_count,
            total_amount=report.total_amount,
            sender_full_name=report.sender_full_name,
            total_amount_sent_by_sender=report.total_amount_sent_by_sender,
            max_amount=report.max_amount,
            unique_client_count=report.unique_client_count,
            client_full_name=report.client_full_name,
            client_open_issue_count=report.client_open_issue_count,
            client_has_no_open_issues=report.client_has_no_open_issues,
            transactions_by_beneficiary={
                name: [TransactionSchema.from_domain(t) for t in group]
                for name, group in report.transactions_by_beneficiary.items()
            },
            unsolved_issue_ids=sorted(report.unsolved_issue_ids),
            solved_issue_messages=report.solved_issue_messages,
            top_transactions=[TransactionSchema.from_domain(t) for t in report.top_transactions],
            top_sender=TopSenderResponse.from_domain(report.top_sender),
        )
