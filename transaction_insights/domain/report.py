"""Report builder - runs every aggregation over one dataset"""

from typing import Sequence

from transaction_insights.domain.models import Transaction, TransactionReport
from transaction_insights.domain.exceptions import EmptyInputError
from transaction_insights.domain.aggregations import (
    count_open_compliance_issues,
    count_unique_clients,
    get_all_solved_issue_messages,
    get_max_transaction_amount,
    get_top_sender,
    get_top_transactions_by_amount,
    get_total_transaction_amount,
    get_total_transaction_amount_sent_by,
    get_transactions_by_beneficiary_name,
    get_unsolved_issue_ids,
)


def build_report(
    transactions: Sequence[Transaction],
    sender_full_name: str,
    client_full_name: str,
    top_limit: int = 3,
) -> TransactionReport:
    """
    Main entry point: compute every statistic for a dataset.

    Args:
        transactions: Dataset to analyze (not modified)
        sender_full_name: Client whose total sent amount is reported
        client_full_name: Client checked for open compliance issues
        top_limit: Number of transactions in the amount ranking

    Raises:
        EmptyInputError: no transactions
        InsufficientDataError: fewer than top_limit transactions

    Any failure aborts the whole report, nothing partial is returned.
    """
    if not transactions:
        raise EmptyInputError("Cannot build a report without transactions")

    open_issue_count = count_open_compliance_issues(client_full_name, transactions)

    return TransactionReport(
        transaction_count=len(transactions),
        total_amount=get_total_transaction_amount(transactions),
        sender_full_name=sender_full_name,
        total_amount_sent_by_sender=get_total_transaction_amount_sent_by(sender_full_name, transactions),
        max_amount=get_max_transaction_amount(transactions),
        unique_client_count=count_unique_clients(transactions),
        client_full_name=client_full_name,
        client_open_issue_count=open_issue_count,
        client_has_no_open_issues=open_issue_count == 0,
        transactions_by_beneficiary=get_transactions_by_beneficiary_name(transactions),
        unsolved_issue_ids=get_unsolved_issue_ids(transactions),
        solved_issue_messages=get_all_solved_issue_messages(transactions),
        top_transactions=get_top_transactions_by_amount(transactions, limit=top_limit),
        top_sender=get_top_sender(transactions),
        top_limit=top_limit,
    )
