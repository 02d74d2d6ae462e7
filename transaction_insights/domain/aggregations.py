"""Aggregation engine - statistics, groupings and rankings over a transaction list"""

import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

from transaction_insights.domain.models import Transaction, TopSender
from transaction_insights.domain.exceptions import EmptyInputError, InsufficientDataError

logger = logging.getLogger(__name__)


def _require_transactions(transactions: Sequence[Transaction], operation: str) -> None:
    if not transactions:
        raise EmptyInputError(f"{operation} requires at least one transaction")


def _same_client(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


def get_total_transaction_amount(transactions: Sequence[Transaction]) -> float:
    """Sum of the amounts of all transactions"""
    _require_transactions(transactions, "Total transaction amount")

    total = sum(t.amount for t in transactions)
    logger.info("Total transaction amount is %s", total)
    return total


def get_total_transaction_amount_sent_by(sender_full_name: str, transactions: Sequence[Transaction]) -> float:
    """
    Sum of the amounts of all transactions sent by a client.

    The sender name is matched case-insensitively. An unknown sender totals 0.0.
    """
    _require_transactions(transactions, "Total amount sent by client")

    total = sum(
        (t.amount for t in transactions if _same_client(t.sender_full_name, sender_full_name)),
        0.0,
    )
    logger.info("Total transaction amount sent by %s is %s", sender_full_name, total)
    return total


def get_max_transaction_amount(transactions: Sequence[Transaction]) -> float:
    """Highest transaction amount"""
    _require_transactions(transactions, "Maximum transaction amount")

    highest = max(t.amount for t in transactions)
    logger.info("Maximum transaction amount is %s", highest)
    return highest


def count_unique_clients(transactions: Sequence[Transaction]) -> int:
    """Number of distinct clients (case-sensitive) that sent or received a transaction"""
    _require_transactions(transactions, "Unique client count")

    clients: Set[str] = set()
    for txn in transactions:
        clients.add(txn.sender_full_name)
        clients.add(txn.beneficiary_full_name)

    logger.info("Unique clients count is %d", len(clients))
    return len(clients)


def count_open_compliance_issues(client_full_name: str, transactions: Sequence[Transaction]) -> int:
    """Number of unsolved compliance issues on transactions the client sent or received"""
    _require_transactions(transactions, "Open compliance issue count")

    open_issues = sum(
        1
        for t in transactions
        if t.has_open_issue
        and (
            _same_client(t.sender_full_name, client_full_name)
            or _same_client(t.beneficiary_full_name, client_full_name)
        )
    )
    logger.info("%s has %d open compliance issues", client_full_name, open_issues)
    return open_issues


def has_no_open_compliance_issues(client_full_name: str, transactions: Sequence[Transaction]) -> bool:
    """
    Check that a client is clear of unsolved compliance issues.

    Returns True when none of the transactions the client sent or received
    (name matched case-insensitively) carries an issue that is still open.
    Transactions without an issue id never count as open.
    """
    return count_open_compliance_issues(client_full_name, transactions) == 0


def get_transactions_by_beneficiary_name(transactions: Sequence[Transaction]) -> Dict[str, List[Transaction]]:
    """
    Index all transactions by beneficiary name.

    Names are compared exactly (case-sensitive). Keys appear in order of first
    occurrence and every group keeps the input order of its transactions, no
    matter how the beneficiary's transactions are interleaved with others.
    """
    _require_transactions(transactions, "Grouping by beneficiary")

    groups: Dict[str, List[Transaction]] = {}
    for txn in transactions:
        groups.setdefault(txn.beneficiary_full_name, []).append(txn)

    logger.info("Grouped %d transactions under %d beneficiaries", len(transactions), len(groups))
    return groups


def get_unsolved_issue_ids(transactions: Sequence[Transaction]) -> Set[int]:
    """Identifiers (mtn) of all transactions whose compliance issue is still open"""
    _require_transactions(transactions, "Unsolved issue ids")

    unsolved = {t.mtn for t in transactions if t.has_open_issue}
    logger.info("Found %d unsolved issue ids", len(unsolved))
    return unsolved


def get_all_solved_issue_messages(transactions: Sequence[Transaction]) -> List[Optional[str]]:
    """Messages of all solved compliance issues, in input order"""
    _require_transactions(transactions, "Solved issue messages")

    messages = [t.issue_message for t in transactions if t.has_solved_issue]
    logger.info("Found %d solved issue messages", len(messages))
    return messages


def get_top_transactions_by_amount(transactions: Sequence[Transaction], limit: int = 3) -> List[Transaction]:
    """
    The `limit` transactions with the highest amount, sorted by amount descending.

    Works on a sorted copy, the caller's sequence is left untouched. Equal
    amounts keep their input order.

    Raises:
        EmptyInputError: no transactions
        InsufficientDataError: fewer than `limit` transactions
    """
    _require_transactions(transactions, "Top transactions by amount")
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    if len(transactions) < limit:
        raise InsufficientDataError(
            f"Top {limit} transactions requested but only {len(transactions)} available"
        )

    ranked = sorted(transactions, key=lambda t: t.amount, reverse=True)[:limit]
    logger.info("Top %d transaction amounts are %s", limit, [t.amount for t in ranked])
    return ranked


def get_top3_transactions_by_amount(transactions: Sequence[Transaction]) -> List[Transaction]:
    """The 3 transactions with highest amount sorted by amount descending"""
    return get_top_transactions_by_amount(transactions, limit=3)


def get_top_sender(transactions: Sequence[Transaction]) -> TopSender:
    """
    Sender with the largest total sent amount.

    Senders are grouped case-insensitively, the same way
    get_total_transaction_amount_sent_by matches them, and reported under the
    first spelling seen. A tie goes to the sender encountered first in input
    order.
    """
    _require_transactions(transactions, "Top sender")

    # casefolded name -> (display name, amounts); dict keeps first-seen order
    sent: Dict[str, Tuple[str, List[float]]] = {}
    for txn in transactions:
        sent.setdefault(txn.sender_full_name.casefold(), (txn.sender_full_name, []))[1].append(txn.amount)

    top_name, top_total = None, None
    for name, amounts in sent.values():
        # summed like get_total_transaction_amount_sent_by so both totals agree exactly
        total = sum(amounts, 0.0)
        if top_total is None or total > top_total:
            top_name, top_total = name, total

    logger.info("Top sender is %s and transaction amount is %s", top_name, top_total)
    return TopSender(name=top_name, total_amount=top_total)
