"""Load a transaction dataset from a JSON export on disk"""

import json
import logging
from pathlib import Path
from typing import List, Union

from transaction_insights.domain.models import Transaction
from transaction_insights.domain.exceptions import InvalidTransactionDataError
from transaction_insights.infrastructure.parsing import parse_transactions


def load_transactions_from_file(path: Union[str, Path]) -> List[Transaction]:
    """
    Read a JSON array of transaction records.

    Raises:
        InvalidTransactionDataError: file missing or unreadable, invalid JSON, or malformed records
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidTransactionDataError(f"Cannot read transactions file {path}: {e}") from e

    try:
        records = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidTransactionDataError(f"Transactions file {path} is not valid JSON: {e}") from e

    transactions = parse_transactions(records)
    logging.info(f"Loaded {len(transactions)} transactions from {path}")
    return transactions
