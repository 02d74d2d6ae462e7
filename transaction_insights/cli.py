"""Command-line report: load one dataset, print every statistic as JSON"""

import argparse
import asyncio
import logging
import sys
import time
import uuid
from typing import List, Optional

from transaction_insights.api.v1.schemas import ReportResponse
from transaction_insights.config import settings
from transaction_insights.domain.models import Transaction
from transaction_insights.domain.report import build_report
from transaction_insights.domain.exceptions import (
    EmptyInputError,
    InsufficientDataError,
    InvalidTransactionDataError,
    TransactionSourceError,
)
from transaction_insights.infrastructure.clients.feed import TransactionFeedClient
from transaction_insights.infrastructure.loaders.json_file import load_transactions_from_file
from transaction_insights.infrastructure.observability.logging import setup_logging, log_report
from transaction_insights.infrastructure.observability.metrics import record_report, record_failure

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_REPORT_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transaction-insights",
        description="Print aggregate statistics for a transaction dataset.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", help=f"JSON export to analyze (default: {settings.transactions_file})")
    source.add_argument("--url", help="Base URL of a transaction feed to fetch the dataset from")
    parser.add_argument("--sender", default=settings.report_sender_name, help="Client whose sent total is reported")
    parser.add_argument("--client", default=settings.report_client_name, help="Client checked for open compliance issues")
    parser.add_argument("--top", type=int, default=settings.top_transactions_limit, help="Size of the amount ranking")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (DEBUG, INFO, ...)")
    return parser


def load_dataset(file: Optional[str], url: Optional[str]) -> List[Transaction]:
    """Load from the feed when a URL is given, else from the JSON file"""
    if url:
        return asyncio.run(TransactionFeedClient(base_url=url).get_transactions())
    return load_transactions_from_file(file or settings.transactions_file)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.top < 1:
        print("--top must be a positive integer", file=sys.stderr)
        return EXIT_REPORT_FAILED

    setup_logging(args.log_level)
    run_id = str(uuid.uuid4())

    try:
        transactions = load_dataset(args.file, args.url)
    except (InvalidTransactionDataError, TransactionSourceError) as e:
        record_failure("source_unavailable" if isinstance(e, TransactionSourceError) else "invalid_data")
        logging.error(f"Could not load transactions: {e}", extra={"request_id": run_id})
        return EXIT_LOAD_FAILED

    start_time = time.time()
    try:
        report = build_report(transactions, args.sender, args.client, top_limit=args.top)
    except (EmptyInputError, InsufficientDataError) as e:
        record_failure("empty_input" if isinstance(e, EmptyInputError) else "insufficient_data")
        logging.error(f"Could not build report: {e}", extra={"request_id": run_id})
        return EXIT_REPORT_FAILED

    record_report("cli", report.transaction_count)
    log_report(run_id, "cli", report, (time.time() - start_time) * 1000)

    print(ReportResponse.from_report(report).model_dump_json(indent=2, by_alias=True))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
