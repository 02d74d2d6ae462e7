"""POST /v1/transactions/top and /v1/senders/top - amount rankings"""

import logging
from fastapi import APIRouter, HTTPException, Query, Request

from transaction_insights.api.v1.schemas import TransactionsRequest, TopSenderResponse, TopTransactionsResponse
from transaction_insights.api.dependencies import get_request_id
from transaction_insights.config import settings
from transaction_insights.domain.aggregations import get_top_sender, get_top_transactions_by_amount
from transaction_insights.domain.exceptions import EmptyInputError, InsufficientDataError
from transaction_insights.infrastructure.observability.metrics import record_failure
from transaction_insights.infrastructure.parsing import TransactionSchema

router = APIRouter()


@router.post("/transactions/top", response_model=TopTransactionsResponse)
def top_transactions(
    request_body: TransactionsRequest,
    request: Request,
    limit: int | None = Query(None, gt=0, description="Number of transactions to return"),
):
    """
    Highest-amount transactions, sorted by amount descending.

    Returns 422 when the dataset holds fewer than `limit` transactions.
    """
    limit = limit or settings.top_transactions_limit
    try:
        ranked = get_top_transactions_by_amount(request_body.to_domain(), limit=limit)
    except EmptyInputError as e:
        record_failure("empty_input")
        raise HTTPException(status_code=422, detail=str(e))
    except InsufficientDataError as e:
        record_failure("insufficient_data")
        logging.warning(f"Insufficient data: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    return TopTransactionsResponse(
        limit=limit,
        transactions=[TransactionSchema.from_domain(t) for t in ranked],
    )


@router.post("/senders/top", response_model=TopSenderResponse)
def top_sender(request_body: TransactionsRequest):
    """Sender with the largest total sent amount, with that total"""
    try:
        result = get_top_sender(request_body.to_domain())
    except EmptyInputError as e:
        record_failure("empty_input")
        raise HTTPException(status_code=422, detail=str(e))

    return TopSenderResponse.from_domain(result)
