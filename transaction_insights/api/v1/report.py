"""POST /v1/report - full transaction report for one dataset"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from transaction_insights.api.v1.schemas import ReportRequest, ReportResponse
from transaction_insights.api.dependencies import get_request_id
from transaction_insights.config import settings
from transaction_insights.domain.report import build_report
from transaction_insights.domain.exceptions import EmptyInputError, InsufficientDataError
from transaction_insights.infrastructure.observability.metrics import record_report, record_failure
from transaction_insights.infrastructure.observability.logging import log_report

router = APIRouter()


@router.post("/report", response_model=ReportResponse)
def create_report(request_body: ReportRequest, request: Request):
    """
    Compute every statistic over the transactions in the request body.

    Sender, client and ranking size fall back to the configured report
    defaults when omitted.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        report = build_report(
            request_body.to_domain(),
            sender_full_name=request_body.sender_full_name or settings.report_sender_name,
            client_full_name=request_body.client_full_name or settings.report_client_name,
            top_limit=request_body.top_limit or settings.top_transactions_limit,
        )

    except EmptyInputError as e:
        record_failure("empty_input")
        logging.warning(f"Empty dataset: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except InsufficientDataError as e:
        record_failure("insufficient_data")
        logging.warning(f"Insufficient data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_report("api", report.transaction_count)
    log_report(request_id, "api", report, duration_ms)

    return ReportResponse.from_report(report)
