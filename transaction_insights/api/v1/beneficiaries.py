"""POST /v1/transactions/by-beneficiary - transactions grouped by beneficiary"""

from fastapi import APIRouter, HTTPException

from transaction_insights.api.v1.schemas import TransactionsRequest, BeneficiaryGroupsResponse
from transaction_insights.domain.aggregations import get_transactions_by_beneficiary_name
from transaction_insights.domain.exceptions import EmptyInputError
from transaction_insights.infrastructure.observability.metrics import record_failure
from transaction_insights.infrastructure.parsing import TransactionSchema

router = APIRouter()


@router.post("/transactions/by-beneficiary", response_model=BeneficiaryGroupsResponse)
def transactions_by_beneficiary(request_body: TransactionsRequest):
    """
    Index the dataset by beneficiary name.

    Returns:
        Every beneficiary once, each with its transactions in request order
    """
    try:
        groups = get_transactions_by_beneficiary_name(request_body.to_domain())
    except EmptyInputError as e:
        record_failure("empty_input")
        raise HTTPException(status_code=422, detail=str(e))

    return BeneficiaryGroupsResponse(
        beneficiaries={
            name: [TransactionSchema.from_domain(t) for t in group]
            for name, group in groups.items()
        }
    )
