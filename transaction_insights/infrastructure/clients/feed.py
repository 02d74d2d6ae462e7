"""Transaction feed HTTP client for fetching a dataset from a remote service"""

import httpx
from typing import List, Optional

from transaction_insights.domain.models import Transaction
from transaction_insights.domain.exceptions import InvalidTransactionDataError, TransactionSourceError
from transaction_insights.infrastructure.parsing import parse_transactions
from transaction_insights.config import settings


class TransactionFeedClient:
    """Client for an external transaction export API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.transactions_api_base or "").rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_transactions(self) -> List[Transaction]:
        """
        Fetch the full transaction dataset.

        The feed may answer with a bare JSON array or with an object holding
        a "transactions" array.

        Raises:
            TransactionSourceError: On missing base URL, timeout, HTTP errors, or invalid response
        """
        if not self.base_url:
            raise TransactionSourceError("No transaction feed URL configured")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}/transactions")
                response.raise_for_status()
                data = response.json()

                records = data.get("transactions") if isinstance(data, dict) else data
                return parse_transactions(records)

            except httpx.TimeoutException as e:
                raise TransactionSourceError(f"Transaction feed timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise TransactionSourceError(f"Transaction feed error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise TransactionSourceError(f"Transaction feed unreachable: {e}") from e
            except (ValueError, InvalidTransactionDataError) as e:
                raise TransactionSourceError(f"Invalid transaction data from feed: {e}") from e
