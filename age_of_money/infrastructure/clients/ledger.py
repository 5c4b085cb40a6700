"""Ledger API HTTP client for fetching a user's transactions"""

import httpx
from datetime import date
from typing import List
from age_of_money.domain.models import Transaction
from age_of_money.domain.exceptions import LedgerAPIError
from age_of_money.config import settings


def parse_amount(value) -> int:
    """Whole minor units; fractional amounts are rejected, never truncated"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"amount must be a number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"amount must be a whole number of minor units, got {value!r}")
    return int(value)


class LedgerClient:
    """Client for the external ledger transaction API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.ledger_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_transactions(self, user_id: str) -> List[Transaction]:
        """
        Fetch all income and expense transactions for a user.

        Expected payload: {"transactions": [{"id", "date", "amount"}, ...]}
        with ISO dates and signed amounts in minor units.

        Raises:
            LedgerAPIError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(
                    f"{self.base_url}/ledger/transactions",
                    params={"user_id": user_id},
                )
                response.raise_for_status()
                data = response.json()

                return [
                    Transaction(
                        transaction_id=str(txn["id"]),
                        date=date.fromisoformat(txn["date"]),
                        amount=parse_amount(txn["amount"]),
                    )
                    for txn in data.get("transactions", [])
                ]

            except httpx.TimeoutException as e:
                raise LedgerAPIError(f"Ledger API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise LedgerAPIError(f"Ledger API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise LedgerAPIError(f"Ledger API unreachable: {e}") from e
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                raise LedgerAPIError(f"Invalid transaction data from ledger: {e}") from e
