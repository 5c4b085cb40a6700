"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from age_of_money.infrastructure.clients.ledger import LedgerClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_ledger_client() -> LedgerClient:
    """Provide Ledger API client instance"""
    return LedgerClient()
