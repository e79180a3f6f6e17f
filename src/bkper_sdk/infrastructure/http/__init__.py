"""REST client and port adapters for the Bkper API."""

from bkper_sdk.infrastructure.http.adapters import (
    HttpBalanceQueryAdapter,
    HttpBookAdapter,
    HttpPageFetcher,
    HttpPortFactory,
)
from bkper_sdk.infrastructure.http.client import BkperApiClient, TokenProvider

__all__ = [
    "BkperApiClient",
    "HttpBalanceQueryAdapter",
    "HttpBookAdapter",
    "HttpPageFetcher",
    "HttpPortFactory",
    "TokenProvider",
]
