"""Balance query port: one-shot fetch of a balances tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bkper_sdk.domain.balances.payloads import BalancesPayload


class BalanceQueryPort(ABC):
    """Interface for balance queries against the remote book."""

    @abstractmethod
    async def fetch_balances(self, query: str) -> BalancesPayload:
        """
        Fetch the balances tree matching a query.

        Returns
        -------
        One root per matched account or group; groups nest their children

        Raises
        ------
        RemoteFetchError
            If the remote call fails
        """
