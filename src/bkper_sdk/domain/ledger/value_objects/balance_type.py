"""Balance selection enumerations used by reports and data tables."""

from enum import Enum


class BalanceType(str, Enum):
    """Which balance a data table renders."""

    TOTAL = "TOTAL"  # One value per container
    PERIOD = "PERIOD"  # Time table of period balances
    CUMULATIVE = "CUMULATIVE"  # Time table of cumulative balances

    def is_time_series(self) -> bool:
        return self in (BalanceType.PERIOD, BalanceType.CUMULATIVE)


class BalanceCheckedType(str, Enum):
    """Which transactions the balances are computed from."""

    FULL_BALANCE = "FULL_BALANCE"
    CHECKED_BALANCE = "CHECKED_BALANCE"
    UNCHECKED_BALANCE = "UNCHECKED_BALANCE"
