"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Literal, Optional

Trend = Literal["up", "down", "stable"]


@dataclass
class Transaction:
    """Ledger transaction supplied by the caller"""

    transaction_id: str
    date: date
    amount: int  # minor units: income > 0, expense < 0


@dataclass
class IncomeBucket:
    """Unspent portion of a single income transaction"""

    date: date
    remaining: int


@dataclass
class AgeEntry:
    """Age in days of the money that paid for one expense"""

    date: date
    age: int


@dataclass
class AgeOfMoneyResult:
    """Output of FIFO matching"""

    ages: List[AgeEntry]
    insufficient_data: bool


@dataclass
class MonthlyPoint:
    """Average age of money as of the end of a month"""

    date: str  # label, e.g. "Jan 2024"
    age_of_money: float


@dataclass
class AgeOfMoneyReport:
    """Everything the presentation layer needs for one user"""

    current_age: Optional[int]
    trend: Trend
    insufficient_data: bool
    monthly_data: List[MonthlyPoint] = field(default_factory=list)
    ages: List[AgeEntry] = field(default_factory=list)
    income_count: int = 0
    expense_count: int = 0
