from datetime import datetime
from decimal import Decimal
from typing import List

from app.core.utils import ZERO
from app.schemas.user import CamelModel, User

class BalanceSummary(CamelModel):
    total_paid: Decimal = ZERO
    you_owe: Decimal = ZERO
    you_are_owed: Decimal = ZERO

class BalanceDisplay(CamelModel):
    total_paid: str
    you_owe: str
    you_are_owed: str

class ExpenseRow(CamelModel):
    id: int
    description: str
    amount: Decimal
    amount_display: str
    paid_by_name: str
    is_payer: bool
    your_share: Decimal | None = None
    share_label: str | None = None
    share_display: str | None = None
    created_at: datetime

class DashboardOut(CamelModel):
    user: User
    currency_symbol: str
    totals: BalanceSummary
    totals_display: BalanceDisplay
    expenses: List[ExpenseRow]
