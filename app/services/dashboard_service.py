import logging
from typing import List

from app.core.utils import currency_symbol, format_money
from app.schemas.balances import BalanceDisplay, DashboardOut, ExpenseRow
from app.schemas.expense import Expense
from app.schemas.user import User
from app.services.backend_client import BackendClient
from app.services.balance_service import compute_balances, find_share

logger = logging.getLogger(__name__)


def newest_first(expenses: List[Expense]) -> List[Expense]:
    return sorted(expenses, key=lambda e: e.created_at, reverse=True)


def build_expense_row(exp: Expense, viewer: User, symbol: str) -> ExpenseRow:
    my_share = find_share(exp, viewer.id)
    is_payer = exp.paid_by.id == viewer.id

    row = ExpenseRow(
        id=exp.id,
        description=exp.description,
        amount=exp.amount,
        amount_display=format_money(exp.amount, symbol),
        paid_by_name="You" if is_payer else exp.paid_by.full_name,
        is_payer=is_payer,
        created_at=exp.created_at,
    )

    if my_share is not None:
        row.your_share = my_share.share_amount
        row.share_label = "Your share" if is_payer else "You owe"
        row.share_display = format_money(my_share.share_amount, symbol)

    return row


def build_dashboard(expenses: List[Expense], viewer: User) -> DashboardOut:
    symbol = currency_symbol(viewer.default_currency)
    ordered = newest_first(expenses)
    totals = compute_balances(ordered, viewer.id)

    return DashboardOut(
        user=viewer,
        currency_symbol=symbol,
        totals=totals,
        totals_display=BalanceDisplay(
            total_paid=format_money(totals.total_paid, symbol),
            you_owe=format_money(totals.you_owe, symbol),
            you_are_owed=format_money(totals.you_are_owed, symbol),
        ),
        expenses=[build_expense_row(exp, viewer, symbol) for exp in ordered],
    )


async def get_dashboard(client: BackendClient, viewer: User) -> DashboardOut:
    expenses = await client.get_expenses(viewer.id)
    logger.debug("ExpenseShare : %d expenses loaded for user %s", len(expenses), viewer.id)
    return build_dashboard(expenses, viewer)
