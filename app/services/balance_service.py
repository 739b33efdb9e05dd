from decimal import Decimal
from typing import Iterable, Optional

from app.core.utils import ZERO
from app.schemas.balances import BalanceSummary
from app.schemas.expense import Expense, Share


def find_share(expense: Expense, user_id: int) -> Optional[Share]:
    return next((s for s in expense.shares if s.user.id == user_id), None)


def compute_balances(expenses: Iterable[Expense], viewer_id: int) -> BalanceSummary:
    """
    Totals for one viewer across an expense snapshot.

    total_paid   = amounts of expenses the viewer paid
    you_are_owed = on those, amount minus the viewer's own share
    you_owe      = viewer's share of expenses someone else paid

    Shares and amount are taken as independent facts; the shares of an
    expense are not assumed to add up to its amount. An expense without a
    share for the viewer contributes nothing beyond its paid amount.
    """
    total_paid: Decimal = ZERO
    you_are_owed: Decimal = ZERO
    you_owe: Decimal = ZERO

    for exp in expenses:
        my_share = find_share(exp, viewer_id)

        if exp.paid_by.id == viewer_id:
            total_paid += exp.amount
            if my_share is not None:
                you_are_owed += exp.amount - my_share.share_amount
        elif my_share is not None:
            you_owe += my_share.share_amount

    return BalanceSummary(total_paid=total_paid, you_owe=you_owe, you_are_owed=you_are_owed)
