import logging

from app.schemas.expense import AddExpenseRequest, Expense, ExpenseCreate
from app.schemas.user import User
from app.services.backend_client import BackendClient
from app.services.dashboard_service import newest_first

logger = logging.getLogger(__name__)

async def get_expenses(client: BackendClient, user_id: int) -> list[Expense]:
    expenses = await client.get_expenses(user_id)
    return newest_first(expenses)

async def add_expense_for_user(client: BackendClient, user: User, data: AddExpenseRequest) -> Expense | None:
    payload = ExpenseCreate(
        description=data.description,
        amount=data.amount,
        paid_by_id=user.id,
        shared_with_ids=data.shared_with,
    )

    created = await client.add_expense(payload)

    logger.info(
        "ExpenseShare : user %s added expense %r (%s) shared with %s",
        user.id, data.description, data.amount, data.shared_with,
    )
    return created
