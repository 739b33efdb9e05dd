from fastapi import APIRouter, Depends
from app.core.dependencies import get_backend_client, get_current_user
from app.schemas.expense import AddExpenseRequest, Expense, ExpenseOut
from app.schemas.user import User
from app.services.backend_client import BackendClient
from app.services.expense_services import add_expense_for_user, get_expenses

router = APIRouter()

@router.get("", response_model=list[Expense])
async def all_expenses(client: BackendClient = Depends(get_backend_client), current_user: User = Depends(get_current_user)):
    return await get_expenses(client, current_user.id)

@router.post("", response_model=ExpenseOut, status_code=201)
async def add_expense(
    data: AddExpenseRequest,
    client: BackendClient = Depends(get_backend_client),
    current_user: User = Depends(get_current_user),
):
    expense = await add_expense_for_user(client, current_user, data)
    return ExpenseOut(expense=expense)
