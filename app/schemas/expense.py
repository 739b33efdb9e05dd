from datetime import datetime
from decimal import Decimal
from pydantic import Field, field_validator
from typing import List

from app.core.utils import parse_id_list
from app.schemas.user import CamelModel, User

class Share(CamelModel):
    user: User
    share_amount: Decimal = Field(ge=0)

class Expense(CamelModel):
    id: int
    description: str
    amount: Decimal = Field(gt=0)
    paid_by: User
    shares: List[Share] = []
    created_at: datetime

class AddExpenseRequest(CamelModel):
    description: str = Field(min_length=1)
    amount: Decimal = Field(gt=0, allow_inf_nan=False)
    shared_with: List[int] = []

    @field_validator("shared_with", mode="before")
    @classmethod
    def split_ids(cls, value):
        return parse_id_list(value)

class ExpenseCreate(CamelModel):
    description: str
    amount: Decimal
    paid_by_id: int
    shared_with_ids: List[int]

    def to_payload(self) -> dict:
        # the backend wants a JSON number, pydantic would emit a string
        return {
            "description": self.description,
            "amount": float(self.amount),
            "paidById": self.paid_by_id,
            "sharedWithIds": list(self.shared_with_ids),
        }

class ExpenseOut(CamelModel):
    expense: Expense | None = None
