import json
from datetime import datetime
from decimal import Decimal

import httpx

from app.schemas.expense import Expense, Share
from app.schemas.user import User

VIEWER = User(id=1, full_name="Asha Rao", default_currency="INR")
OTHER = User(id=2, full_name="Ben Cole", default_currency="USD")


def make_expense(id, amount, paid_by, shares, created_at=None, description="Dinner"):
    return Expense(
        id=id,
        description=description,
        amount=Decimal(str(amount)),
        paid_by=paid_by,
        shares=[Share(user=u, share_amount=Decimal(str(a))) for u, a in shares],
        created_at=created_at or datetime(2024, 5, 1, 12, 0),
    )


def user_json(user: User) -> dict:
    return {"id": user.id, "fullName": user.full_name, "defaultCurrency": user.default_currency}


def expense_json(id, amount, paid_by, shares, created_at="2024-05-01T12:00:00", description="Dinner"):
    return {
        "id": id,
        "description": description,
        "amount": amount,
        "paidBy": user_json(paid_by),
        "shares": [{"user": user_json(u), "shareAmount": a} for u, a in shares],
        "createdAt": created_at,
    }


class FakeBackend:
    """Records requests and answers from a route table."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def on(self, method, path, status=200, body=None, text=None):
        self.routes[(method, path)] = (status, body, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, text="Not Found")
        status, body, text = self.routes[key]
        if body is not None:
            return httpx.Response(status, content=json.dumps(body), headers={"content-type": "application/json"})
        return httpx.Response(status, text=text or "")

    def last_json(self):
        return json.loads(self.requests[-1].content)
