import json
import logging
from decimal import Decimal
from typing import Any

import httpx
from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import BackendError, BackendUnavailableError
from app.schemas.expense import Expense, ExpenseCreate
from app.schemas.user import User

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "An unknown server error occurred"


def create_http_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.BACKEND_URL,
        timeout=settings.HTTP_TIMEOUT,
        headers={"Accept": "application/json"},
        transport=transport,
    )


def handle_response(response: httpx.Response) -> Any:
    """
    Non-2xx  -> BackendError carrying the plain-text body.
    JSON 2xx -> parsed body, numbers as Decimal.
    other    -> None
    """
    if not response.is_success:
        message = response.text.strip() or DEFAULT_ERROR
        logger.warning(
            "ExpenseShare : backend %s %s -> %s %s",
            response.request.method, response.request.url.path, response.status_code, message,
        )
        raise BackendError(message, response.status_code)

    content_type = response.headers.get("content-type", "")
    if "application/json" not in content_type or not response.content:
        return None

    try:
        return json.loads(response.text, parse_float=Decimal)
    except ValueError as e:
        logger.error("ExpenseShare : unreadable JSON from backend | %s", e)
        raise BackendError("Unexpected data from the expense service")


def parse_model(model, data: Any):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error("ExpenseShare : malformed %s from backend | %s", model.__name__, e)
        raise BackendError(f"Unexpected {model.__name__.lower()} data from the expense service")


class BackendClient:
    """Thin wrapper around the expense service endpoints."""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = await self.http.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error("ExpenseShare : backend unreachable | %s %s | %s", method, url, e)
            raise BackendUnavailableError("Could not reach the expense service")

        return handle_response(response)

    async def signup(self, full_name: str, email: str, password: str, default_currency: str) -> User:
        data = await self._request(
            "POST",
            "/register",
            json={
                "fullName": full_name,
                "email": email,
                "password": password,
                "defaultCurrency": default_currency,
            },
        )
        if data is None:
            raise BackendError("Signup returned no user")
        return parse_model(User, data)

    async def login(self, email: str, password: str) -> User:
        data = await self._request("POST", "/login", json={"email": email, "password": password})
        if data is None:
            raise BackendError("Login returned no user")
        return parse_model(User, data)

    async def get_expenses(self, user_id: int) -> list[Expense]:
        data = await self._request("GET", "/expenses", params={"userId": user_id})
        if data is None:
            return []
        if not isinstance(data, list):
            logger.error("ExpenseShare : expected a list of expenses, got %s", type(data).__name__)
            raise BackendError("Unexpected expense data from the expense service")
        return [parse_model(Expense, item) for item in data]

    async def add_expense(self, payload: ExpenseCreate) -> Expense | None:
        data = await self._request("POST", "/expenses", json=payload.to_payload())
        if data is None:
            return None
        return parse_model(Expense, data)

    async def ping(self) -> bool:
        try:
            await self.http.get("/")
        except httpx.RequestError:
            return False
        # any HTTP answer at all means the service is up
        return True
