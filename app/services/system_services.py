from app.core.config import settings
from app.core.utils import CURRENCIES
from app.services.backend_client import BackendClient

async def check_backend_service(client: BackendClient):
    if await client.ping():
        return {"backend": True, "message": "Expense service is reachable", "url": settings.BACKEND_URL}
    return {"backend": False, "error": "Expense service is unreachable", "url": settings.BACKEND_URL}

async def system_health():
    return {
        "status": "ok"
    }

async def list_currencies():
    return CURRENCIES
