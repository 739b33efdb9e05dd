from fastapi import APIRouter, Depends
from app.core.dependencies import get_backend_client
from app.services.backend_client import BackendClient
from app.services.system_services import check_backend_service, list_currencies, system_health

router = APIRouter()

@router.get("/health/backend")
async def check_backend(client: BackendClient = Depends(get_backend_client)):
    return await check_backend_service(client)

@router.get("/health")
async def health():
    return await system_health()

@router.get("/currencies")
async def currencies():
    return await list_currencies()
