from fastapi import APIRouter, Depends
from app.core.dependencies import get_backend_client, get_current_user
from app.schemas.balances import DashboardOut
from app.schemas.user import User
from app.services.backend_client import BackendClient
from app.services.dashboard_service import get_dashboard

router = APIRouter()

@router.get("", response_model=DashboardOut)
async def dashboard(client: BackendClient = Depends(get_backend_client), user: User = Depends(get_current_user)):
    return await get_dashboard(client, user)
