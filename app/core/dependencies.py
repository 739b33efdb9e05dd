from fastapi import HTTPException, Request
from app.core.jwt_config import decode_token, get_token_from_cookie
from app.schemas.user import User
from app.services.backend_client import BackendClient

async def get_backend_client(request: Request) -> BackendClient:
    return BackendClient(request.app.state.http)

async def get_current_user(request: Request) -> User:
    token = get_token_from_cookie(request=request)
    payload = decode_token(token)
    user_id = payload.get("sub")

    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid authentication credentials")

    try:
        return User(
            id=int(user_id),
            full_name=payload.get("name") or "",
            default_currency=payload.get("currency") or "USD",
        )
    except ValueError:
        raise HTTPException(status_code=401, detail="Could not validate credentials")
