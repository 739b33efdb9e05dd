from fastapi import APIRouter, Depends, Response
from app.core.dependencies import get_backend_client, get_current_user
from app.core.jwt_config import clear_session_cookie, set_session_cookie
from app.schemas.user import AuthOut, LoginRequest, SignupRequest, User
from app.services.backend_client import BackendClient
from app.services.user_service import login_user_service, signup_user

router = APIRouter()

@router.post("/signup", response_model=AuthOut)
async def signup(data: SignupRequest, response: Response, client: BackendClient = Depends(get_backend_client)):
    user = await signup_user(client, data)
    set_session_cookie(response, user)
    return AuthOut(message="Account created!", user=user)

@router.post("/login", response_model=AuthOut)
async def login(data: LoginRequest, response: Response, client: BackendClient = Depends(get_backend_client)):
    user = await login_user_service(client, data)
    set_session_cookie(response, user)
    return AuthOut(message="Logged in successfully!", user=user)

@router.post("/logout")
async def logout(response: Response):
    clear_session_cookie(response)
    return {"message": "Logged out"}

@router.get("/me", response_model=User)
async def me(user: User = Depends(get_current_user)):
    return user
