import logging
from app.schemas.user import LoginRequest, SignupRequest, User
from app.services.backend_client import BackendClient

logger = logging.getLogger(__name__)

async def signup_user(client: BackendClient, data: SignupRequest) -> User:
    user = await client.signup(
        full_name=data.full_name,
        email=data.email,
        password=data.password,
        default_currency=data.default_currency,
    )
    logger.info("ExpenseShare : account created for user %s", user.id)
    return user

async def login_user_service(client: BackendClient, data: LoginRequest) -> User:
    user = await client.login(data.email, data.password)
    logger.info("ExpenseShare : user %s logged in", user.id)
    return user
