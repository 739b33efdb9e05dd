import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.v1.routes.auth import router as auth_router
from app.api.v1.routes.dashboard import router as dashboard_router
from app.api.v1.routes.expense import router as expense_router
from app.api.v1.routes.system import router as system_router
from app.core.config import settings
from app.core.exceptions import BackendError
from app.core.logger import setup_logging
from app.services.backend_client import create_http_client

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http = create_http_client()
    logger.info("ExpenseShare : using expense service at %s", settings.BACKEND_URL)
    try:
        yield
    finally:
        await app.state.http.aclose()


app = FastAPI(title="ExpenseShare Web", lifespan=lifespan)


@app.exception_handler(BackendError)
async def backend_error_handler(request: Request, exc: BackendError):
    return JSONResponse(status_code=exc.client_status, content={"detail": exc.message})


@app.get("/")
async def root():
    return {"message": "ExpenseShare is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(auth_router, prefix="/api/v1/auth")
app.include_router(expense_router, prefix="/api/v1/expenses")
app.include_router(dashboard_router, prefix="/api/v1/dashboard")
