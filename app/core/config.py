from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    BACKEND_URL: str = "http://localhost:8081/api"
    HTTP_TIMEOUT: float = 5.0
    SESSION_SECRET: str
    SESSION_ALGO: str = "HS256"
    SESSION_TTL_MINUTES: int = 60 * 24
    SESSION_COOKIE_NAME: str = "expenseshare_session"
    SESSION_COOKIE_SECURE: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
