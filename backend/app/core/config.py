from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    APP_NAME: str = "CodeCook Online Compiler"
    API_PREFIX: str = "/api"
    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # Judge0 CE, synchronous submissions
    JUDGE0_URL: str = (
        "https://ce.judge0.com/submissions/?base64_encoded=false&wait=true"
    )
    JUDGE0_AUTH_TOKEN: str | None = None
    JUDGE0_AUTH_HEADER: str = "X-Auth-Token"
    # None leaves the call unbounded
    JUDGE0_TIMEOUT_S: float | None = None

    # Editor client
    PROXY_URL: str = "http://localhost:8000/api/run-code"

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
