from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import get_settings
from app.core.errors import ApiError
from app.core.logging import setup_logging
from app.api.routers import run as r_run

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(r_run.router, prefix=settings.API_PREFIX)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(exc.payload(), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        {
            "error": "Invalid request body",
            "details": [{"loc": list(e["loc"]), "msg": e["msg"]} for e in exc.errors()],
        },
        status_code=400,
    )


@app.get(f"{settings.API_PREFIX}/health")
async def health():
    return {"ok": True}
