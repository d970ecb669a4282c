from typing import AsyncIterator
import httpx
from fastapi import Depends
from app.core.config import Settings, get_settings
from app.services.judge0 import Judge0Client


async def get_judge0(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[Judge0Client]:
    async with httpx.AsyncClient(
        timeout=settings.JUDGE0_TIMEOUT_S, follow_redirects=True
    ) as http:
        yield Judge0Client(http, settings)
