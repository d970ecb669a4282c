import httpx
import pytest
from app.api.deps import get_judge0
from app.core.config import Settings


async def open_judge0(settings):
    gen = get_judge0(settings)
    judge0 = await gen.__anext__()
    return gen, judge0


@pytest.mark.asyncio
async def test_configured_timeout_reaches_http_client():
    gen, judge0 = await open_judge0(Settings(JUDGE0_TIMEOUT_S=7.5))
    try:
        assert judge0.http.timeout == httpx.Timeout(7.5)
    finally:
        await gen.aclose()
    assert judge0.http.is_closed


@pytest.mark.asyncio
async def test_no_timeout_by_default_and_redirects_followed():
    gen, judge0 = await open_judge0(Settings(JUDGE0_TIMEOUT_S=None))
    try:
        assert judge0.http.timeout == httpx.Timeout(None)
        assert judge0.http.follow_redirects is True
    finally:
        await gen.aclose()
