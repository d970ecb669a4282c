import json, logging
from typing import Any
import httpx
from app.core.config import Settings
from app.core.errors import InvalidJudge0Response, Judge0Error

log = logging.getLogger("judge0")


class Judge0Client:
    """Thin wrapper around a synchronous (wait=true) Judge0 submission."""

    def __init__(self, http: httpx.AsyncClient, settings: Settings):
        self.http = http
        self.url = settings.JUDGE0_URL
        self.headers = {"Content-Type": "application/json"}
        if settings.JUDGE0_AUTH_TOKEN:
            self.headers[settings.JUDGE0_AUTH_HEADER] = settings.JUDGE0_AUTH_TOKEN

    async def submit(self, source_code: str, language_id: int, stdin: str) -> dict[str, Any]:
        body = {
            "source_code": source_code,
            "language_id": language_id,
            "stdin": stdin,
        }
        res = await self.http.post(self.url, headers=self.headers, json=body)
        text = res.text

        if not res.is_success:
            log.error(
                "Judge0 error: %s", res.status_code, extra={"ctx": {"body": text}}
            )
            raise Judge0Error(res.status_code, text)

        try:
            return json.loads(text)
        except ValueError:
            log.exception("Failed to parse Judge0 JSON", extra={"ctx": {"body": text}})
            raise InvalidJudge0Response(text)
