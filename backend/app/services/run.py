import logging
from app.core.errors import (
    ApiError,
    MissingFieldsError,
    RunFailedError,
    UnsupportedLanguageError,
)
from app.core.languages import resolve_language_id
from app.schemas.run import RunCodeRequest, RunCodeResult
from app.services.judge0 import Judge0Client

log = logging.getLogger("run")

RESULT_FIELDS = ("stdout", "stderr", "status", "time", "memory")


def extract_result(data: dict) -> RunCodeResult:
    return RunCodeResult(**{k: data.get(k) for k in RESULT_FIELDS})


async def run_code(payload: RunCodeRequest, judge0: Judge0Client) -> RunCodeResult:
    if not payload.language or not payload.sourceCode:
        raise MissingFieldsError()

    language_id = resolve_language_id(payload.language)
    if language_id is None:
        raise UnsupportedLanguageError()

    try:
        data = await judge0.submit(
            payload.sourceCode, language_id, payload.stdin or ""
        )
        if not isinstance(data, dict):
            # valid JSON but not an object: nothing to extract from
            raise TypeError(f"unexpected Judge0 payload: {data!r}")
        result = extract_result(data)
    except ApiError:
        raise
    except Exception as e:
        log.exception("run-code error")
        raise RunFailedError(str(e) or repr(e))

    status = result.status if isinstance(result.status, dict) else {}
    log.info(
        "run finished",
        extra={
            "ctx": {
                "language": payload.language,
                "status": status.get("description"),
                "time": result.time,
            }
        },
    )
    return result
