from fastapi import APIRouter, Depends
from app.api.deps import get_judge0
from app.core.languages import LANGUAGES
from app.schemas.run import LanguageOut, RunCodeRequest, RunCodeResult
from app.services.judge0 import Judge0Client
from app.services.run import run_code as run_submission

router = APIRouter(tags=["run"])


@router.post("/run-code", response_model=RunCodeResult)
async def run_code(payload: RunCodeRequest, judge0: Judge0Client = Depends(get_judge0)):
    return await run_submission(payload, judge0)


@router.get("/languages", response_model=list[LanguageOut])
async def list_languages():
    return [
        LanguageOut(
            name=lang.name,
            label=lang.label,
            language_id=lang.judge0_id,
            template=lang.template,
        )
        for lang in LANGUAGES.values()
    ]
