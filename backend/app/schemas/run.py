from typing import Any
from pydantic import BaseModel, ConfigDict


class RunCodeRequest(BaseModel):
    # required-ness is checked by the proxy so it can answer with its own 400
    language: str | None = None
    sourceCode: str | None = None
    stdin: str | None = ""

    model_config = ConfigDict(extra="ignore")


class RunCodeResult(BaseModel):
    stdout: str | None = None
    stderr: str | None = None
    # passed through from Judge0 unvalidated
    status: Any = None
    time: Any = None
    memory: Any = None


class LanguageOut(BaseModel):
    name: str
    label: str
    language_id: int
    template: str
