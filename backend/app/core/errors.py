from typing import Any


class ApiError(Exception):
    """Error that is answered with a JSON body instead of propagating."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None, **extra: Any):
        self.message = message or self.message
        self.extra = extra
        super().__init__(self.message)

    def payload(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}


class MissingFieldsError(ApiError):
    status_code = 400
    message = "language and sourceCode are required"


class UnsupportedLanguageError(ApiError):
    status_code = 400
    message = "Unsupported language"


class Judge0Error(ApiError):
    message = "Judge0 error"

    def __init__(self, status: int, details: str):
        super().__init__(status=status, details=details)


class InvalidJudge0Response(ApiError):
    message = "Invalid JSON from Judge0"

    def __init__(self, raw: str):
        super().__init__(raw=raw)


class RunFailedError(ApiError):
    message = "Failed to run code"

    def __init__(self, details: str):
        super().__init__(details=details)
