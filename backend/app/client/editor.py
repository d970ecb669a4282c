import enum
import httpx
from app.core.languages import DEFAULT_LANGUAGE, LANGUAGES


class RunState(str, enum.Enum):
    idle = "idle"
    running = "running"
    done = "done"
    error = "error"


def line_count(text: str) -> int:
    if not text:
        return 0
    return len(text.strip().split("\n"))


def describe_lines(text: str) -> str:
    n = line_count(text)
    if not n:
        return ""
    return f"{n} line" + ("s" if n > 1 else "")


def format_status(data: dict) -> str:
    status = data.get("status")
    description = status.get("description") if isinstance(status, dict) else None
    if not description:
        return "Done"
    return f"{description} • {data.get('time')}s • {data.get('memory')} KB"


class EditorSession:
    """Editor state for one user: source, stdin and the last run's panels.

    `run` posts the current buffer to the run-code proxy. Only one run may be
    in flight; a second call while one is pending is ignored.
    """

    def __init__(self, proxy_url: str, language: str = DEFAULT_LANGUAGE):
        if language not in LANGUAGES:
            raise ValueError(f"unsupported language: {language}")
        self.proxy_url = proxy_url
        self.language = language
        self.code = LANGUAGES[language].template
        self.stdin = ""
        self.output = ""
        self.error_output = ""
        self.status_text = ""
        self.is_running = False
        self.state = RunState.idle

    def select_language(self, language: str):
        if language not in LANGUAGES:
            raise ValueError(f"unsupported language: {language}")
        self.language = language
        self.code = LANGUAGES[language].template

    @property
    def status_label(self) -> str:
        return self.status_text or "Idle"

    @property
    def status_tone(self) -> str:
        if self.status_text.startswith("Error"):
            return "error"
        if self.status_text.startswith(("Accepted", "Done")):
            return "success"
        return "neutral"

    def _fail(self, message: str):
        self.status_text = "Error"
        self.error_output = message
        self.state = RunState.error

    async def run(self, http: httpx.AsyncClient) -> bool:
        """Returns False when a run was already in flight."""
        if self.is_running:
            return False
        try:
            self.is_running = True
            self.state = RunState.running
            self.output = ""
            self.error_output = ""
            self.status_text = "Running..."

            res = await http.post(
                self.proxy_url,
                json={
                    "language": self.language,
                    "sourceCode": self.code,
                    "stdin": self.stdin,
                },
            )
            data = res.json()

            if not res.is_success:
                self._fail(data.get("error") or "Unknown error")
                return True

            self.output = data.get("stdout") or ""
            self.error_output = data.get("stderr") or ""
            self.status_text = format_status(data)
            self.state = RunState.done
        except Exception as e:
            self._fail(str(e) or "Something went wrong")
        finally:
            self.is_running = False
        return True
