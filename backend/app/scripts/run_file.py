import argparse, asyncio, logging, sys
from pathlib import Path
import httpx
from app.client.editor import EditorSession, describe_lines
from app.core.config import get_settings
from app.core.languages import DEFAULT_LANGUAGE, LANGUAGES
from app.core.logging import setup_logging

log = logging.getLogger("run_file")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Run a source file through the CodeCook run-code proxy"
    )
    parser.add_argument("source", type=Path, help="Source file to run")
    parser.add_argument(
        "-l",
        "--language",
        choices=sorted(LANGUAGES),
        default=DEFAULT_LANGUAGE,
        help="Language of the source file",
    )
    parser.add_argument("-i", "--stdin", type=Path, help="File fed to the program's stdin")
    parser.add_argument("--url", default=settings.PROXY_URL, help="run-code endpoint")
    return parser


async def run(session: EditorSession) -> None:
    async with httpx.AsyncClient(timeout=None) as http:
        await session.run(http)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(get_settings().LOG_LEVEL)

    session = EditorSession(args.url)
    session.select_language(args.language)
    session.code = args.source.read_text(encoding="utf-8")
    if args.stdin:
        session.stdin = args.stdin.read_text(encoding="utf-8")

    log.debug("submitting %s (%s) to %s", args.source, args.language, args.url)
    asyncio.run(run(session))

    if session.output:
        sys.stdout.write(session.output)
        if not session.output.endswith("\n"):
            sys.stdout.write("\n")
    if session.error_output:
        sys.stderr.write(session.error_output)
        if not session.error_output.endswith("\n"):
            sys.stderr.write("\n")
    summary = session.status_label
    lines = describe_lines(session.output)
    if lines:
        summary += f" ({lines})"
    print(summary, file=sys.stderr)
    return 1 if session.status_tone == "error" else 0


if __name__ == "__main__":
    sys.exit(main())
