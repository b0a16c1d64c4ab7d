import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from dotenv import load_dotenv
from pydantic import ValidationError

from .core.config import ClientConfig
from .core.lifecycle import RequestLifecycle
from .core.types import Success
from .presentation.console import ConsoleRenderer
from .presentation.form import QueryForm

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ask the Second Brain answering service from the terminal")
    parser.add_argument("--query", default=None, help="Ask once and exit; omit to read questions from stdin")
    parser.add_argument("--base-url", default=None, help="Override SECOND_BRAIN_API_BASE_URL")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    return parser


def apply_cli_overrides(config: ClientConfig, args: argparse.Namespace) -> ClientConfig:
    overrides = {
        key: value
        for key, value in {
            "api_base_url": args.base_url,
            "request_timeout_seconds": args.timeout,
        }.items()
        if value is not None
    }
    return config.model_copy(update=overrides)


def run_interactive(form: QueryForm, stdin: TextIO) -> int:
    for line in stdin:
        form.text = line
        form.confirm()
    return 0


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None) -> int:
    load_dotenv()
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be > 0")

    try:
        config = apply_cli_overrides(ClientConfig.from_env(), args)
    except ValidationError as exc:
        print(f"config_error={exc}", file=sys.stderr)
        return 2

    config.export_tracing_env()
    logging.basicConfig(level=config.log_level, format="%(asctime)s [%(name)s] %(message)s", datefmt="%H:%M:%S")
    if not config.api_base_url.strip():
        logger.warning("SECOND_BRAIN_API_BASE_URL is not set; requests will fail to connect")

    lifecycle = RequestLifecycle(config)
    lifecycle.subscribe(ConsoleRenderer())
    form = QueryForm(lifecycle)

    if args.query is None:
        return run_interactive(form, stdin if stdin is not None else sys.stdin)

    form.text = args.query
    if not form.confirm():
        parser.error("--query must not be blank")
    return 0 if isinstance(lifecycle.state, Success) else 1


if __name__ == "__main__":
    raise SystemExit(main())
