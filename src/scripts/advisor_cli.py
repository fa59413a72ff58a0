from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from advisor.categories import get_category, list_categories
from advisor.errors import AdvisoryBackendError
from advisor.service import AdvisorService, describe_category
from api.config import load_config
from framework.llm.client import GeminiClient
from framework.llm.config import GeminiConfig
from framework.logging_utils import configure_logging


logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    app_config = load_config()
    parser = _build_parser(app_config.host, app_config.port, app_config.log_level)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.command == "categories":
        for category in list_categories():
            print(f"{category.id:<12} {describe_category(category)}")
        return 0

    try:
        gemini_config = GeminiConfig.from_env()
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "serve":
        return _serve(args.host, args.port, args.log_level)

    service = AdvisorService(GeminiClient(gemini_config))

    if args.command == "welcome":
        try:
            print(service.welcome())
        except Exception as exc:
            logger.error("Error generating welcome: %s", exc)
            return 1
        return 0

    if args.command == "advise":
        try:
            category = get_category(args.category)
        except KeyError as exc:
            parser.error(str(exc.args[0]))
        payload = _parse_payload(parser, args.data)
        try:
            request = category.request_model.model_validate(payload)
        except ValidationError as exc:
            parser.error(f"invalid {category.id} request: {exc}")

    try:
        response = service.advise(category.id, request)
    except AdvisoryBackendError as exc:
        logger.error("Error: %s", exc)
        return 1
    print(json.dumps(response.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return 0


def _build_parser(default_host: str, default_port: int, default_log_level: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Diabetes AI advisor.")
    parser.add_argument("--log-level", default=default_log_level, help="Logging level.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=default_host, help="Bind address.")
    serve.add_argument("--port", type=int, default=default_port, help="Bind port.")

    advise = subparsers.add_parser("advise", help="Run a single advisory request.")
    advise.add_argument(
        "category",
        help="Advisory category id: " + ", ".join(c.id for c in list_categories()),
    )
    advise.add_argument("--data", required=True, help="Request fields as a JSON object.")

    subparsers.add_parser("welcome", help="Print a generated welcome message.")
    subparsers.add_parser("categories", help="List advisory categories.")
    return parser


def _parse_payload(parser: argparse.ArgumentParser, raw: str) -> dict[str, Any]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        parser.error(f"--data is not valid JSON: {exc}")
    if not isinstance(payload, dict):
        parser.error("--data must be a JSON object.")
    return payload


def _serve(host: str, port: int, log_level: str) -> int:
    import uvicorn

    logger.info("Server: http://%s:%d", host, port)
    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=host,
        port=port,
        log_level=log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
