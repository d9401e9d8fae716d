"""
Development server entry point.

Usage:
    python -m qa_service
    python -m qa_service --host 0.0.0.0 --port 8000 --log-level DEBUG
"""

import argparse
import logging

import uvicorn

from qa_service.core.config import settings
from qa_service.main import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="QA Service HTTP server")
    parser.add_argument(
        "--host", default=settings.host,
        help=f"Interface to bind (default {settings.host})",
    )
    parser.add_argument(
        "--port", type=int, default=settings.port,
        help=f"Port to listen on (default {settings.port})",
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, dest="log_level",
        help=f"Logging level (default {settings.log_level})",
    )
    return parser


def main() -> None:
    args = build_parser().parse_args()
    app = create_app(settings.model_copy(update={"log_level": args.log_level}))
    logger.info("Serving on http://%s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
