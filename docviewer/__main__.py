#!/usr/bin/env python3
"""Docviewer launcher.

Usage:
    python -m docviewer [--port 8080] [--static ./frontend/build] [--root .]
                        [--readonly | --no-readonly] [--log-level INFO]
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

import uvicorn
from loguru import logger
from pydantic import ValidationError

from docviewer.core.config import Settings
from docviewer.core.logging import configure_logging
from docviewer.main import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docviewer",
        description="Serve a directory tree of Markdown and JSON documents",
    )
    parser.add_argument("--host", help="Interface to bind")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--static", dest="static_dir", help="Directory containing static files")
    parser.add_argument("--root", dest="root_directory", help="Root of the document tree")
    parser.add_argument(
        "--readonly",
        dest="read_only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run in read-only mode",
    )
    parser.add_argument("--log-level", dest="log_level", help="Console log level")
    parser.add_argument("--log-file", dest="log_file", help="Rotating debug log file")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Build settings from the environment, overridden by given flags."""
    overrides: Dict[str, Any] = {
        key: value for key, value in vars(args).items() if value is not None
    }
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    configure_logging(settings.log_level, settings.log_file)
    logger.info(f"Server running on http://localhost:{settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
