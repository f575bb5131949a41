from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import uvicorn

from vidresolve.infrastructure.config import load_config
from vidresolve.infrastructure.logging.setup import configure_logging
from vidresolve.interfaces.app import create_app

log = structlog.get_logger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

# argparse dest -> flat config key
_OVERRIDE_FLAGS: dict[str, str] = {
    "base_url": "site_base_url",
    "log_level": "log_level",
    "log_format": "log_format",
}


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vidresolve",
        description="Serve the video catalog and stream URL resolver API.",
    )

    server = parser.add_argument_group("server")
    server.add_argument("--host", help=f"Bind host (default: $HOST or {DEFAULT_HOST}).")
    server.add_argument(
        "--port", type=int, help=f"Bind port (default: $PORT or {DEFAULT_PORT})."
    )

    cfg = parser.add_argument_group("configuration")
    cfg.add_argument("--config", type=Path, help="YAML config file.")
    cfg.add_argument("--dotenv", type=Path, help=".env file with VIDRESOLVE_* vars.")
    cfg.add_argument("--base-url", help="Origin of the scraped site.")
    cfg.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    cfg.add_argument("--log-format", choices=["json", "console"])

    return parser.parse_args(list(argv) if argv is not None else None)


def build_cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Flat config overrides for every flag the user actually passed."""
    return {
        key: getattr(args, dest)
        for dest, key in _OVERRIDE_FLAGS.items()
        if getattr(args, dest)
    }


def start(argv: Iterable[str] | None = None) -> None:
    """
    Process entrypoint.

    Loads config exactly once, configures logging, then serves the app.
    """
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    host = args.host or os.getenv("HOST", DEFAULT_HOST)
    port = args.port or int(os.getenv("PORT", str(DEFAULT_PORT)))

    config = load_config(
        config_path=args.config,
        dotenv_path=args.dotenv,
        cli_overrides=build_cli_overrides(args),
    )
    configure_logging(config)
    log.info("server_starting", host=host, port=port, base_url=config.site_base_url)

    # uvicorn must not re-run dictConfig over the queue handler.
    uvicorn.run(create_app(config), host=host, port=port, log_config=None)


if __name__ == "__main__":
    raise SystemExit(start())
