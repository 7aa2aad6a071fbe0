"""Command line entry point that serves the calculation API."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from thaitax.backend.app import create_app
from thaitax.backend.config.schedule import load_tax_schedule
from thaitax.backend.version import get_project_version

_LOGGER = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the ThaiTax calculation API.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Interface to bind")
    parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="Port to listen on"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Root logging level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging and block serving requests."""

    args = _build_argument_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    # Fail at startup rather than on the first request when the schedule is broken.
    schedule = load_tax_schedule()
    app = create_app()

    _LOGGER.info(
        "ThaiTax %s loaded %d tax brackets", get_project_version(), len(schedule.brackets)
    )
    _LOGGER.info("Server running at http://localhost:%d", args.port)
    app.run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
