#!/usr/bin/env python3
"""Main entry point for the cron describer."""

import logging
import sys
from pathlib import Path
import uvicorn

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from config import settings
from models import DescriptionScope

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler(settings.log_file) if settings.log_file else logging.NullHandler()
    ]
)

logger = logging.getLogger(__name__)


def run_http_server():
    """Run the HTTP API server."""
    logger.info(f"Starting HTTP server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "api.http_server:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )


def print_description(args) -> int:
    """Print the description of a single expression."""
    from descriptor import CronExpressionError, describe

    options = settings.default_options()
    update = {}
    if args.verbose:
        update["verbose"] = True
    if args.twelve_hour:
        update["use_24_hour_format"] = False
    if args.alternate_dow:
        update["use_alternate_dow_dialect"] = True
    options = options.model_copy(update=update)

    try:
        print(describe(args.expression, options, DescriptionScope(args.scope)))
    except CronExpressionError as e:
        print(f"Invalid {e.field.label.lower()}: {e}", file=sys.stderr)
        return 2
    return 0


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Cron Describer")
    parser.add_argument(
        "--mode",
        choices=["http", "describe"],
        default="http",
        help="Run the HTTP server or describe one expression (default: http)"
    )
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"HTTP server host (default: {settings.api_host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"HTTP server port (default: {settings.api_port})"
    )
    parser.add_argument("--expression", help="Cron expression to describe")
    parser.add_argument(
        "--scope",
        choices=[scope.value for scope in DescriptionScope],
        default=DescriptionScope.FULL.value,
        help="Part of the expression to describe (default: full)"
    )
    parser.add_argument("--verbose", action="store_true", help="Keep every minute/hour/day phrases")
    parser.add_argument("--12-hour", dest="twelve_hour", action="store_true", help="Use AM/PM times")
    parser.add_argument("--alternate-dow", action="store_true", help="Treat 0 and 7 as Sunday")

    args = parser.parse_args()

    # Update settings if provided
    if args.host:
        settings.api_host = args.host
    if args.port:
        settings.api_port = args.port

    try:
        if args.mode == "describe":
            if not args.expression:
                parser.error("--expression is required in describe mode")
            sys.exit(print_description(args))
        run_http_server()
    except KeyboardInterrupt:
        logger.info("Shutting down cron describer...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
