import argparse
import logging
import os
import sys
from typing import List, Optional

from .check import SmokeCheckError, check_endpoint, resolve_url

logger = logging.getLogger("smoke")


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m smoke",
        description="Check that the deployed web server answers with a successful HTTP status.",
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--url", default=os.getenv("WEB_URL"), help="Endpoint to check (default: $WEB_URL)")
    target.add_argument("--stack-name", help="Read the endpoint from this stack's WebServerUrl output")
    parser.add_argument("--attempts", type=positive_int, default=5)
    parser.add_argument("--delay", type=float, default=10.0, help="Seconds between attempts")
    parser.add_argument("--timeout", type=float, default=5.0, help="Seconds per request")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)
    try:
        url = resolve_url(args.stack_name) if args.stack_name else args.url
        if not url:
            raise SmokeCheckError("no endpoint given, use --url, --stack-name or WEB_URL")
        check_endpoint(url, attempts=args.attempts, delay=args.delay, timeout=args.timeout)
    except SmokeCheckError as e:
        logger.error("smoke check failed")
        logger.exception(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
