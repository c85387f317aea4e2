"""
Command-line interface for the Tailwind UI crawler.

Provides argument parsing, credential loading and the exit-code mapping
for every failure the crawler can report.
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

from playwright.async_api import Error as PlaywrightError

from tailwindui_crawler.auth.password import mask_password
from tailwindui_crawler.config import (
    DEFAULT_OUTPUT,
    ELEMENT_WAIT_TIMEOUT_MS,
    EMAIL_ENV,
    HEADLESS,
    PASSWORD_ENV,
    SELECTOR_TIMEOUT_MS,
    SLOW_MO_MS,
    WAIT_TIMEOUT_ENV,
)
from tailwindui_crawler.crawler import Crawler
from tailwindui_crawler.errors import AuthError, ConfigError, EnumerationError, ExtractionError
from tailwindui_crawler.logging_setup import log, setup_logging
from tailwindui_crawler.models import Variant

USAGE_EXAMPLE = (
    f"example: {EMAIL_ENV}=me@example.com {PASSWORD_ENV}=secret "
    "tailwindui-crawler react"
)


def load_credentials(environ=None) -> tuple[str, str]:
    """
    Return ``(email, password)`` from the environment.

    Raises ConfigError when either value is missing or blank.
    """
    environ = os.environ if environ is None else environ
    email = environ.get(EMAIL_ENV, "").strip()
    password = environ.get(PASSWORD_ENV, "").strip()
    if not email or not password:
        raise ConfigError(
            f"please provide the email and password of your Tailwind UI account "
            f"as {EMAIL_ENV} / {PASSWORD_ENV} environment variables"
        )
    return email, password


def load_wait_timeout(environ=None) -> int:
    """
    Return the element wait timeout in milliseconds (0 = unbounded).

    Raises ConfigError when the override is not a non-negative integer.
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(WAIT_TIMEOUT_ENV, "").strip()
    if not raw:
        return ELEMENT_WAIT_TIMEOUT_MS
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        raise ConfigError(
            f"{WAIT_TIMEOUT_ENV} must be a non-negative number of milliseconds, got {raw!r}"
        )
    return value


def parse_args(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="tailwindui-crawler",
        description="Tailwind UI crawler – logs in, walks every catalog "
                    "section and saves the component code as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Credentials are read from the {EMAIL_ENV} and {PASSWORD_ENV}\n"
            "environment variables.\n"
            f"{USAGE_EXAMPLE}"
        ),
    )
    parser.add_argument(
        "variant", nargs="?", choices=Variant.choices(),
        help="Code variant to extract",
    )
    parser.add_argument(
        "--output", default=DEFAULT_OUTPUT,
        help=f"Output directory (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--headed", dest="headless", action="store_false", default=HEADLESS,
        help="Show the browser window instead of running headless",
    )
    parser.add_argument(
        "--slow-mo", type=int, default=SLOW_MO_MS, metavar="MS",
        help="Slow every browser operation down by MS milliseconds",
    )
    parser.add_argument(
        "--selector-timeout", type=float, default=SELECTOR_TIMEOUT_MS / 1000,
        metavar="SECONDS",
        help="How long to wait for a section's variant selector before "
             "treating the section as inaccessible (default: %(default)s)",
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Fail the section (and the run) when a component has no code "
             "toggle or no code block, instead of skipping the component",
    )
    parser.add_argument(
        "--no-progress", dest="progress", action="store_false", default=True,
        help="Disable the progress bar",
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Also write DEBUG-level logs to this file",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """
    Main entry point for the crawler CLI.
    """
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    try:
        email, password = load_credentials()
        wait_timeout_ms = load_wait_timeout()
    except ConfigError as exc:
        log.error("%s", exc)
        log.error(USAGE_EXAMPLE)
        sys.exit(1)

    # A missing variant is a usage question, not a failure.
    if not args.variant:
        log.error("please specify component type (%s).", "/".join(Variant.choices()))
        log.error(USAGE_EXAMPLE)
        sys.exit(0)

    crawler = Crawler(
        email=email,
        password=password,
        variant=Variant(args.variant),
        output_dir=Path(args.output),
        headless=args.headless,
        slow_mo=args.slow_mo,
        skip_missing_toggle=not args.strict,
        skip_missing_codeblock=not args.strict,
        selector_timeout_ms=int(args.selector_timeout * 1000),
        wait_timeout_ms=wait_timeout_ms,
        progress=args.progress,
    )

    try:
        asyncio.run(crawler.run())
    except AuthError as exc:
        log.error(
            "Login failed: %s (email: %s, password: %s)",
            exc, email, mask_password(password),
        )
        sys.exit(1)
    except EnumerationError as exc:
        log.error("Fetching sections failed: %s", exc)
        sys.exit(1)
    except ExtractionError:
        # Already reported and written as incomplete output by the crawler.
        sys.exit(1)
    except PlaywrightError as exc:
        log.error("Browser error: %s", exc)
        sys.exit(1)
    except OSError as exc:
        log.error("Writing output to %s failed: %s", Path(args.output).resolve(), exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
