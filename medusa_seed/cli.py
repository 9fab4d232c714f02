"""Command-line entry point.

Run as:
    python -m medusa_seed [--skip-existing]

Admin credentials come from MEDUSA_ADMIN_API_KEY, or MEDUSA_ADMIN_EMAIL and
MEDUSA_ADMIN_PASSWORD (environment variables or a .env file).
"""

import argparse
import asyncio
import logging
from collections.abc import Sequence

import httpx

from medusa_seed.client import open_admin_client
from medusa_seed.config import Settings, settings
from medusa_seed.errors import SeedError, SeedStepError
from medusa_seed.runner import SeedReport, run_seed
from medusa_seed.steps import SeedOptions

logger = logging.getLogger("medusa_seed")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="medusa-seed",
        description="Seed a Medusa backend with the Swiss Big Sack shop data.",
    )
    parser.add_argument("--backend-url", help="Admin API base URL (MEDUSA_BACKEND_URL)")
    parser.add_argument(
        "--skip-existing",
        action="store_true",
        default=None,
        help="Reuse records that already exist instead of creating duplicates",
    )
    parser.add_argument("--static-base-url", help="Base URL for product images")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings = settings) -> Settings:
    """Return *base* with any command-line overrides applied."""
    overrides = {
        "medusa_backend_url": args.backend_url,
        "seed_skip_existing": args.skip_existing,
        "static_base_url": args.static_base_url,
        "log_level": args.log_level,
    }
    return base.model_copy(update={k: v for k, v in overrides.items() if v is not None})


async def seed(
    run_settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
) -> SeedReport:
    async with open_admin_client(run_settings, transport=transport) as client:
        return await run_seed(client, SeedOptions.from_settings(run_settings))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    run_settings = settings_from_args(args)
    logging.basicConfig(
        level=run_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info(
        "%s %s -> %s",
        run_settings.app_name,
        run_settings.version,
        run_settings.medusa_backend_url,
    )
    try:
        report = asyncio.run(seed(run_settings))
    except SeedStepError as exc:
        logger.error("Seeding stopped at step %r: %s", exc.step, exc.cause, exc_info=exc.cause)
        return 1
    except SeedError as exc:
        logger.error("Seeding failed: %s", exc)
        return 1

    logger.info("Seed complete: %s", ", ".join(report.completed))
    return 0
