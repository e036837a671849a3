"""Console entry point: upload sourcemaps configured through ROLLBAR_* env vars.

    ROLLBAR_ACCESS_TOKEN=... ROLLBAR_VERSION=$GIT_SHA \
    ROLLBAR_BASE_URL=https://cdn.example.com rollbar-sourcemaps

Exit codes: 0 success, 1 upload failure (strict mode), 2 bad configuration.
"""

import asyncio
import sys

import structlog
from pydantic import ValidationError

from rollbar_sourcemaps.core.config import RunConfiguration
from rollbar_sourcemaps.core.errors import PipelineFailure
from rollbar_sourcemaps.core.logging import configure_logging
from rollbar_sourcemaps.pipeline import run

logger = structlog.get_logger("rollbar_sourcemaps")


def main() -> int:
    configure_logging(debug=sys.stdout.isatty())

    try:
        config = RunConfiguration()
    except ValidationError as exc:
        logger.error("Invalid configuration", errors=exc.errors(include_url=False, include_context=False))
        return 2

    try:
        asyncio.run(run(config))
    except PipelineFailure as exc:
        logger.error("Sourcemap upload failed", error=str(exc), failed=len(exc.errors))
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
