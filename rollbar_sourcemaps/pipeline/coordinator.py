"""Pipeline coordinator — discovers sourcemaps and uploads them concurrently.

This is the public entry point for a run. It:
1. Locates sourcemaps in the output directory (once)
2. Builds one payload per sourcemap
3. Uploads every payload concurrently and waits for all of them
4. Applies the failure policy: log-and-continue when upload errors are
   ignored, otherwise raise PipelineFailure

Uploads are always joined before the run returns; a run never reports
success while uploads are still in flight.
"""

import asyncio
import logging
import time
from typing import Optional

import httpx

from rollbar_sourcemaps.core.config import RunConfiguration
from rollbar_sourcemaps.core.errors import PipelineFailure, UploadError
from rollbar_sourcemaps.discovery import PatternStrategy, SelectionStrategy, discover
from rollbar_sourcemaps.pipeline.types import PipelineReport
from rollbar_sourcemaps.upload import UploadOutcome, UploadPayload, build_payload, upload

logger = logging.getLogger(__name__)


async def run(
    config: RunConfiguration,
    strategy: Optional[SelectionStrategy] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    log: Optional[logging.Logger] = None,
) -> PipelineReport:
    """Upload every sourcemap under config.output_dir to Rollbar.

    Args:
        config: Run options; shared read-only by all uploads.
        strategy: How sourcemaps are selected. Defaults to scanning the
            output directory (PatternStrategy).
        client: Optional pre-configured HTTP client. When omitted a client
            is created for the run, using config.request_timeout.
        log: Logger receiving notices and diagnostics.

    Returns:
        PipelineReport with one outcome per candidate sourcemap.

    Raises:
        PipelineFailure: an upload failed and config.ignore_upload_errors
            is False.
    """
    log = log or logger
    start = time.monotonic()

    discovery = discover(
        config.output_dir,
        strategy or PatternStrategy(),
        config.base,
        log=log,
    )
    report = PipelineReport(outcomes=[
        UploadOutcome.skipped(w.path, w.reason) for w in discovery.warnings
    ])

    if not discovery.artifacts:
        return report

    payloads = [build_payload(artifact, config) for artifact in discovery.artifacts]

    if client is not None:
        outcomes = await _upload_all(client, payloads, config, log)
    else:
        async with httpx.AsyncClient(timeout=config.request_timeout) as owned_client:
            outcomes = await _upload_all(owned_client, payloads, config, log)

    report.outcomes.extend(outcomes)

    if not config.silent:
        log.info(
            "Uploaded %d/%d sourcemaps in %.2fs",
            len(report.uploaded), len(payloads), time.monotonic() - start,
        )

    errors = report.errors
    if not errors:
        return report

    if config.ignore_upload_errors:
        log.error(
            "Uploading sourcemaps to Rollbar failed:\n%s",
            "\n".join(f"  {error}" for error in errors),
        )
        return report

    raise PipelineFailure(errors) from errors[0]


async def _upload_all(
    client: httpx.AsyncClient,
    payloads: list[UploadPayload],
    config: RunConfiguration,
    log: logging.Logger,
) -> list[UploadOutcome]:
    """Dispatch every upload at once and wait for all of them to settle."""
    tasks = [
        upload(
            client,
            payload,
            config.rollbar_endpoint,
            silent=config.silent,
            log=log,
        )
        for payload in payloads
    ]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    outcomes: list[UploadOutcome] = []
    for result in results:
        if isinstance(result, UploadError):
            outcomes.append(UploadOutcome.failed(result))
        elif isinstance(result, BaseException):
            # Anything other than an upload failure is a bug; surface it
            raise result
        else:
            outcomes.append(result)
    return outcomes
