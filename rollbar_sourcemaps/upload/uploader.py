"""Sourcemap uploader — POSTs one payload to the Rollbar sourcemap endpoint.

The upload flow:
1. POST the multipart form to the endpoint (single attempt, no retries)
2. Transport failures are re-raised as TransportError
3. Non-2xx responses are re-raised as UploadRejectedError, using the
   service's `message` field when the body carries one
"""

import logging
from typing import Optional

import httpx

from rollbar_sourcemaps.core.errors import TransportError, UploadRejectedError
from rollbar_sourcemaps.upload.types import UploadOutcome, UploadPayload

logger = logging.getLogger(__name__)


async def upload(
    client: httpx.AsyncClient,
    payload: UploadPayload,
    endpoint: str,
    *,
    silent: bool = False,
    log: Optional[logging.Logger] = None,
) -> UploadOutcome:
    """Upload a single sourcemap.

    Returns a success outcome, or raises:
        TransportError: the request never got a response (or the URL
            could not be parsed).
        UploadRejectedError: the endpoint answered with a non-2xx status.
    """
    log = log or logger
    filename = payload.source_map_filename
    data, files = payload.to_form()

    try:
        response = await client.post(endpoint, data=data, files=files)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise TransportError(filename, exc) from exc

    if not response.is_success:
        raise UploadRejectedError(
            filename,
            _error_detail(response),
            status_code=response.status_code,
        )

    if not silent:
        log.info("Uploaded %s to Rollbar", filename)

    return UploadOutcome.success(filename)


def _error_detail(response: httpx.Response) -> str:
    """Prefer Rollbar's own error message; fall back to the status line."""
    fallback = f"{response.status_code} - {response.reason_phrase}"
    try:
        body = response.json()
    except ValueError:
        return fallback

    if not isinstance(body, dict):
        return fallback
    message = body.get("message")
    if message is None:
        return fallback
    return str(message)
