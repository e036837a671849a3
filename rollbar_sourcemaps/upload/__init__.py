"""Upload module for building and sending sourcemap payloads.

Public API:
    build_payload(artifact, config) -> UploadPayload
    upload(client, payload, endpoint) -> UploadOutcome
"""

from rollbar_sourcemaps.upload.payload import build_payload
from rollbar_sourcemaps.upload.types import OutcomeStatus, UploadOutcome, UploadPayload
from rollbar_sourcemaps.upload.uploader import upload

__all__ = [
    "OutcomeStatus",
    "UploadOutcome",
    "UploadPayload",
    "build_payload",
    "upload",
]
