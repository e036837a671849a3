"""Types for the upload module."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional

from rollbar_sourcemaps.core.errors import UploadError

# Content type sent with the source_map file part.
SOURCEMAP_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class UploadPayload:
    """Wire-ready fields for one sourcemap upload.

    minified_url is base_url + original file path, concatenated as-is.
    source_map_filename is the original file path; Rollbar shows it as
    the uploaded file's name.
    """

    access_token: str = field(repr=False)
    version: str
    minified_url: str
    source_map: bytes = field(repr=False)
    source_map_filename: str

    def to_form(self) -> tuple[dict[str, str], dict[str, tuple[str, bytes, str]]]:
        """Return the (data, files) pair httpx encodes as multipart/form-data."""
        data = {
            "access_token": self.access_token,
            "version": self.version,
            "minified_url": self.minified_url,
        }
        files = {
            "source_map": (
                self.source_map_filename,
                self.source_map,
                SOURCEMAP_CONTENT_TYPE,
            ),
        }
        return data, files


class OutcomeStatus(StrEnum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadOutcome:
    """Result of processing one sourcemap.

    Exactly one of `reason` (skipped) or `error` (failed) is set for the
    non-success statuses.
    """

    status: OutcomeStatus
    filename: str
    reason: Optional[str] = None
    error: Optional[UploadError] = None

    @classmethod
    def success(cls, filename: str) -> "UploadOutcome":
        return cls(status=OutcomeStatus.SUCCESS, filename=filename)

    @classmethod
    def skipped(cls, filename: str, reason: str) -> "UploadOutcome":
        return cls(status=OutcomeStatus.SKIPPED, filename=filename, reason=reason)

    @classmethod
    def failed(cls, error: UploadError) -> "UploadOutcome":
        return cls(status=OutcomeStatus.FAILED, filename=error.filename, error=error)

    @property
    def is_success(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS

    def to_dict(self) -> dict:
        return {
            "status": str(self.status),
            "filename": self.filename,
            "reason": self.reason,
            "error": str(self.error) if self.error else None,
        }
