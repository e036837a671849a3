"""Exception taxonomy for sourcemap uploads.

Per-artifact failures (TransportError, UploadRejectedError) are raised by
the uploader and caught at the pipeline join. Only PipelineFailure is
meant to reach the caller, and only when upload errors are not ignored.
"""

from typing import Optional


class RollbarSourcemapsError(Exception):
    """Base class for every error raised by this package."""


class UploadError(RollbarSourcemapsError):
    """A single sourcemap could not be uploaded.

    Carries the uploaded file name and the resolved detail string so the
    pipeline can report each failure on its own line.
    """

    def __init__(self, filename: str, detail: str):
        self.filename = filename
        self.detail = detail
        super().__init__(f"Failed to upload {filename} to Rollbar: {detail}")


class TransportError(UploadError):
    """The endpoint could not be reached (connection, DNS, timeout, protocol)."""

    def __init__(self, filename: str, cause: Exception):
        self.cause = cause
        super().__init__(filename, str(cause) or type(cause).__name__)


class UploadRejectedError(UploadError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, filename: str, detail: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(filename, detail)


class PipelineFailure(RollbarSourcemapsError):
    """Raised when at least one upload failed and errors are not ignored.

    `errors` holds every per-artifact failure; the first one is the
    representative used for the message and the exception chain.
    """

    def __init__(self, errors: list[UploadError]):
        if not errors:
            raise ValueError("PipelineFailure requires at least one error")
        self.errors = list(errors)
        message = f"Uploading sourcemaps to Rollbar failed: {errors[0]}"
        if len(errors) > 1:
            message += f" (and {len(errors) - 1} more)"
        super().__init__(message)
