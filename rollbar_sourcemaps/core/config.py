"""Run configuration for a sourcemap upload.

Options can be passed as keyword arguments or picked up from ROLLBAR_*
environment variables (keyword arguments win). The model is frozen and
rejects unknown options, so a misspelled option such as `acess_token`
fails at construction instead of being silently ignored.
"""

from pathlib import Path

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ROLLBAR_ENDPOINT = "https://api.rollbar.com/api/1/sourcemap"


class RunConfiguration(BaseSettings):
    """Immutable, caller-supplied options for one pipeline run.

    base_url:  public URL prefix the minified assets are served from.
    base:      path prefix prepended to every original file path.
    output_dir: root of the build output to scan.
    ignore_upload_errors: when True, failed uploads are logged and the run
        still succeeds; when False the run raises PipelineFailure.
    request_timeout: seconds, handed to the HTTP transport only.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROLLBAR_",
        case_sensitive=False,
        extra="forbid",
        frozen=True,
    )

    # Rollbar credentials and release tagging
    access_token: str = Field(min_length=1)
    version: str = Field(min_length=1)
    base_url: str = Field(min_length=1)

    silent: bool = False
    rollbar_endpoint: str = ROLLBAR_ENDPOINT

    # Build output layout
    base: str = "/"
    output_dir: Path = Path("dist")

    ignore_upload_errors: bool = True

    # Transport configuration for the client the pipeline creates.
    request_timeout: float = Field(default=30.0, gt=0)

    @field_validator("rollbar_endpoint")
    @classmethod
    def endpoint_must_be_http(cls, v: str) -> str:
        try:
            url = httpx.URL(v)
        except httpx.InvalidURL as exc:
            raise ValueError(f"rollbar_endpoint is not a valid URL: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"rollbar_endpoint must be an http(s) URL with a host, got {v!r}")
        return v
