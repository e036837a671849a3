"""Upload build sourcemaps to Rollbar.

Public API:
    rollbar_sourcemaps(**options) -> RollbarSourcemapsPlugin
    run(config, strategy=None) -> PipelineReport
"""

from rollbar_sourcemaps.core.config import ROLLBAR_ENDPOINT, RunConfiguration
from rollbar_sourcemaps.core.errors import (
    PipelineFailure,
    RollbarSourcemapsError,
    TransportError,
    UploadError,
    UploadRejectedError,
)
from rollbar_sourcemaps.discovery import BuildOutputSet, ManifestStrategy, PatternStrategy
from rollbar_sourcemaps.pipeline import PipelineReport, run
from rollbar_sourcemaps.plugin import RollbarSourcemapsPlugin, rollbar_sourcemaps

__all__ = [
    "BuildOutputSet",
    "ManifestStrategy",
    "PatternStrategy",
    "PipelineFailure",
    "PipelineReport",
    "ROLLBAR_ENDPOINT",
    "RollbarSourcemapsError",
    "RollbarSourcemapsPlugin",
    "RunConfiguration",
    "TransportError",
    "UploadError",
    "UploadRejectedError",
    "rollbar_sourcemaps",
    "run",
]
