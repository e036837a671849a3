"""Pipeline module tying discovery and upload together.

Public API:
    run(config, strategy=None) -> PipelineReport
"""

from rollbar_sourcemaps.pipeline.coordinator import run
from rollbar_sourcemaps.pipeline.types import PipelineReport

__all__ = ["PipelineReport", "run"]
