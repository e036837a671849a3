"""Payload builder — turns a located sourcemap into an upload payload."""

from rollbar_sourcemaps.core.config import RunConfiguration
from rollbar_sourcemaps.discovery.types import SourcemapArtifact
from rollbar_sourcemaps.upload.types import UploadPayload


def build_payload(artifact: SourcemapArtifact, config: RunConfiguration) -> UploadPayload:
    """Pair an artifact with the run's credentials and public URL.

    No normalisation: a trailing slash on base_url and a leading slash on
    the original path both survive, matching what the browser reports.
    """
    return UploadPayload(
        access_token=config.access_token,
        version=config.version,
        minified_url=f"{config.base_url}{artifact.original_file_path}",
        source_map=artifact.content,
        source_map_filename=artifact.original_file_path,
    )
