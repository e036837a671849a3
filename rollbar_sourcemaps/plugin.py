"""Post-write build hook.

Wraps the pipeline behind the hook shape bundlers call once the output
has been written to disk:

    plugin = rollbar_sourcemaps(access_token=..., version=..., base_url=...)
    await plugin.write_bundle(output_options, bundle)

When the bundler passes its bundle manifest, the emitted file list is
trusted (ManifestStrategy). Without one the output directory is scanned
(PatternStrategy).
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

import httpx

from rollbar_sourcemaps.core.config import RunConfiguration
from rollbar_sourcemaps.discovery import (
    BuildOutputSet,
    ManifestStrategy,
    PatternStrategy,
    SelectionStrategy,
)
from rollbar_sourcemaps.pipeline import run

PLUGIN_NAME = "rollbar-sourcemaps"


class RollbarSourcemapsPlugin:
    """Build hook uploading sourcemaps after the bundle is written."""

    name = PLUGIN_NAME

    def __init__(
        self,
        config: RunConfiguration,
        *,
        client: Optional[httpx.AsyncClient] = None,
        log: Optional[logging.Logger] = None,
    ):
        self.config = config
        self._client = client
        self._log = log

    async def write_bundle(
        self,
        output_options: Optional[Mapping[str, Any]] = None,
        bundle: Optional[Union[Mapping[str, Any], Iterable[str]]] = None,
    ) -> None:
        """Run the upload pipeline; raises PipelineFailure in strict mode."""
        strategy: SelectionStrategy
        if bundle is not None:
            strategy = ManifestStrategy(BuildOutputSet.from_bundle(bundle))
        else:
            strategy = PatternStrategy()

        await run(self.config, strategy, client=self._client, log=self._log)


def rollbar_sourcemaps(
    *,
    client: Optional[httpx.AsyncClient] = None,
    log: Optional[logging.Logger] = None,
    **options: Any,
) -> RollbarSourcemapsPlugin:
    """Create the build hook from keyword options.

    Unknown or misspelled options raise pydantic.ValidationError.
    """
    return RollbarSourcemapsPlugin(RunConfiguration(**options), client=client, log=log)
