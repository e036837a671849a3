"""Tests for the post-write build hook."""

import httpx
import pytest
from pydantic import ValidationError

from rollbar_sourcemaps import PipelineFailure, RollbarSourcemapsPlugin, rollbar_sourcemaps
from tests.conftest import ACCESS_TOKEN, BASE_URL, SOURCEMAP, VERSION, RecordingTransport, rejected, write_build


def _plugin(dist, transport, **options) -> RollbarSourcemapsPlugin:
    return rollbar_sourcemaps(
        client=httpx.AsyncClient(transport=transport),
        access_token=ACCESS_TOKEN,
        version=VERSION,
        base_url=BASE_URL,
        output_dir=dist,
        **options,
    )


class TestFactory:
    def test_name(self, dist, ok_transport):
        assert _plugin(dist, ok_transport).name == "rollbar-sourcemaps"

    def test_rejects_misspelled_option(self, dist, ok_transport):
        with pytest.raises(ValidationError):
            _plugin(dist, ok_transport, ignore_upload_error=False)

    def test_rejects_malformed_endpoint(self, dist, ok_transport):
        with pytest.raises(ValidationError):
            _plugin(dist, ok_transport, rollbar_endpoint="https://[::1/api")

    def test_options_reach_config(self, dist, ok_transport):
        plugin = _plugin(dist, ok_transport, silent=True, base="/static/")
        assert plugin.config.silent is True
        assert plugin.config.base == "/static/"


class TestWriteBundle:
    @pytest.mark.asyncio
    async def test_scans_output_dir_without_bundle(self, dist, ok_transport):
        write_build(dist, "app.js")
        (dist / "orphan.js.map").write_bytes(SOURCEMAP)

        result = await _plugin(dist, ok_transport).write_bundle({"dir": str(dist)})

        assert result is None
        assert len(ok_transport.requests) == 1

    @pytest.mark.asyncio
    async def test_uses_bundle_manifest(self, dist, ok_transport):
        # Compiled file absent on disk: the manifest is trusted
        (dist / "entry.js.map").write_bytes(SOURCEMAP)
        (dist / "unlisted.js.map").write_bytes(SOURCEMAP)
        (dist / "unlisted.js").write_text("x")

        await _plugin(dist, ok_transport).write_bundle({}, {"entry.js": {}, "entry.css": {}})

        assert len(ok_transport.requests) == 1
        assert b'filename="/entry.js"' in ok_transport.requests[0].content

    @pytest.mark.asyncio
    async def test_strict_failure_fails_the_hook(self, dist):
        write_build(dist, "app.js")
        plugin = _plugin(dist, RecordingTransport(rejected(500)), ignore_upload_errors=False)

        with pytest.raises(PipelineFailure):
            await plugin.write_bundle()

    @pytest.mark.asyncio
    async def test_tolerant_failure_does_not_fail_the_hook(self, dist):
        write_build(dist, "app.js")
        plugin = _plugin(dist, RecordingTransport(rejected(500)))

        await plugin.write_bundle()
