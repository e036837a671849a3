"""Discovery module for locating sourcemaps in build output.

Public API:
    discover(output_dir, strategy, base) -> DiscoveryResult
    locate(output_dir, strategy, base) -> list[SourcemapArtifact]
"""

from rollbar_sourcemaps.discovery.locator import (
    ManifestStrategy,
    PatternStrategy,
    SelectionStrategy,
    discover,
    locate,
)
from rollbar_sourcemaps.discovery.types import (
    BuildOutputSet,
    DiscoveryResult,
    DiscoveryWarning,
    SourcemapArtifact,
)

__all__ = [
    "BuildOutputSet",
    "DiscoveryResult",
    "DiscoveryWarning",
    "ManifestStrategy",
    "PatternStrategy",
    "SelectionStrategy",
    "SourcemapArtifact",
    "discover",
    "locate",
]
