"""Artifact locator — finds sourcemaps in a build output directory.

Two selection strategies:
1. PatternStrategy scans the output directory for *.map files and keeps
   only those whose compiled file still exists next to them.
2. ManifestStrategy trusts the bundler's list of emitted files and
   derives one map name per script, without checking the compiled file.

Either way each candidate's bytes are read once. Unreadable or empty
maps are dropped with a warning; discovery itself never fails the run.
"""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional, Protocol, Union

from rollbar_sourcemaps.discovery.types import (
    SCRIPT_EXTENSIONS,
    SOURCEMAP_SUFFIX,
    BuildOutputSet,
    DiscoveryResult,
    DiscoveryWarning,
    SourcemapArtifact,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """A sourcemap that a strategy selected, relative to the output dir."""

    sourcemap: str       # e.g. "assets/app.js.map"
    compiled_file: str   # e.g. "assets/app.js"


class SelectionStrategy(Protocol):
    """Chooses which sourcemaps in an output directory to upload."""

    def select(
        self, output_dir: Path,
    ) -> tuple[list[Candidate], list[DiscoveryWarning]]:
        """Return selected candidates and any candidates rejected on the way."""
        ...


class PatternStrategy:
    """Scan the output directory recursively for sourcemap files."""

    def select(
        self, output_dir: Path,
    ) -> tuple[list[Candidate], list[DiscoveryWarning]]:
        candidates: list[Candidate] = []
        warnings: list[DiscoveryWarning] = []

        if not output_dir.is_dir():
            logger.debug("Output directory %s does not exist", output_dir)
            return candidates, warnings

        for path in sorted(output_dir.rglob(f"*{SOURCEMAP_SUFFIX}")):
            rel = path.relative_to(output_dir)

            # Hidden files and directories are not part of the build output
            if any(part.startswith(".") for part in rel.parts):
                continue
            if not path.is_file():
                continue

            sourcemap = rel.as_posix()
            compiled_file = sourcemap[: -len(SOURCEMAP_SUFFIX)]

            if not (output_dir / compiled_file).exists():
                warnings.append(DiscoveryWarning(
                    path=sourcemap,
                    reason=f"No corresponding source found for '{sourcemap}'",
                ))
                continue

            candidates.append(Candidate(sourcemap=sourcemap, compiled_file=compiled_file))

        return candidates, warnings


class ManifestStrategy:
    """Derive sourcemap names from the bundler's list of emitted files.

    The manifest is authoritative, so compiled files are not checked on
    disk; only the map itself is read later.
    """

    def __init__(self, outputs: BuildOutputSet):
        self.outputs = outputs

    def select(
        self, output_dir: Path,
    ) -> tuple[list[Candidate], list[DiscoveryWarning]]:
        candidates = [
            Candidate(sourcemap=f"{name}{SOURCEMAP_SUFFIX}", compiled_file=name)
            for name in self.outputs.files
            if PurePosixPath(name).suffix in SCRIPT_EXTENSIONS
        ]
        return candidates, []


def discover(
    output_dir: Union[str, Path],
    strategy: SelectionStrategy,
    base: str = "/",
    *,
    log: Optional[logging.Logger] = None,
) -> DiscoveryResult:
    """Locate sourcemaps and read their contents.

    Every dropped candidate is logged on `log` and returned in
    `warnings`; the artifacts list only holds readable, non-empty maps.
    """
    log = log or logger
    root = Path(output_dir).resolve()

    candidates, warnings = strategy.select(root)
    artifacts: list[SourcemapArtifact] = []

    for candidate in candidates:
        location = root / candidate.sourcemap
        original_file_path = f"{base}{candidate.compiled_file}"

        try:
            content = location.read_bytes()
        except OSError as exc:
            warnings.append(DiscoveryWarning(
                path=str(location),
                reason=f"Error reading sourcemap file {location}: {exc}",
            ))
            continue

        if not content:
            warnings.append(DiscoveryWarning(
                path=str(location),
                reason=f"Sourcemap file {location} is empty",
            ))
            continue

        artifacts.append(SourcemapArtifact(
            sourcemap_path=location,
            original_file_path=original_file_path,
            content=content,
        ))

    for warning in warnings:
        log.warning("%s", warning)

    log.debug(
        "Located %d sourcemaps in %s (%d skipped)",
        len(artifacts), root, len(warnings),
    )
    return DiscoveryResult(artifacts=artifacts, warnings=warnings)


def locate(
    output_dir: Union[str, Path],
    strategy: SelectionStrategy,
    base: str = "/",
    *,
    log: Optional[logging.Logger] = None,
) -> list[SourcemapArtifact]:
    """Return only the uploadable artifacts; see `discover`."""
    return discover(output_dir, strategy, base, log=log).artifacts
