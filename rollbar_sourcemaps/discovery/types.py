"""Types for the discovery module.

A SourcemapArtifact is one map file that is ready to upload: its bytes
have been read and it is paired with the original file path Rollbar
will match stack frames against.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping, Union

# Suffix appended to a compiled file's name to get its sourcemap.
SOURCEMAP_SUFFIX = ".map"

# Compiled outputs that are expected to carry a sourcemap.
SCRIPT_EXTENSIONS = {".js", ".mjs", ".cjs"}


@dataclass(frozen=True)
class SourcemapArtifact:
    """A located sourcemap and its source identifier.

    sourcemap_path: absolute path of the .map file.
    original_file_path: base prefix + compiled file path relative to the
        output directory, POSIX separators (e.g. "/assets/app.js").
    content: raw bytes of the map file, never empty.
    """

    sourcemap_path: Path
    original_file_path: str
    content: bytes = field(repr=False)


@dataclass(frozen=True)
class DiscoveryWarning:
    """A candidate sourcemap that was dropped during discovery."""

    path: str
    reason: str

    def __str__(self) -> str:
        return self.reason


@dataclass(frozen=True)
class BuildOutputSet:
    """Snapshot of the file names a bundler reports it emitted.

    Names are relative to the output directory, POSIX separators.
    """

    files: tuple[str, ...]

    @classmethod
    def from_bundle(
        cls, bundle: Union[Mapping[str, object], Iterable[str]],
    ) -> "BuildOutputSet":
        """Build from a bundle mapping (keys are file names) or any iterable.

        A bare string is rejected rather than split into characters.
        """
        if isinstance(bundle, (str, bytes)):
            raise TypeError(
                f"bundle must be a mapping or an iterable of file names, not {type(bundle).__name__}"
            )
        if isinstance(bundle, Mapping):
            names = bundle.keys()
        else:
            names = bundle
        return cls(files=tuple(str(name) for name in names))


@dataclass
class DiscoveryResult:
    """Everything discovery produced: uploadable artifacts and dropped candidates."""

    artifacts: list[SourcemapArtifact] = field(default_factory=list)
    warnings: list[DiscoveryWarning] = field(default_factory=list)
