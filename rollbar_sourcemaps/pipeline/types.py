"""Types for the pipeline module."""

from dataclasses import dataclass, field

from rollbar_sourcemaps.core.errors import UploadError
from rollbar_sourcemaps.upload.types import OutcomeStatus, UploadOutcome


@dataclass
class PipelineReport:
    """Per-file outcomes of one pipeline run, in discovery order.

    Skipped outcomes come from discovery warnings and are listed first.
    """

    outcomes: list[UploadOutcome] = field(default_factory=list)

    @property
    def uploaded(self) -> list[UploadOutcome]:
        return [o for o in self.outcomes if o.status == OutcomeStatus.SUCCESS]

    @property
    def skipped(self) -> list[UploadOutcome]:
        return [o for o in self.outcomes if o.status == OutcomeStatus.SKIPPED]

    @property
    def failed(self) -> list[UploadOutcome]:
        return [o for o in self.outcomes if o.status == OutcomeStatus.FAILED]

    @property
    def errors(self) -> list[UploadError]:
        return [o.error for o in self.failed if o.error is not None]

    @property
    def is_success(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {
            "outcomes": [o.to_dict() for o in self.outcomes],
            "uploaded_count": len(self.uploaded),
            "skipped_count": len(self.skipped),
            "failed_count": len(self.failed),
            "is_success": self.is_success,
        }
