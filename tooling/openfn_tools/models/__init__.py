"""openfn-tools data models — typed contracts for both command-line tools."""

from openfn_tools.models.project import (
    OutputMode,
    Job,
    CronTrigger,
    MessageTrigger,
    SuccessTrigger,
    FailureTrigger,
    Trigger,
    ProjectDocument,
    trigger_from_answers,
)
from openfn_tools.models.release import (
    ReleaseTarget,
    ReleaseAsset,
    RemoteRelease,
)
from openfn_tools.models.upload import (
    UploadState,
    UploadOutcome,
    StepTiming,
    UploadResult,
)

__all__ = [
    "OutputMode",
    "Job",
    "CronTrigger",
    "MessageTrigger",
    "SuccessTrigger",
    "FailureTrigger",
    "Trigger",
    "ProjectDocument",
    "trigger_from_answers",
    "ReleaseTarget",
    "ReleaseAsset",
    "RemoteRelease",
    "UploadState",
    "UploadOutcome",
    "StepTiming",
    "UploadResult",
]
