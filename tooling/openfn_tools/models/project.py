"""
openfn-tools — Typed project.yaml model.

The wizard accumulates jobs, triggers and credentials into a ProjectDocument,
which is the only thing the assembly and serialization steps see.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

DEFAULT_ADAPTOR = "@openfn/language-http"
DEFAULT_CRON = "* * * * *"
DEFAULT_CRITERIA = '{"a": 1}'

TRIGGER_TYPES = ("cron", "message", "success", "failure")


class OutputMode(str, enum.Enum):
    MONOLITH = "monolith"
    URI = "uri"


class Job(BaseModel):
    expression: str = Field(min_length=1)
    adaptor: str = Field(default=DEFAULT_ADAPTOR, min_length=1)
    trigger: str = Field(min_length=1)
    credential: str = Field(min_length=1)


class CronTrigger(BaseModel):
    type: Literal["cron"] = "cron"
    cron: str | None = DEFAULT_CRON


class MessageTrigger(BaseModel):
    type: Literal["message"] = "message"
    criteria: str | None = DEFAULT_CRITERIA


class SuccessTrigger(BaseModel):
    type: Literal["success"] = "success"
    success: str | None = None


class FailureTrigger(BaseModel):
    type: Literal["failure"] = "failure"
    failure: str | None = None


Trigger = Annotated[
    Union[CronTrigger, MessageTrigger, SuccessTrigger, FailureTrigger],
    Field(discriminator="type"),
]

# type -> (variant, its one type-specific field)
TRIGGER_VARIANTS: dict[str, tuple[type[BaseModel], str]] = {
    "cron": (CronTrigger, "cron"),
    "message": (MessageTrigger, "criteria"),
    "success": (SuccessTrigger, "success"),
    "failure": (FailureTrigger, "failure"),
}


def trigger_from_answers(trigger_type: str, value: str | None) -> Trigger:
    """Build the variant for trigger_type; a blank value leaves its field out."""
    try:
        variant, field = TRIGGER_VARIANTS[trigger_type]
    except KeyError:
        raise ValueError(
            f"Unknown trigger type {trigger_type!r}; expected one of {', '.join(TRIGGER_TYPES)}"
        ) from None
    return variant(**{field: value or None})


class ProjectDocument(BaseModel):
    """
    Everything collected during one wizard session.

    Mappings keep insertion order, which is also the order they are written in.
    """

    jobs: dict[str, Job] = Field(default_factory=dict)
    triggers: dict[str, Trigger] = Field(default_factory=dict)
    credentials: dict[str, str] = Field(default_factory=dict)

    def names(self, kind: str) -> set[str]:
        return set(getattr(self, kind))

    def to_yaml_dict(self) -> dict[str, Any]:
        """Plain-dict form in the key order of the generated project.yaml."""
        return {
            "jobs": {name: job.model_dump() for name, job in self.jobs.items()},
            "credentials": dict(self.credentials),
            "triggers": {
                name: trigger.model_dump(exclude_none=True)
                for name, trigger in self.triggers.items()
            },
        }
