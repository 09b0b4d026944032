"""
openfn-tools — Collection loops for triggers, credentials and jobs.

Each loop takes the ProjectDocument built so far, adds one entity per pass
until the user declines another, and hands the document back.
"""

from __future__ import annotations

import re

from openfn_tools.models.project import (
    DEFAULT_ADAPTOR,
    DEFAULT_CRITERIA,
    DEFAULT_CRON,
    TRIGGER_TYPES,
    Job,
    ProjectDocument,
    trigger_from_answers,
)
from openfn_tools.projectgen.prompts import Prompter

_WHITESPACE = re.compile(r"\s+")

# type -> (label, default) for the single follow-up question of each trigger type
_TRIGGER_FIELD_PROMPTS: dict[str, tuple[str, str | None]] = {
    "cron": ("Trigger cron", DEFAULT_CRON),
    "message": ("Message criteria", DEFAULT_CRITERIA),
    "success": ("Triggering job (on success)", None),
    "failure": ("Triggering job (on failure)", None),
}


def safe_name(value: str) -> str:
    return _WHITESPACE.sub("-", value.strip())


def default_name(kind: str, taken: set[str]) -> str:
    n = len(taken) + 1
    while f"{kind.lower()}-{n}" in taken:
        n += 1
    return f"{kind.lower()}-{n}"


def ask_name(prompter: Prompter, kind: str, taken: set[str]) -> str:
    """Ask for a unique, whitespace-free name for a new `kind`."""
    while True:
        value = prompter.ask(f"{kind} name", default=default_name(kind, taken))
        name = safe_name(value)
        if name != value:
            prompter.say(
                f'We are replacing spaces with hyphens. The new name will be "{name}".'
            )
        if name in taken:
            prompter.say(
                f"{kind} names must be unique; please try something else.", style="red"
            )
            continue
        return name


def _another(prompter: Prompter, thing: str) -> bool:
    return prompter.confirm(f"Would you like to add another {thing}? (y/n)")


def collect_triggers(document: ProjectDocument, prompter: Prompter) -> ProjectDocument:
    while True:
        name = ask_name(prompter, "Trigger", document.names("triggers"))
        trigger_type = prompter.ask(
            "Trigger type",
            default="cron",
            choices=TRIGGER_TYPES,
            message='please enter "cron", "message", "success", or "failure"',
        )
        label, default = _TRIGGER_FIELD_PROMPTS[trigger_type]
        value = prompter.ask(label, default=default, required=False)
        document.triggers[name] = trigger_from_answers(trigger_type, value)

        if not _another(prompter, "trigger"):
            break
    prompter.say("OK. Triggers written.")
    return document


def collect_credentials(document: ProjectDocument, prompter: Prompter) -> ProjectDocument:
    while True:
        name = ask_name(prompter, "Credential", document.names("credentials"))
        document.credentials[name] = prompter.ask("Path to credential.json")

        if not _another(prompter, "credential"):
            break
    prompter.say("OK. Credentials written.")
    return document


def collect_jobs(document: ProjectDocument, prompter: Prompter) -> ProjectDocument:
    while True:
        name = ask_name(prompter, "Job", document.names("jobs"))
        document.jobs[name] = Job(
            expression=prompter.ask("Path to the job (./my-job.js) or the expression itself"),
            adaptor=prompter.ask("Adaptor", default=DEFAULT_ADAPTOR),
            trigger=prompter.ask("Trigger"),
            credential=prompter.ask("Credential"),
        )

        if not _another(prompter, "job"):
            break
    prompter.say("OK. Jobs written.")
    return document
