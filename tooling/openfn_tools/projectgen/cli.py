"""
openfn-tools — Project spec generator (`generate-project`).

Interactive wizard that builds a project.yaml for OpenFn/platform and
OpenFn/microservice:

  destination → output mode → triggers → credentials → jobs
  → (monolith: inline files) → print → write
"""

from __future__ import annotations

import sys
from pathlib import Path

from openfn_tools.errors import OpenFnToolsError
from openfn_tools.models.project import OutputMode, ProjectDocument
from openfn_tools.projectgen.assemble import dump_document, inline_monolith, write_document
from openfn_tools.projectgen.collect import (
    collect_credentials,
    collect_jobs,
    collect_triggers,
)
from openfn_tools.projectgen.prompts import Prompter
from openfn_tools.utils.logging import configure_logging, logger

DEFAULT_DEST = "./tmp/project.yaml"


def welcome(prompter: Prompter) -> None:
    prompter.console.print(
        "Welcome to the project spec generator. "
        "This wizard will help you generate a project.yaml file "
        "for use with [bright_cyan]OpenFn/platform[/] and [bright_cyan]OpenFn/microservice[/]."
    )


def run_wizard(prompter: Prompter) -> tuple[Path, OutputMode, ProjectDocument]:
    """Ask every question in order and return what was collected."""
    dest = prompter.ask("Where do you want to save the generated yaml?", default=DEFAULT_DEST)
    mode = OutputMode(
        prompter.ask(
            "Do you want to generate a monolith project.yaml or a URI-based project.yaml?",
            default=OutputMode.URI.value,
            choices=[m.value for m in OutputMode],
            message='please enter "monolith" or "uri"',
        )
    )

    document = ProjectDocument()
    prompter.say("Let's add some triggers.")
    document = collect_triggers(document, prompter)
    prompter.say("Let's add some credentials.")
    document = collect_credentials(document, prompter)
    prompter.say("Let's add your first job.")
    document = collect_jobs(document, prompter)

    return Path(dest), mode, document


def generate(prompter: Prompter) -> Path:
    dest, mode, document = run_wizard(prompter)

    if mode is OutputMode.MONOLITH:
        document = inline_monolith(document)

    prompter.say("Project yaml configuration complete:")
    prompter.verbatim(dump_document(document))
    prompter.say(f"Writing to {dest}")
    write_document(document, dest)
    prompter.say("Done.")
    return dest


def main(prompter: Prompter | None = None) -> int:
    configure_logging()
    prompter = prompter or Prompter()
    welcome(prompter)
    try:
        dest = generate(prompter)
    except (KeyboardInterrupt, EOFError):
        prompter.say("\nAborted; nothing was written.")
        return 130
    except (OpenFnToolsError, OSError) as exc:
        logger.debug("Project generation failed", exc_info=True)
        prompter.say(f"\nThat didn't work. Error: {exc}", style="red")
        return 1
    logger.debug("Project written to %s", dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
