"""Single-choice terminal prompt built on rich."""

import logging
from typing import IO

from rich.console import Console
from rich.prompt import Prompt

from .exceptions import PromptError

log = logging.getLogger(__name__)


def select_one(
    message: str,
    labels: list[str],
    console: Console | None = None,
    stream: IO[str] | None = None,
) -> str:
    """
    Show labels as a numbered list and return the one the user picks.

    The answer is the index of the label; anything else is rejected and the
    question is asked again. Pressing enter picks the first label.

    Raises:
        PromptError: If input is closed or the user interrupts the prompt
    """
    if not labels:
        raise ValueError("labels must not be empty")

    console = console or Console()
    console.print(f"[bold]{message}[/bold]")
    for index, label in enumerate(labels):
        console.print(f"  [cyan]{index:>3}[/cyan]  {label}")

    choices = [str(index) for index in range(len(labels))]
    try:
        answer = Prompt.ask(
            "Number",
            console=console,
            choices=choices,
            show_choices=False,
            default=choices[0],
            stream=stream,
        )
    except (EOFError, KeyboardInterrupt) as e:
        raise PromptError("selection cancelled") from e

    log.debug("selected %s", labels[int(answer)])
    return labels[int(answer)]
