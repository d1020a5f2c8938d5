# -----------------------------------------------------------------------------
# TOKEN SOURCES
# -----------------------------------------------------------------------------
# Responsibility: Feed type tokens to the Order Loop. The loop only sees an
# iterable; whether the tokens come from a person at a prompt, a file, or a
# test list does not matter to it.
# -----------------------------------------------------------------------------

from collections.abc import Iterable, Iterator

from rich.console import Console

PROMPT = "input pizza type: "


def console_tokens(console: Console | None = None, prompt: str = PROMPT) -> Iterator[str]:
    """
    Prompt for tokens until the input stream closes.

    Args:
        console: Rich console to prompt on (a new one if omitted).
        prompt: Text shown before each read.

    Yields:
        Each line entered, without surrounding whitespace. An empty line is
        yielded as "" so the loop can treat it as end of input.
    """
    console = console or Console()
    while True:
        try:
            line = console.input(f"[bold cyan]{prompt}[/bold cyan]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return
        yield line.strip()


def line_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Strip line endings from a file object or list of lines."""
    for line in lines:
        yield line.rstrip("\r\n")
