# -----------------------------------------------------------------------------
# PIZZERIA - COUNTER CONSOLE
# -----------------------------------------------------------------------------
# Responsibility: The interactive entry point. Reads pizza types at a prompt
# (or from a file given as the first argument), runs them through the Order
# Loop, and prints a report.
#
# Usage:
#   pizzeria                 # interactive, type "stop" or an empty line to close
#   pizzeria orders.txt      # one token per line
#
# Environment Variables:
# - PIZZERIA_REGION: Region to serve (default from shop.yaml, else Beijing)
# - PIZZERIA_STRATEGY: direct | regional | family
# -----------------------------------------------------------------------------

import sys
from collections.abc import Iterable
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.tree import Tree

from pizzeria import __version__
from pizzeria.core.loop import OrderLoop
from pizzeria.core.settings import load_settings
from pizzeria.core.strategy import build_strategy
from pizzeria.domain.models import OrderResult
from pizzeria.infra.token_source import console_tokens, line_tokens

PROJECT_ROOT = Path(__file__).parent.parent

SYSTEM_NAME = "PIZZERIA COUNTER"
VERSION = __version__
console = Console()


def render_result(result: OrderResult) -> str:
    """One report line for an order."""
    if result.succeeded:
        return (
            f"[green][OK] {result.token} -> {result.outcome.label} "
            f"({result.outcome.final_stage.value})[/green]"
        )
    return f"[red][FAIL] {result.token} -> {result.outcome.reason.value}[/red]"


def serve(loop: OrderLoop, tokens: Iterable[str | None], tree: Tree) -> list[OrderResult]:
    """Run the loop, adding each result to the report tree as it arrives."""
    results = []
    for result in loop.run(tokens):
        results.append(result)
        tree.add(render_result(result))
    return results


def main(argv: list[str] | None = None) -> int:
    """Run the counter. Returns the process exit code."""
    load_dotenv(PROJECT_ROOT / ".env")
    argv = sys.argv[1:] if argv is None else argv

    settings = load_settings()
    try:
        strategy = build_strategy(settings.default_strategy, settings.default_region)
    except (KeyError, ValueError) as e:
        console.print(Panel(
            f"[bold red]Cannot open the counter[/bold red]\n\n{e}",
            title="CONFIGURATION ERROR",
            border_style="red",
        ))
        return 1

    console.print(
        f"[bold green]{SYSTEM_NAME} v{VERSION} OPEN.[/bold green] "
        f"Region: {strategy.region} ({settings.default_strategy})"
    )

    loop = OrderLoop(strategy, settings=settings)
    tree = Tree(f"[bold cyan]{strategy.region}[/bold cyan]")
    if argv:
        try:
            orders = open(argv[0])
        except OSError as e:
            console.print(Panel(
                f"[bold red]Cannot read orders file[/bold red]\n\n{e}",
                title="CONFIGURATION ERROR",
                border_style="red",
            ))
            return 1
        with orders:
            results = serve(loop, line_tokens(orders), tree)
    else:
        results = serve(loop, console_tokens(console), tree)

    counts = OrderLoop.summary(results)
    console.print(Panel(tree, title="Orders", border_style="cyan"))
    console.print(
        f"[bold]Served {counts['success']}, failed {counts['failure']}.[/bold]"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
