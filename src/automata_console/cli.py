from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from automata_console.config import settings
from automata_console.intent.resolver import resolve_intent
from automata_console.intent.rules import iter_rules

app = typer.Typer(help="Automata console: task intent classification demo.")
console = Console()

_host_option = typer.Option(None, "--host", help="Bind address.")
_port_option = typer.Option(None, "--port", help="Bind port.")
_reload_option = typer.Option(False, "--reload", help="Reload on code changes.")


@app.command()
def serve(
    host: Optional[str] = _host_option,
    port: Optional[int] = _port_option,
    reload: bool = _reload_option,
):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "automata_console.api.main:app",
        host=host if host is not None else settings.API_HOST,
        port=port if port is not None else settings.API_PORT,
        reload=reload,
    )


@app.command()
def resolve(task: str = typer.Argument(..., help="Free-text task description.")):
    """Classify TASK locally, without latency or confidence simulation."""
    if not task.strip():
        console.print("[red]Task must be a non-empty string.[/red]")
        raise typer.Exit(code=1)
    resolved = resolve_intent(task.strip())
    console.print(f"Intent: [cyan]{resolved.intent}[/cyan]")
    console.print(f"Summary: {resolved.summary}")
    for i, action in enumerate(resolved.actions, start=1):
        console.print(f"  {i}. {action}")


@app.command()
def intents():
    """List the rule table in match order."""
    table = Table(title="Intent rules")
    table.add_column("#", justify="right")
    table.add_column("Keyword", style="cyan")
    table.add_column("Intent", style="green")
    table.add_column("Actions")
    for i, rule in enumerate(iter_rules(include_default=True), start=1):
        table.add_row(
            str(i), rule.keyword or "(default)", rule.intent, ", ".join(rule.actions)
        )
    console.print(table)


if __name__ == "__main__":
    app()
