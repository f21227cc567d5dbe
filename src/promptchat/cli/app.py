"""Main CLI application using Typer."""
import asyncio
import os

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..conversation import ConversationStore
from ..dispatcher import MessageDispatcher
from ..endpoint import EndpointError
from ..logs import setup_logging
from .providers import get_endpoint

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="promptchat",
    help="Chat with a hosted text-generation endpoint from the terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

EndpointOption = typer.Option(
    None,
    "--endpoint",
    "-e",
    help="Where prompts go: 'direct' (external origin) or 'relay' (default: PROMPTCHAT_ENDPOINT)"
)


@app.command(name="tui")
def tui_command(
    endpoint: str | None = EndpointOption,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    dark: bool = typer.Option(
        False,
        "--dark",
        help="Start in dark mode"
    ),
):
    """Launch the interactive TUI chat interface."""
    from ..ui import run_textual_tui

    client = get_endpoint(endpoint, console)

    try:
        asyncio.run(run_textual_tui(client, log_level=log_level, dark_mode=dark))
    except KeyboardInterrupt:
        pass
    console.print("[dim]Goodbye![/dim]")


@app.command()
def chat(
    endpoint: str | None = EndpointOption,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show diagnostic log output"
    ),
):
    """Line-oriented chat in the terminal."""
    setup_logging("DEBUG" if verbose else "WARNING", console=console)

    async def _chat():
        client = get_endpoint(endpoint, console)
        dispatcher = MessageDispatcher(ConversationStore(), client)

        console.print("[bold cyan]promptchat[/bold cyan]")
        console.print(f"[dim]Endpoint: {client.name} ({client.url})[/dim]")
        console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

        try:
            while True:
                try:
                    user_input = await asyncio.to_thread(
                        console.input, "[bold yellow]You:[/bold yellow] "
                    )
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if user_input.strip().lower() in ("exit", "quit", "q"):
                    console.print("[dim]Goodbye![/dim]")
                    break

                with console.status("[dim]Typing...[/dim]"):
                    reply = await dispatcher.submit(user_input)

                if reply is None:
                    continue
                style = "red" if reply.is_error else "green"
                console.print(f"[bold {style}]Bot[/bold {style}] [dim]{reply.time}[/dim]")
                console.print(reply.text, markup=False, highlight=False)
                console.print()
        finally:
            await client.close()

    asyncio.run(_chat())


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="Prompt to send"),
    endpoint: str | None = EndpointOption,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show diagnostic log output"
    ),
):
    """Send a single prompt and print the reply."""
    setup_logging("DEBUG" if verbose else "WARNING", console=Console(stderr=True))

    async def _ask():
        client = get_endpoint(endpoint, console)
        store = ConversationStore()
        try:
            reply = await MessageDispatcher(store, client).submit(prompt)
        finally:
            await client.close()
        return reply

    reply = asyncio.run(_ask())

    if reply is None:
        console.print("[red]Error: prompt is empty[/red]")
        raise typer.Exit(code=1)

    console.print(reply.text, markup=False, highlight=False)
    if reply.is_error:
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the relay (GET /api/chat) with uvicorn."""
    import uvicorn

    console.print(f"[dim]Relay listening on http://{host}:{port}/api/chat[/dim]")
    uvicorn.run(
        "promptchat.relay.app:create_app_from_env",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


@app.command()
def health(
    endpoint: str | None = EndpointOption,
):
    """Show configuration and probe the configured endpoint."""
    async def _health():
        client = get_endpoint(endpoint, console)

        table = Table(show_header=False, box=None)
        table.add_column("Setting", style="bold cyan", width=18)
        table.add_column("Value")
        table.add_row("Endpoint", client.name)
        table.add_row("URL", client.url)
        table.add_row("Timeout", os.getenv("PROMPTCHAT_TIMEOUT") or "none")
        console.print(table)

        try:
            reply = await client.fetch("ping")
        except EndpointError as e:
            console.print(f"[red]x[/red] Endpoint reachable: FAILED ({e})")
            raise typer.Exit(code=1)
        finally:
            await client.close()

        if reply.ok:
            console.print(f"[green]+[/green] Endpoint reachable: OK (HTTP {reply.status_code})")
        else:
            console.print(f"[yellow]![/yellow] Endpoint reachable: HTTP {reply.status_code}")
            raise typer.Exit(code=1)

    asyncio.run(_health())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
