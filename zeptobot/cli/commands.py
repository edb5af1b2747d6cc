"""CLI commands for zeptobot."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from zeptobot.config import load_config, save_default_config

app = typer.Typer(
    name="zeptobot",
    help="ZeptoBot: an AI assistant that can drive your desktop",
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """ZeptoBot CLI entrypoint."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.command()
def onboard(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Write a default configuration file."""
    path = save_default_config(config_path)

    console.print(f"[green]Config created at:[/green] {path}")
    console.print("\n[yellow]Next steps:[/yellow]")
    console.print("1. Set ANTHROPIC_API_KEY or OPENAI_API_KEY, or add a key to the config")
    console.print("2. Run: zeptobot chat -m \"Hello!\"")


@app.command()
def chat(
    message: Optional[str] = typer.Option(None, "--message", "-m", help="Message to send"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Chat with the agent."""
    config = load_config(config_path)

    from zeptobot.service import AgentService, ConfigurationError

    try:
        service = AgentService.create(config)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    async def _send(text: str) -> str:
        return await service.send_message(text)

    try:
        if message:
            console.print(asyncio.run(_send(message)))
            return

        console.print("[bold]ZeptoBot[/bold] interactive mode. Type '/reset' to clear history, 'exit' to quit.\n")
        while True:
            try:
                user_input = console.input("[bold blue]> [/bold blue]")
                if user_input.strip().lower() in ("exit", "quit"):
                    break
                if not user_input.strip():
                    continue
                if user_input.strip() == "/reset":
                    asyncio.run(service.clear_history())
                    console.print("[dim]History cleared.[/dim]\n")
                    continue
                response = asyncio.run(_send(user_input))
                console.print(f"\n{response}\n")
            except (KeyboardInterrupt, EOFError):
                break
        console.print("\n[dim]Goodbye![/dim]")
    finally:
        service.dispose()


@app.command()
def status(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Show current status and configuration."""
    config = load_config(config_path)
    defaults = config.agents.defaults

    table = Table(title="ZeptoBot Status")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    selected = config.get_provider()
    table.add_row("Provider", selected[0] if selected else "[red]Not configured[/red]")
    table.add_row("Model", config.get_model() or "[dim]Provider default[/dim]")
    table.add_row("Max Tokens", str(defaults.max_tokens))
    table.add_row("Temperature", str(defaults.temperature))
    table.add_row("Max Tool Iterations", str(defaults.max_tool_iterations))

    api_key = config.get_api_key()
    table.add_row("API Key", f"...{api_key[-8:]}" if api_key else "[red]Not configured[/red]")
    table.add_row("Automation", "Enabled" if config.automation.enabled else "Disabled")

    console.print(table)


@app.command()
def automate(
    action: str = typer.Argument(..., help="move_mouse, click, type, screen_size or mouse_position"),
    params: str = typer.Option("{}", "--params", "-p", help="JSON parameters for the action"),
) -> None:
    """Run a desktop automation action directly, without the model."""
    from zeptobot.automation import AutomationError, AutomationService, PyAutoGUIBackend

    try:
        parsed = json.loads(params)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] --params is not valid JSON: {e}")
        raise typer.Exit(1)
    if not isinstance(parsed, dict):
        console.print("[red]Error:[/red] --params must be a JSON object")
        raise typer.Exit(1)

    service = AutomationService(PyAutoGUIBackend())
    try:
        result = asyncio.run(service.run(action, parsed))
    except AutomationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(result)


if __name__ == "__main__":
    app()
