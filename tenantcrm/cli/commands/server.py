"""
Server Commands.

Commands for starting the API server.
"""

import subprocess
import sys

import typer
from rich.console import Console

app = typer.Typer(help="Server management commands")
console = Console()


@app.command()
def start(
    host: str = typer.Option(None, "--host", "-h", help="Server host"),
    port: int = typer.Option(None, "--port", "-p", help="Server port"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
) -> None:
    """
    Start the FastAPI server.

    Host and port default to server.host / server.port in application.yaml.

    Examples:
        cli.py server start
        cli.py server start --reload
        cli.py server start --host 0.0.0.0 --port 4000
    """
    try:
        from tenantcrm.backend.core.config import get_app_config, get_settings

        get_settings()
        server = get_app_config().application.server
    except Exception as e:
        console.print("[red]Error: Could not load settings.[/red]")
        console.print("[dim]Ensure config/.env exists and defines JWT_SECRET.[/dim]")
        console.print(f"[dim]Error: {e}[/dim]")
        raise typer.Exit(1)

    server_host = host or server.host
    server_port = port or server.port

    cmd = [
        sys.executable, "-m", "uvicorn",
        "tenantcrm.backend.main:app",
        "--host", server_host,
        "--port", str(server_port),
    ]
    if reload:
        cmd.append("--reload")

    console.print(f"[bold]Starting server at http://{server_host}:{server_port}[/bold]")
    if reload:
        console.print("[dim]Auto-reload enabled[/dim]")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        console.print("\n[dim]Server stopped[/dim]")
    except subprocess.CalledProcessError as e:
        console.print(f"[red]Server failed to start (exit code: {e.returncode})[/red]")
        raise typer.Exit(e.returncode)
