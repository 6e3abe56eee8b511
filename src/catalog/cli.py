"""Main CLI application module."""

import typer
from rich.console import Console
from rich.panel import Panel

from src.catalog.runtime.context import get_config

console = Console(stderr=True)

app = typer.Typer(
    help="Product catalog service CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command("init-db")
def init_db_command() -> None:
    """Create the catalog tables in the configured database."""
    from src.catalog.runtime.init_db import init_db

    init_db()
    console.print(f"[green]✅ Tables created in {get_config().database.url}[/green]")


@app.command("issue-token")
def issue_token(
    subject: str = typer.Option(..., "--subject", "-s", help="Subject (sub) claim"),
    role: list[str] = typer.Option(
        [], "--role", "-r", help="Role to grant; repeat for several roles"
    ),
    expires_in: int = typer.Option(3600, "--expires-in", help="Lifetime in seconds"),
    algorithm: str = typer.Option("HS256", "--algorithm", "-a", help="Signing algorithm"),
) -> None:
    """Mint a signed bearer token for local testing."""
    from src.catalog.core.services import JwtGeneratorService

    try:
        token = JwtGeneratorService().generate_jwt(
            subject=subject,
            roles=role,
            expires_in_seconds=expires_in,
            algorithm=algorithm,
        )
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(
        Panel.fit(
            f"subject: {subject}\nroles: {', '.join(role) or '-'}",
            title="Bearer token",
        ),
        style="cyan",
    )
    # Plain print so the token can be piped
    print(token)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
