import typer
from typing import Optional
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from snippet_demo.config import Settings, load_settings
from snippet_demo.factorial import DEFAULT_LIMIT, FactorialError, factorial as compute_factorial
from snippet_demo.models.schemas import Greeter, User
from snippet_demo.script import main as run_script
from snippet_demo.utils.log import setup_logging

console = Console(stderr=True)
app = typer.Typer()


@app.callback()
def configure(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default: SNIPPET_LOG_LEVEL or WARNING)"),
):
    """Sample program: a greeting user and a recursive factorial."""
    try:
        settings = load_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    try:
        setup_logging(log_level or settings.log_level)
    except ValueError as e:
        console.print(f"[red]Invalid log level:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    ctx.obj = settings


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else load_settings()


# --------------------------------
# CLI 1 : the sample script
# --------------------------------
@app.command()
def run(ctx: typer.Context):
    """Greet the configured user, then print the factorial."""
    try:
        run_script(_settings(ctx))
    except FactorialError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


# --------------------------------
# CLI 2 : greet a user
# --------------------------------
@app.command()
def greet(name: str):
    """Print 'Hello, NAME'."""
    User(name=name).say_hello()


# --------------------------------
# CLI 3 : factorial
# --------------------------------
@app.command()
def factorial(
    ctx: typer.Context,
    n: int,
    limit: Optional[int] = typer.Option(None, "--limit", min=0, max=DEFAULT_LIMIT, help="Largest accepted n"),
):
    """Print n! (exact, arbitrary precision)."""
    if limit is None:
        limit = _settings(ctx).max_factorial
    try:
        result = compute_factorial(n, limit=limit)
    except FactorialError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    print(result)


# --------------------------------
# CLI 4 : the Greeter sample
# --------------------------------
@app.command()
def greeter(name: str = typer.Argument("World")):
    """Print 'Hello, NAME!' via Greeter."""
    Greeter().greet(name)


# --------------------------------
# Entry-point
# --------------------------------
if __name__ == "__main__":
    app()
