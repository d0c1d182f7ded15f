"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .run import run

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="youtrack-hot-issues",
    help="Hot issue triage and reporting for YouTrack",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="run", context_settings={"help_option_names": ["-h", "--help"]})(run)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from youtrack_hot_issues import __version__

    console.print(f"YouTrack Hot Issues v{__version__}")


if __name__ == "__main__":
    app()
