"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..utils.log_setup import setup_logging
from .generate import generate
from .labels import labels
from .options import VERBOSE_OPTION

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="issue-scout",
    help="Collect labelled GitHub issues into Markdown reports",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


@app.callback()
def main(verbose: bool = VERBOSE_OPTION) -> None:
    """Collect labelled GitHub issues into Markdown reports."""
    setup_logging(verbose)


app.command(name="generate", context_settings={"help_option_names": ["-h", "--help"]})(
    generate
)
app.command(name="labels", context_settings={"help_option_names": ["-h", "--help"]})(
    labels
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from issue_scout import __version__

    console.print(f"issue-scout v{__version__}")


if __name__ == "__main__":
    app()
