import sys
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.text import Text

from devai import __version__
from devai.agents import assistant, make_client, standup_formatter
from devai.config import Settings
from devai.errors import DevAIError
from devai.utils import StandupStore, extract_today
from devai.utils.log import configure_logging
from devai.utils.speech import speak

load_dotenv()

app = typer.Typer(help="Local AI Dev Assistant CLI", no_args_is_help=True)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"devai {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    try:
        settings = Settings.from_env()
    except DevAIError as exc:
        _fail("Invalid configuration!", exc)
    configure_logging("DEBUG" if verbose else settings.log_level)


def _fail(message: str, exc: Exception):
    console.print(f"[red]✖ {message}[/red]")
    console.print(Text(str(exc), style="red"), soft_wrap=True)
    raise typer.Exit(code=1)


@app.command()
def ask(
    query: List[str] = typer.Argument(..., help="Ask AI anything."),
    read_aloud: bool = typer.Option(False, "--speak", help="Read the answer aloud (Windows only)."),
):
    """Ask AI anything, e.g. devai how to center a div in css

    Questions starting with a command name need an explicit ask,
    e.g. devai ask today is friday, what should I plan?
    """
    text = " ".join(query)
    try:
        client = make_client(Settings.from_env())
        with console.status("🤖 AI is thinking..."):
            answer = assistant.ask(client, text)
    except DevAIError as exc:
        _fail("Something went wrong!", exc)
    console.print("[green]✔ Done![/green]")
    console.print(Markdown(answer))
    if read_aloud:
        try:
            speak(answer)
        except DevAIError as exc:
            _fail("Could not read the answer aloud!", exc)


@app.command("format-standup")
def format_standup(
    data: List[str] = typer.Argument(..., help="Standup data to format."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Report file to merge the formatted standup into."
    ),
    show_all_today: bool = typer.Option(
        False, "--show-all-today", "-a", help="Print every update merged for today, not just this one."
    ),
):
    """Format the provided standup"""
    text = " ".join(data)
    try:
        client = make_client(Settings.from_env())
        with console.status("🤖 AI is formatting your standup..."):
            result = standup_formatter.format_standup(
                client, text, output=output, show_all_today=show_all_today
            )
    except DevAIError as exc:
        _fail("Failed to format standup!", exc)
    console.print("[green]✔ Standup formatted![/green]")
    console.print(Text(result.display, style="cyan"), soft_wrap=True)


app.command("formatStandup", hidden=True)(format_standup)


@app.command()
def today(
    output: Path = typer.Option(..., "--output", "-o", help="Report file to read."),
):
    """Show today's block from a stored standup report"""
    try:
        block = extract_today(StandupStore(output).read())
    except DevAIError as exc:
        _fail("Failed to read standup report!", exc)
    if block is None:
        console.print(f"[yellow]No updates for today in {output}[/yellow]", soft_wrap=True)
        return
    console.print(Text(block, style="cyan"), soft_wrap=True)


COMMANDS = {"ask", "format-standup", "formatStandup", "today"}


def route(argv: List[str]) -> List[str]:
    """Send free text to ``ask`` so ``devai <query...>`` works without a subcommand."""
    argv = list(argv)
    for i, token in enumerate(argv):
        if token.startswith("-"):
            continue
        # "today" without a report file is the first word of a question
        if token == "today" and not _has_output_option(argv[i + 1 :]):
            argv.insert(i, "ask")
        elif token not in COMMANDS:
            argv.insert(i, "ask")
        break
    return argv


def _has_output_option(args: List[str]) -> bool:
    return any(arg in ("-o", "--output") or arg.startswith("--output=") for arg in args)


def run() -> None:
    app(args=route(sys.argv[1:]), prog_name="devai")


if __name__ == "__main__":
    run()
