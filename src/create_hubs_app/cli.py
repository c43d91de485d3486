"""Command line interface for create-hubs-app."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import DOCS_URL, ProjectRequest
from .scaffold import InitReport, InitSequence, InitState, StepCallback

LOGGER = logging.getLogger(__name__)

_COMMANDS = (
    ("npm run login", "Log into your Hubs Cloud server. You need to do this first."),
    ("npm start", "Start the development server for your Hubs app."),
    ("npm run deploy", "Build and deploy your Hubs app to your Hubs Cloud instance."),
    ("npm run logout", "Log out of your Hubs Cloud server."),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-hubs-app",
        usage="%(prog)s <project-path> [options]",
        description="Create a new Hubs Cloud app",
        allow_abbrev=False,
    )
    parser.add_argument("project_path", metavar="project-path", help="Directory for the new app")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each initialization step to stderr",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _announce(console: Console) -> StepCallback:
    def on_step(state: InitState, request: ProjectRequest) -> None:
        if state is InitState.PREPARING_DIRECTORY:
            console.print(f"Creating a new Hubs app in {escape(str(request.resolved_path))}.")
        elif state is InitState.INSTALLING_PACKAGES:
            console.print("Installing packages. This might take a couple of minutes.")

    return on_step


def print_success(console: Console, report: InitReport) -> None:
    request = report.request
    console.print("[green]Finished![/green]")
    console.print(
        f"Created {escape(request.project_name)} at {escape(str(request.resolved_path))}"
    )
    console.print()
    console.print("  Inside that directory you can run the following commands:")
    for command, description in _COMMANDS:
        console.print()
        console.print(f"    [blue]{command}[/blue]")
        console.print(f"      {description}")
    console.print()
    console.print(
        "  Check the documentation for more information on getting set up with Hubs Cloud."
    )
    console.print(f"  {DOCS_URL}", highlight=False)


def print_failure(console: Console, message: str) -> None:
    console.print("[red]Error creating Hubs app:[/red]")
    console.print(f"  [red]{escape(message)}[/red]")


def main(
    argv: Sequence[str] | None = None,
    *,
    console: Console | None = None,
    error_console: Console | None = None,
) -> int:
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    _configure_logging(args.verbose)
    if unknown:
        LOGGER.debug("ignoring unrecognized arguments: %s", " ".join(unknown))

    console = console or Console(soft_wrap=True)
    error_console = error_console or Console(stderr=True, soft_wrap=True)

    try:
        request = ProjectRequest.from_path(args.project_path)
    except ValueError as exc:
        print_failure(error_console, str(exc))
        return 1

    sequence = InitSequence(on_step=_announce(console))
    report = sequence.run(request)
    if not report.succeeded:
        print_failure(error_console, str(report.error))
        return 1

    print_success(console, report)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
