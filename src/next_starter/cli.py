"""Command line entry point: ``create-next-starter <project-name>``."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional

import typer

from . import __version__, io
from . import log as starter_log
from .choices import InteractiveChoiceProvider
from .config import Settings
from .errors import ScaffoldFailure
from .exec import SubprocessCommandRunner
from .models import PACKAGE_MANAGER_VALUES, UI_VARIANT_VALUES
from .services import ScaffoldProjectService, ScaffoldRequest

app = typer.Typer(
    add_completion=False,
    help="Create a Next.js project from a boilerplate variant.",
)


def _one_of(values: tuple[str, ...]) -> Callable[[Optional[str]], Optional[str]]:
    def validate(value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        normalized = value.strip().lower()
        if normalized not in values:
            raise typer.BadParameter(f"expected one of: {', '.join(values)}")
        return normalized

    return validate


def _version_callback(value: bool) -> None:
    if value:
        io.say(__version__)
        raise typer.Exit()


def run_scaffold(
    project_name: str | None,
    *,
    cwd: Path,
    settings: Settings,
    provider: InteractiveChoiceProvider,
) -> Path:
    """Run the scaffold service with the subprocess runner.

    Returns:
        The created project directory.
    """
    service = ScaffoldProjectService(
        runner=SubprocessCommandRunner(),
        choice_provider=provider,
        settings=settings,
    )
    outcome = service(ScaffoldRequest(project_name=project_name, cwd=cwd))
    return outcome.target_dir


@app.command()
def create(
    project_name: Optional[str] = typer.Argument(
        None, metavar="PROJECT_NAME", help="Folder name for the new project."
    ),
    package_manager: Optional[str] = typer.Option(
        None,
        "--package-manager",
        "-p",
        callback=_one_of(PACKAGE_MANAGER_VALUES),
        help="Package manager to install with (npm, yarn, pnpm).",
    ),
    ui: Optional[str] = typer.Option(
        None,
        "--ui",
        "-u",
        callback=_one_of(UI_VARIANT_VALUES),
        help="UI library variant (none, shadcn, mui).",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Accept the detected package manager and Tailwind-only UI.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        callback=_one_of(starter_log.LOG_LEVEL_NAMES),
        help="Log verbosity (trace, debug, info, success, warning, error).",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Create PROJECT_NAME with create-next-app and overlay a boilerplate."""
    del version
    if log_level is not None:
        starter_log.set_level(log_level)
    if no_color:
        starter_log.set_no_color(True)

    provider = InteractiveChoiceProvider(
        package_manager=package_manager,  # type: ignore[arg-type]
        ui_variant=ui,  # type: ignore[arg-type]
        assume_defaults=yes,
    )
    try:
        settings = Settings.from_env(os.environ)
        target_dir = run_scaffold(
            project_name, cwd=Path.cwd(), settings=settings, provider=provider
        )
    except ScaffoldFailure as exc:
        io.die(exc.message, hint=exc.recovery_hint, internal=exc.internal)
    except KeyboardInterrupt:
        io.die("aborted", code=130)

    starter_log.success(f'Project "{target_dir.name}" setup complete!')
    starter_log.info(f"Next: cd {target_dir}")


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
