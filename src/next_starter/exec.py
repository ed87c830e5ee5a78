"""Subprocess helpers for running the generator, installers, and initializers."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from . import log
from .errors import ExternalCommandError
from .package_managers import install_argv

MISSING_COMMAND_EXIT_CODE = 127


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request."""

    argv: tuple[str, ...]
    cwd: Path | None = None


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result."""

    argv: tuple[str, ...]
    returncode: int


class CommandRunner(Protocol):
    """Runtime command-execution interface.

    Implementations return ``None`` when the executable cannot be found.
    """

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess.

    The child inherits stdin/stdout/stderr so generator prompts and
    installer progress stay visible.
    """

    def run(self, request: CommandRequest) -> CommandResult | None:
        try:
            completed = subprocess.run(list(request.argv), cwd=request.cwd, check=False)
        except FileNotFoundError:
            return None
        return CommandResult(argv=request.argv, returncode=completed.returncode)


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Execute a typed command request with the given runner."""
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    return active_runner.run(request)


def run_command(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult:
    """Run a command and raise ``ExternalCommandError`` unless it succeeds.

    Args:
        request: Command and working directory.
        runner: Optional runner override; defaults to subprocess.

    Returns:
        The successful ``CommandResult``.

    Raises:
        ExternalCommandError: The executable is missing (exit code 127) or
            the process exited non-zero.
    """
    log.command(request.argv)
    result = run_with_runner(request, runner=runner)
    if result is None:
        raise ExternalCommandError(
            request.argv,
            MISSING_COMMAND_EXIT_CODE,
            message=f"missing required command: {request.argv[0]}",
            recovery_hint=f"install {request.argv[0]} and make sure it is on PATH",
        )
    if result.returncode != 0:
        raise ExternalCommandError(request.argv, result.returncode)
    return result


def install_dependencies(
    package_manager: str,
    packages: Sequence[str],
    *,
    dev: bool,
    cwd: Path,
    runner: CommandRunner | None = None,
) -> CommandResult | None:
    """Add ``packages`` to the project at ``cwd``.

    Returns ``None`` without running anything when ``packages`` is empty.
    """
    if not packages:
        kind = "devDependencies" if dev else "dependencies"
        log.debug(f"No {kind} to install; skipping.")
        return None
    argv = install_argv(package_manager, packages, dev=dev)
    return run_command(CommandRequest(argv=argv, cwd=cwd), runner=runner)
