"""Scaffold failure contracts.

Every expected failure of a scaffold run raises a ``ScaffoldFailure``
subclass carrying a stable code. Programmer bugs raise normal exceptions.
Callers catch ScaffoldFailure and handle it per interface (the CLI prints a
diagnostic and exits non-zero).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from .services.scaffold import ScaffoldState

ScaffoldFailureCode = Literal[
    "usage",
    "already_exists",
    "source_not_found",
    "configuration",
    "external_command_failed",
]


class ScaffoldFailure(Exception):
    """Expected scaffold failure: usage, filesystem, or external command error.

    Use ``raise ScaffoldFailure(...) from exc`` to chain a causing exception;
    it is available as ``__cause__``.

    ``state`` is the scaffold state that was running when the failure was
    raised; the orchestrator fills it in, and it stays ``None`` elsewhere.
    """

    internal = False

    def __init__(
        self,
        code: ScaffoldFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recovery_hint = recovery_hint
        self.state: ScaffoldState | None = None


class UsageError(ScaffoldFailure):
    """Invocation arguments are missing or invalid."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("usage", message, recovery_hint=recovery_hint)


class AlreadyExistsError(ScaffoldFailure):
    """The target directory already exists."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("already_exists", message, recovery_hint=recovery_hint)


class SourceNotFoundError(ScaffoldFailure):
    """A boilerplate source folder is missing from the installed package."""

    internal = True

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("source_not_found", message, recovery_hint=recovery_hint)


class ConfigurationError(ScaffoldFailure):
    """The catalog or settings do not cover the requested selection."""

    internal = True

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("configuration", message, recovery_hint=recovery_hint)


class ExternalCommandError(ScaffoldFailure):
    """A delegated tool (generator, package manager, initializer) failed."""

    def __init__(
        self,
        argv: Sequence[str],
        exit_code: int,
        *,
        message: str | None = None,
        recovery_hint: str | None = None,
    ) -> None:
        self.argv = tuple(argv)
        self.exit_code = exit_code
        detail = message or f"command failed (exit {exit_code}): {' '.join(self.argv)}"
        super().__init__("external_command_failed", detail, recovery_hint=recovery_hint)
