"""Scaffold orchestration: choices, generator, boilerplate, installs, post-init."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ValidationError

from .. import catalog, log, staging
from ..choices import ChoiceProvider
from ..config import Settings
from ..errors import ScaffoldFailure, UsageError
from ..exec import CommandRequest, CommandRunner, install_dependencies, run_command
from ..models import CatalogEntry, Choice
from ..package_managers import detect
from .base import BaseService

StageBoilerplate = Callable[[Path, Path], list[Path]]


class ScaffoldState(str, Enum):
    COLLECT_CHOICE = "collect-choice"
    CREATE_TARGET = "create-target"
    INVOKE_GENERATOR = "invoke-generator"
    RESOLVE_CATALOG = "resolve-catalog"
    STAGE_BOILERPLATE = "stage-boilerplate"
    INSTALL_DEPENDENCIES = "install-dependencies"
    POST_INIT = "post-init"
    DONE = "done"


class ScaffoldRequest(BaseModel):
    project_name: str | None
    cwd: Path


@dataclass(frozen=True)
class ScaffoldOutcome:
    choice: Choice
    target_dir: Path
    entry: CatalogEntry
    staged_files: tuple[Path, ...]
    commands: tuple[tuple[str, ...], ...]


class ScaffoldProjectService(BaseService[ScaffoldRequest, ScaffoldOutcome]):
    """Run one scaffold from choice collection to completion.

    States execute strictly in ``ScaffoldState`` order. The first failure
    ends the run; the target directory is left as-is. The failing state is
    recorded on the raised error as ``state``.
    """

    def __init__(
        self,
        *,
        runner: CommandRunner | None,
        choice_provider: ChoiceProvider,
        settings: Settings,
        entries: Mapping[str, CatalogEntry] | None = None,
        stage_boilerplate: StageBoilerplate = staging.stage_boilerplate,
    ) -> None:
        self._runner = runner
        self._choice_provider = choice_provider
        self._settings = settings
        self._entries = entries
        self._stage_boilerplate = stage_boilerplate
        self._state = ScaffoldState.COLLECT_CHOICE
        self._commands: list[tuple[str, ...]] = []
        self._target_dir: Path | None = None

    @property
    def state(self) -> ScaffoldState:
        return self._state

    def _enter(self, state: ScaffoldState) -> None:
        self._state = state
        log.trace(f"state: {state.value}")

    def _run_external(self, request: CommandRequest) -> None:
        self._commands.append(request.argv)
        run_command(request, runner=self._runner)

    def _collect_choice(self, request: ScaffoldRequest) -> Choice:
        project_name = (request.project_name or "").strip()
        if not project_name:
            raise UsageError(
                "please provide a project name",
                recovery_hint="example: create-next-starter my-app",
            )
        if Path(project_name).name != project_name or project_name in {".", ".."}:
            raise UsageError(f"project name must be a plain folder name: {project_name!r}")
        detected = detect(self._settings.user_agent)
        log.debug(f"Detected package manager: {detected}")
        try:
            return self._choice_provider.collect(project_name, detected)
        except ValidationError as exc:
            raise UsageError(f"invalid selection: {exc}") from exc

    def _install(self, choice: Choice, entry: CatalogEntry, target_dir: Path) -> None:
        for packages, dev in ((entry.dependencies, False), (entry.dev_dependencies, True)):
            result = install_dependencies(
                choice.package_manager,
                packages,
                dev=dev,
                cwd=target_dir,
                runner=self._runner,
            )
            if result is not None:
                self._commands.append(result.argv)

    def _run(self, request: ScaffoldRequest) -> ScaffoldOutcome:
        self._commands = []
        self._target_dir = None
        self._enter(ScaffoldState.COLLECT_CHOICE)
        choice = self._collect_choice(request)

        self._enter(ScaffoldState.CREATE_TARGET)
        target_dir = request.cwd / choice.project_name
        staging.prepare_target(target_dir)
        self._target_dir = target_dir

        self._enter(ScaffoldState.INVOKE_GENERATOR)
        log.step("Creating Next.js project...")
        self._run_external(CommandRequest(argv=self._settings.generator_argv(target_dir)))

        self._enter(ScaffoldState.RESOLVE_CATALOG)
        entry = catalog.resolve(choice.ui_variant, self._entries)

        self._enter(ScaffoldState.STAGE_BOILERPLATE)
        log.step(f"Copying boilerplate for {entry.label}...")
        source = catalog.boilerplate_path(entry, self._settings.boilerplates_dir)
        staged = self._stage_boilerplate(source, target_dir)
        for relative in staged:
            log.debug(f"  {relative}")

        self._enter(ScaffoldState.INSTALL_DEPENDENCIES)
        log.step("Installing additional dependencies...")
        self._install(choice, entry, target_dir)

        self._enter(ScaffoldState.POST_INIT)
        if entry.needs_post_init:
            log.step(f"Initializing {entry.label}...")
            self._run_external(CommandRequest(argv=entry.post_init, cwd=target_dir))

        self._enter(ScaffoldState.DONE)
        return ScaffoldOutcome(
            choice=choice,
            target_dir=target_dir,
            entry=entry,
            staged_files=tuple(staged),
            commands=tuple(self._commands),
        )

    def _handle_failure(self, error: ScaffoldFailure) -> ScaffoldOutcome:
        error.state = self._state
        log.debug(f"scaffold aborted during {self._state.value}")
        if self._target_dir is not None and error.recovery_hint is None:
            error.recovery_hint = f"remove {self._target_dir} before retrying"
        raise error
