from __future__ import annotations

from pathlib import Path

import pytest

from next_starter.choices import InteractiveChoiceProvider
from next_starter.config import Settings
from next_starter.errors import (
    AlreadyExistsError,
    ExternalCommandError,
    SourceNotFoundError,
    UsageError,
)
from next_starter.models import CatalogEntry
from next_starter.services import (
    ScaffoldProjectService,
    ScaffoldRequest,
    ScaffoldState,
)
from tests.next_starter.helpers import RecordingRunner, ScriptedSelect

DEMO_ENTRY = CatalogEntry(
    variant="none",
    label="Tailwind only",
    boilerplate="none",
    dependencies=("axios", "react-hook-form"),
    dev_dependencies=("standard-version",),
)


class StageSpy:
    def __init__(self) -> None:
        self.calls: list[tuple[Path, Path]] = []

    def __call__(self, source: Path, target: Path) -> list[Path]:
        self.calls.append((source, target))
        return [Path("app/page.tsx")]


def make_service(
    runner: RecordingRunner,
    *,
    package_manager: str | None = "npm",
    ui_variant: str | None = "none",
    user_agent: str = "",
    entries: dict[str, CatalogEntry] | None = None,
    stage: StageSpy | None = None,
    select: ScriptedSelect | None = None,
    boilerplates_dir: Path | None = None,
) -> ScaffoldProjectService:
    values: dict[str, object] = {"user_agent": user_agent}
    if boilerplates_dir is not None:
        values["boilerplates_dir"] = boilerplates_dir
    kwargs: dict[str, object] = {}
    if stage is not None:
        kwargs["stage_boilerplate"] = stage
    return ScaffoldProjectService(
        runner=runner,
        choice_provider=InteractiveChoiceProvider(
            package_manager=package_manager,  # type: ignore[arg-type]
            ui_variant=ui_variant,  # type: ignore[arg-type]
            select=select,
        ),
        settings=Settings.model_validate(values),
        entries=entries,
        **kwargs,
    )


def test_demo_run_sequences_generator_staging_and_installs(tmp_path: Path) -> None:
    runner = RecordingRunner()
    stage = StageSpy()
    service = make_service(runner, entries={"none": DEMO_ENTRY}, stage=stage)

    outcome = service(ScaffoldRequest(project_name="demo", cwd=tmp_path))

    target = tmp_path / "demo"
    assert outcome.target_dir == target
    assert target.is_dir()
    assert runner.argvs == [
        ("npx", "create-next-app@latest", str(target), "--eslint", "--tailwind", "--app"),
        ("npm", "install", "axios", "react-hook-form"),
        ("npm", "install", "--save-dev", "standard-version"),
    ]
    assert runner.requests[0].cwd is None
    assert [request.cwd for request in runner.requests[1:]] == [target, target]
    assert len(stage.calls) == 1
    assert stage.calls[0][1] == target
    assert stage.calls[0][0].name == "none"
    assert outcome.commands == tuple(runner.argvs)
    assert outcome.staged_files == (Path("app/page.tsx"),)
    assert service.state is ScaffoldState.DONE


def test_shadcn_runs_post_init_in_project(tmp_path: Path) -> None:
    runner = RecordingRunner()
    service = make_service(runner, package_manager="pnpm", ui_variant="shadcn", stage=StageSpy())

    outcome = service(ScaffoldRequest(project_name="ui-app", cwd=tmp_path))

    assert outcome.entry.needs_post_init
    assert runner.argvs[-1] == ("npx", "shadcn@latest", "init")
    assert runner.requests[-1].cwd == tmp_path / "ui-app"
    assert runner.argvs[1][:2] == ("pnpm", "add")
    assert runner.argvs[2][-1] == "-D"
    assert len(runner.requests) == 4


def test_empty_dependency_lists_skip_installs(tmp_path: Path) -> None:
    runner = RecordingRunner()
    entry = CatalogEntry(variant="none", label="Bare", boilerplate="none")
    service = make_service(runner, entries={"none": entry}, stage=StageSpy())

    service(ScaffoldRequest(project_name="bare", cwd=tmp_path))

    assert len(runner.requests) == 1
    assert runner.argvs[0][1] == "create-next-app@latest"


def test_detected_manager_is_offered_for_confirmation(tmp_path: Path) -> None:
    runner = RecordingRunner()
    select = ScriptedSelect("npm")
    service = make_service(
        runner,
        package_manager=None,
        user_agent="yarn/1.22.19 npm/? node/v20.11.0",
        select=select,
        stage=StageSpy(),
    )

    outcome = service(ScaffoldRequest(project_name="demo", cwd=tmp_path))

    assert select.prompts[0][2] == "yarn"
    assert outcome.choice.package_manager == "npm"
    assert runner.argvs[1][:2] == ("npm", "install")


@pytest.mark.parametrize("project_name", [None, "", "   "])
def test_missing_project_name_is_usage_error(tmp_path: Path, project_name: str | None) -> None:
    runner = RecordingRunner()
    service = make_service(runner)

    with pytest.raises(UsageError) as exc_info:
        service(ScaffoldRequest(project_name=project_name, cwd=tmp_path))

    assert exc_info.value.state is ScaffoldState.COLLECT_CHOICE
    assert runner.requests == []
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("project_name", ["nested/app", "..", "."])
def test_project_name_must_be_plain_folder(tmp_path: Path, project_name: str) -> None:
    with pytest.raises(UsageError):
        make_service(RecordingRunner())(ScaffoldRequest(project_name=project_name, cwd=tmp_path))


def test_existing_target_aborts_before_any_command(tmp_path: Path) -> None:
    (tmp_path / "demo").mkdir()
    runner = RecordingRunner()
    stage = StageSpy()
    service = make_service(runner, stage=stage)

    with pytest.raises(AlreadyExistsError) as exc_info:
        service(ScaffoldRequest(project_name="demo", cwd=tmp_path))

    assert exc_info.value.state is ScaffoldState.CREATE_TARGET
    assert runner.requests == []
    assert stage.calls == []


def test_generator_failure_stops_run_and_keeps_directory(tmp_path: Path) -> None:
    runner = RecordingRunner(exit_codes=[1])
    stage = StageSpy()
    service = make_service(runner, stage=stage)

    with pytest.raises(ExternalCommandError) as exc_info:
        service(ScaffoldRequest(project_name="demo", cwd=tmp_path))

    assert exc_info.value.exit_code == 1
    assert exc_info.value.state is ScaffoldState.INVOKE_GENERATOR
    assert exc_info.value.recovery_hint == f"remove {tmp_path / 'demo'} before retrying"
    assert len(runner.requests) == 1
    assert stage.calls == []
    assert (tmp_path / "demo").is_dir()


def test_missing_boilerplate_is_fatal_before_installs(tmp_path: Path) -> None:
    runner = RecordingRunner()
    service = make_service(runner, boilerplates_dir=tmp_path / "no-boilerplates")

    with pytest.raises(SourceNotFoundError) as exc_info:
        service(ScaffoldRequest(project_name="demo", cwd=tmp_path))

    assert exc_info.value.state is ScaffoldState.STAGE_BOILERPLATE
    assert len(runner.requests) == 1
    assert (tmp_path / "demo").is_dir()


def test_dependency_install_failure_skips_dev_install_and_post_init(tmp_path: Path) -> None:
    runner = RecordingRunner(exit_codes=[0, 1])
    service = make_service(runner, ui_variant="shadcn", stage=StageSpy())

    with pytest.raises(ExternalCommandError) as exc_info:
        service(ScaffoldRequest(project_name="demo", cwd=tmp_path))

    assert exc_info.value.state is ScaffoldState.INSTALL_DEPENDENCIES
    assert len(runner.requests) == 2


def test_post_init_failure_is_reported(tmp_path: Path) -> None:
    runner = RecordingRunner(exit_codes=[0, 0, 0, 9])
    service = make_service(runner, ui_variant="shadcn", stage=StageSpy())

    with pytest.raises(ExternalCommandError) as exc_info:
        service(ScaffoldRequest(project_name="demo", cwd=tmp_path))

    assert exc_info.value.exit_code == 9
    assert exc_info.value.argv == ("npx", "shadcn@latest", "init")
    assert exc_info.value.state is ScaffoldState.POST_INIT


def test_real_boilerplate_overlays_generated_files(tmp_path: Path) -> None:
    runner = RecordingRunner()
    service = make_service(runner, ui_variant="mui")

    def fake_generator_then_record(request):  # type: ignore[no-untyped-def]
        target = tmp_path / "demo"
        if request.argv[1] == "create-next-app@latest":
            (target / "app").mkdir()
            (target / "app" / "page.tsx").write_text("default", encoding="utf-8")
            (target / "package.json").write_text("{}", encoding="utf-8")
        return RecordingRunner.run(runner, request)

    runner.run = fake_generator_then_record  # type: ignore[method-assign]

    outcome = service(ScaffoldRequest(project_name="demo", cwd=tmp_path))

    target = tmp_path / "demo"
    assert (target / "package.json").read_text(encoding="utf-8") == "{}"
    assert "@mui/material" in (target / "app" / "page.tsx").read_text(encoding="utf-8")
    assert (target / "theme" / "theme.ts").is_file()
    assert Path("theme/theme.ts") in outcome.staged_files


def test_outcome_records_only_installs_that_ran(tmp_path: Path) -> None:
    runner = RecordingRunner()
    entry = CatalogEntry(
        variant="none", label="Runtime only", boilerplate="none", dependencies=("axios",)
    )
    service = make_service(
        runner, package_manager="yarn", entries={"none": entry}, stage=StageSpy()
    )

    outcome = service(ScaffoldRequest(project_name="demo", cwd=tmp_path))

    assert outcome.commands[1:] == (("yarn", "add", "axios"),)
    assert outcome.commands == tuple(runner.argvs)
