"""Choice collection for a scaffold run."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

from . import io
from .catalog import variant_choices
from .models import PACKAGE_MANAGER_VALUES, Choice, PackageManager, UiVariant

SelectFn = Callable[[str, Sequence[tuple[str, str]], str | None], str]


class ChoiceProvider(Protocol):
    """Supplies the validated selections for a run.

    ``detected`` is only a suggestion; providers must let the operator
    override it.
    """

    def collect(self, project_name: str, detected: PackageManager) -> Choice: ...


class InteractiveChoiceProvider:
    """Prompt for anything not already answered on the command line.

    Args:
        package_manager: Preset answer for the package-manager prompt.
        ui_variant: Preset answer for the UI-library prompt.
        assume_defaults: Skip prompts, taking the detected package manager
            and the ``none`` variant for unanswered questions.
        select: Prompt function; defaults to ``io.select``.
    """

    def __init__(
        self,
        *,
        package_manager: PackageManager | None = None,
        ui_variant: UiVariant | None = None,
        assume_defaults: bool = False,
        select: SelectFn | None = None,
    ) -> None:
        self._package_manager = package_manager
        self._ui_variant = ui_variant
        self._assume_defaults = assume_defaults
        self._select = select or io.select

    def collect(self, project_name: str, detected: PackageManager) -> Choice:
        package_manager = self._package_manager
        if package_manager is None:
            if self._assume_defaults:
                package_manager = detected
            else:
                package_manager = self._select(
                    f"Detected package manager: {detected}. Please confirm:",
                    [(value, value) for value in PACKAGE_MANAGER_VALUES],
                    detected,
                )

        ui_variant = self._ui_variant
        if ui_variant is None:
            if self._assume_defaults:
                ui_variant = "none"
            else:
                ui_variant = self._select(
                    "Which UI library do you want?", variant_choices(), None
                )

        return Choice(
            project_name=project_name,
            package_manager=package_manager,
            ui_variant=ui_variant,
        )
