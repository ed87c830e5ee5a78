from __future__ import annotations

from collections.abc import Iterable

from next_starter.exec import CommandRequest, CommandResult


class RecordingRunner:
    """Command runner that records requests instead of spawning processes.

    ``exit_codes`` are consumed in call order (0 once exhausted); an entry of
    ``None`` simulates a missing executable.
    """

    def __init__(self, exit_codes: Iterable[int | None] = ()) -> None:
        self.requests: list[CommandRequest] = []
        self._exit_codes = list(exit_codes)

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [request.argv for request in self.requests]

    def run(self, request: CommandRequest) -> CommandResult | None:
        self.requests.append(request)
        code = self._exit_codes.pop(0) if self._exit_codes else 0
        if code is None:
            return None
        return CommandResult(argv=request.argv, returncode=code)


class ScriptedSelect:
    """Stand-in for ``io.select`` returning queued answers."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.prompts: list[tuple[str, tuple[str, ...], str | None]] = []

    def __call__(self, text, choices, default=None) -> str:
        self.prompts.append((text, tuple(value for value, _ in choices), default))
        return self.answers.pop(0)
