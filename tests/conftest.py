# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import next_starter.io as io
import next_starter.log as starter_log


@pytest.fixture(autouse=True)
def _default_console_patches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(starter_log, "_configured_level", None)
    monkeypatch.setattr(starter_log, "_no_color_override", None)
    monkeypatch.delenv("NEXT_STARTER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NEXT_STARTER_BOILERPLATES_DIR", raising=False)
    monkeypatch.delenv("NEXT_STARTER_GENERATOR", raising=False)
    monkeypatch.delenv("npm_config_user_agent", raising=False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)
