"""Runtime settings for a scaffold run.

Settings are read once from an explicit environment mapping and validated
with Pydantic, so components never consult ``os.environ`` directly.

Example:
    >>> settings = Settings.from_env({"npm_config_user_agent": "yarn/1.22.19"})
    >>> settings.user_agent
    'yarn/1.22.19'
    >>> settings.generator_argv(Path("/tmp/demo"))[:2]
    ('npx', 'create-next-app@latest')
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .catalog import default_boilerplates_root
from .errors import ConfigurationError

USER_AGENT_ENV = "npm_config_user_agent"
BOILERPLATES_DIR_ENV = "NEXT_STARTER_BOILERPLATES_DIR"
GENERATOR_ENV = "NEXT_STARTER_GENERATOR"

DEFAULT_GENERATOR = "create-next-app@latest"
DEFAULT_GENERATOR_FLAGS = ("--eslint", "--tailwind", "--app")


class Settings(BaseModel):
    """Environment-derived configuration.

    Attributes:
        user_agent: Package-manager hint (``npm_config_user_agent``).
        boilerplates_dir: Root directory holding one folder per variant.
        generator: Package spec passed to ``npx`` to create the base app.
        generator_flags: Fixed flags for the generator (lint, Tailwind,
            app router).
        npx: Executable used to launch the generator.
    """

    model_config = ConfigDict(frozen=True)

    user_agent: str = ""
    boilerplates_dir: Path = Field(default_factory=default_boilerplates_root)
    generator: str = DEFAULT_GENERATOR
    generator_flags: tuple[str, ...] = DEFAULT_GENERATOR_FLAGS
    npx: str = "npx"

    @field_validator("generator", "npx", mode="before")
    @classmethod
    def require_non_blank(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            raise ValueError("must not be blank")
        return value.strip() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "Settings":
        """Build settings from an environment mapping.

        Raises:
            ConfigurationError: An override fails validation.
        """
        values: dict[str, object] = {"user_agent": environ.get(USER_AGENT_ENV, "")}
        boilerplates_dir = environ.get(BOILERPLATES_DIR_ENV, "").strip()
        if boilerplates_dir:
            values["boilerplates_dir"] = Path(boilerplates_dir).expanduser()
        if GENERATOR_ENV in environ:
            values["generator"] = environ[GENERATOR_ENV]
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid environment configuration: {exc}") from exc

    def generator_argv(self, target_dir: Path) -> tuple[str, ...]:
        """Return the generator command line for ``target_dir``."""
        return (self.npx, self.generator, str(target_dir), *self.generator_flags)
