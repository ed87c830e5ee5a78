"""Package manager detection and install command lines.

Example:
    >>> detect("pnpm/8.0.0 npm/? node/v18.17.0 linux x64")
    'pnpm'
    >>> install_argv("yarn", ["axios"], dev=True)
    ('yarn', 'add', 'axios', '--dev')
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import ConfigurationError
from .models import PackageManager

DEFAULT_PACKAGE_MANAGER: PackageManager = "npm"

# Checked in order against the start of the user agent string.
_USER_AGENT_PREFIXES: tuple[PackageManager, ...] = ("pnpm", "yarn")


def detect(user_agent: str | None) -> PackageManager:
    """Guess the invoking package manager from an ``npm_config_user_agent`` hint.

    Args:
        user_agent: Raw hint, e.g. ``"pnpm/8.0.0 node/18"``. ``None`` or an
            empty string is a valid input.

    Returns:
        ``"pnpm"`` or ``"yarn"`` when the hint starts with that token,
        otherwise ``"npm"``.
    """
    hint = (user_agent or "").strip()
    for candidate in _USER_AGENT_PREFIXES:
        if hint.startswith(candidate):
            return candidate
    return DEFAULT_PACKAGE_MANAGER


def install_argv(
    package_manager: str, packages: Sequence[str], *, dev: bool
) -> tuple[str, ...]:
    """Build the add/install command line for ``packages``."""
    names = tuple(packages)
    if package_manager == "npm":
        return ("npm", "install", *(("--save-dev",) if dev else ()), *names)
    if package_manager == "yarn":
        return ("yarn", "add", *names, *(("--dev",) if dev else ()))
    if package_manager == "pnpm":
        return ("pnpm", "add", *names, *(("-D",) if dev else ()))
    raise ConfigurationError(f"unsupported package manager: {package_manager}")
