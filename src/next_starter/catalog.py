"""The UI-variant catalog.

One row per variant; adding a UI library means adding one entry to
``CATALOG`` and one directory under ``boilerplates/``.

Example:
    >>> resolve("shadcn").needs_post_init
    True
    >>> resolve("mui").boilerplate
    'mui'
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib import resources
from pathlib import Path

from .errors import ConfigurationError
from .models import UI_VARIANT_VALUES, CatalogEntry, UiVariant

_BASE_DEV_DEPENDENCIES = ("standard-version", "zod")
_TAILWIND_TOOLCHAIN = ("tailwindcss", "postcss", "autoprefixer")
_FORMS_AND_DATA = (
    "@hookform/resolvers",
    "@tanstack/react-query",
    "axios",
    "react-hook-form",
)

CATALOG: Mapping[UiVariant, CatalogEntry] = {
    "none": CatalogEntry(
        variant="none",
        label="Tailwind only",
        boilerplate="none",
        dependencies=(*_FORMS_AND_DATA, "react-icons"),
        dev_dependencies=(*_BASE_DEV_DEPENDENCIES, *_TAILWIND_TOOLCHAIN),
    ),
    "shadcn": CatalogEntry(
        variant="shadcn",
        label="ShadCN UI",
        boilerplate="shadcn",
        dependencies=(
            *_FORMS_AND_DATA,
            "react-icons",
            "lucide-react",
            "clsx",
            "tailwind-merge",
            "class-variance-authority",
            "shadcn-ui",
        ),
        dev_dependencies=(*_BASE_DEV_DEPENDENCIES, *_TAILWIND_TOOLCHAIN),
        post_init=("npx", "shadcn@latest", "init"),
    ),
    "mui": CatalogEntry(
        variant="mui",
        label="Material UI (MUI)",
        boilerplate="mui",
        dependencies=(
            "@mui/material",
            "@mui/icons-material",
            "@emotion/react",
            "@emotion/styled",
            *_FORMS_AND_DATA,
        ),
        dev_dependencies=_BASE_DEV_DEPENDENCIES,
    ),
}


def resolve(ui_variant: str, catalog: Mapping[str, CatalogEntry] | None = None) -> CatalogEntry:
    """Return the catalog entry for ``ui_variant``.

    Raises:
        ConfigurationError: No entry exists for the variant.
    """
    table = CATALOG if catalog is None else catalog
    try:
        return table[ui_variant]  # type: ignore[index]
    except KeyError:
        raise ConfigurationError(
            f"no boilerplate catalog entry for UI variant: {ui_variant!r}",
            recovery_hint=f"expected one of: {', '.join(UI_VARIANT_VALUES)}",
        ) from None


def variant_choices() -> tuple[tuple[str, str], ...]:
    """Return ``(variant, label)`` pairs in prompt order."""
    return tuple((variant, CATALOG[variant].label) for variant in UI_VARIANT_VALUES)


def default_boilerplates_root() -> Path:
    """Return the boilerplates directory shipped inside the package."""
    return Path(str(resources.files("next_starter").joinpath("boilerplates")))


def boilerplate_path(entry: CatalogEntry, root: Path | None = None) -> Path:
    """Return the source directory for ``entry`` under ``root``."""
    return (root or default_boilerplates_root()) / entry.boilerplate
