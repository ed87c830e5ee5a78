"""Pydantic models for scaffold choices and catalog entries."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

PACKAGE_MANAGER_VALUES = ("pnpm", "npm", "yarn")
PackageManager = Literal["npm", "yarn", "pnpm"]

UI_VARIANT_VALUES = ("none", "shadcn", "mui")
UiVariant = Literal["none", "shadcn", "mui"]


class Choice(BaseModel):
    """Validated selections for one scaffold run.

    Attributes:
        project_name: Directory name of the new application.
        package_manager: Package manager used for installs.
        ui_variant: Boilerplate variant to overlay.

    Example:
        >>> Choice(project_name=" demo ", package_manager="pnpm", ui_variant="mui")
        Choice(project_name='demo', package_manager='pnpm', ui_variant='mui')
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(min_length=1)
    package_manager: PackageManager
    ui_variant: UiVariant

    @field_validator("project_name", mode="before")
    @classmethod
    def normalize_project_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


class CatalogEntry(BaseModel):
    """Boilerplate, dependency lists, and post-init command for a variant.

    Attributes:
        variant: UI variant this entry belongs to.
        label: Human-readable name shown in prompts.
        boilerplate: Directory name under the boilerplates root.
        dependencies: Runtime packages, installed in order.
        dev_dependencies: Development packages, installed in order.
        post_init: Command run in the project after installs (empty for none).
    """

    model_config = ConfigDict(frozen=True)

    variant: UiVariant
    label: str
    boilerplate: str = Field(min_length=1)
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    post_init: tuple[str, ...] = ()

    @model_validator(mode="after")
    def reject_duplicate_packages(self) -> "CatalogEntry":
        seen: set[str] = set()
        for package in (*self.dependencies, *self.dev_dependencies):
            if package in seen:
                raise ValueError(f"duplicate package in {self.variant} entry: {package}")
            seen.add(package)
        return self

    @property
    def needs_post_init(self) -> bool:
        return bool(self.post_init)
