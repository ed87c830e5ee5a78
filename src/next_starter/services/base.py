"""Base service ABC.

Services extend BaseService and implement _run(request) -> T. They raise
ScaffoldFailure on expected errors. __call__ catches ScaffoldFailure and
invokes _handle_failure; the default re-raises. Callers catch
ScaffoldFailure for interface-specific handling (the CLI dies with a
diagnostic).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..errors import ScaffoldFailure

R = TypeVar("R")
T = TypeVar("T")


class BaseService(ABC, Generic[R, T]):
    """Abstract base for orchestration services."""

    def __call__(self, request: R) -> T:
        try:
            return self._run(request)
        except ScaffoldFailure as e:
            return self._handle_failure(e)

    @abstractmethod
    def _run(self, request: R) -> T:
        """Execute the service logic. Raise ScaffoldFailure on expected errors."""
        ...

    def _handle_failure(self, error: ScaffoldFailure) -> T:
        """Handle ScaffoldFailure. Default re-raises."""
        raise error
