from .base import BaseService
from .scaffold import (
    ScaffoldOutcome,
    ScaffoldProjectService,
    ScaffoldRequest,
    ScaffoldState,
)

__all__ = [
    "BaseService",
    "ScaffoldOutcome",
    "ScaffoldProjectService",
    "ScaffoldRequest",
    "ScaffoldState",
]
