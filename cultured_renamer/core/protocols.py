"""Protocol definitions (interfaces) for dependency injection."""
from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from .models import RelocationContext, RelocationResult


class Renamer(Protocol):
    """Interface a host renamer framework calls into.

    Implementations:
    - CulturedRenamer: routes by series type and restriction
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Renamer name for logging and selection."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        ...

    @property
    @abstractmethod
    def supports_moving(self) -> bool:
        """Whether the renamer picks a destination folder."""
        ...

    @property
    @abstractmethod
    def supports_renaming(self) -> bool:
        """Whether the renamer picks a file name."""
        ...

    @abstractmethod
    def get_new_path(self, ctx: RelocationContext) -> RelocationResult:
        """Plan the new name and location of a file. Never raises NamingError."""
        ...


class ProgressReporter(Protocol):
    """Interface for progress reporting."""

    @abstractmethod
    def start_phase(self, name: str, total: int) -> None:
        """Start a new processing phase."""
        ...

    @abstractmethod
    def advance_phase(self, amount: int = 1) -> None:
        """Advance the current phase by an amount."""
        ...

    @abstractmethod
    def end_phase(self) -> None:
        """Complete current phase."""
        ...

    @abstractmethod
    def info(self, message: str) -> None:
        """Log an info message."""
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        """Log a warning message."""
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        """Log an error message."""
        ...

    @abstractmethod
    def debug(self, message: str) -> None:
        ...
