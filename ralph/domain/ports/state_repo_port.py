from abc import ABC, abstractmethod

from ralph.domain.entities.run_state import RunState


class StateRepoPort(ABC):
    """Port for run state persistence."""

    @abstractmethod
    def load(self) -> RunState:
        """Load state, or a fresh idle state when none is stored."""

    @abstractmethod
    def save(self, state: RunState) -> RunState:
        """Persist state and return it with a refreshed `updated_at`."""

    @abstractmethod
    def remove(self) -> bool:
        """Delete stored state. Returns False if there was nothing to delete."""
