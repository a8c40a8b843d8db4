"""A named store of shared data and the interface of decision-making structures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Blackboard:
    """Named values shared between the parts of a decision-making structure."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._data

    def __len__(self) -> int:
        return len(self._data)

    def add_data(self, name: str, data: Any) -> None:
        """Store a new entry; raises KeyError if the name is already present."""
        if name in self._data:
            raise KeyError(f"data {name!r} of type {type(data).__name__} already in blackboard")
        self._data[name] = data

    def change_data(self, name: str, data: Any) -> None:
        """Replace an entry with a value of the same type."""
        if name not in self._data:
            raise KeyError(f"data {name!r} not found in blackboard")
        current = self._data[name]
        if not isinstance(data, type(current)):
            raise TypeError(
                f"data {name!r} holds {type(current).__name__}, not {type(data).__name__}"
            )
        self._data[name] = data

    def get_data(self, name: str) -> Any:
        """Return the stored entry; raises KeyError if it is missing."""
        try:
            return self._data[name]
        except KeyError:
            raise KeyError(f"data {name!r} not found in blackboard") from None


class DecisionMaking(ABC):
    """Anything that can be advanced by a time step."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the decision-making structure by ``delta_time`` seconds."""