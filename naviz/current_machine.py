"""Which machine is currently selected."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class CurrentMachine:
    """The current machine: none, one opened manually, or one from the repository by id."""

    machine_id: Optional[str] = None
    is_manual: bool = False

    def __post_init__(self) -> None:
        if self.is_manual and self.machine_id is not None:
            raise ValueError("a manually opened machine has no id")

    @classmethod
    def none(cls) -> CurrentMachine:
        return cls()

    @classmethod
    def manual(cls) -> CurrentMachine:
        return cls(is_manual=True)

    @classmethod
    def with_id(cls, machine_id: str) -> CurrentMachine:
        return cls(machine_id=machine_id)

    @property
    def is_none(self) -> bool:
        return self.machine_id is None and not self.is_manual

    def compatible_with(self, compatible_machines: Iterable[str]) -> bool:
        """Whether the current machine may be kept for these compatible ids.

        No machine is never compatible; a manually opened one always is.
        """
        if self.machine_id is not None:
            return self.machine_id in set(compatible_machines)
        return self.is_manual