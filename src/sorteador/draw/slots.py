from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from sorteador.contracts import Position, Slot

from .catalog import total_slots


def build_slots(positions: Sequence[Position]) -> list[Slot]:
    slots: list[Slot] = []
    for position in positions:
        slots.extend(Slot(position=position.name) for _ in range(position.quantity_per_team * 2))
    return slots


@dataclass(slots=True)
class SlotGroup:
    position: Position
    entries: list[tuple[int, Slot]]

    def placeholder(self, offset: int) -> str:
        return f"{self.position.name} {offset + 1}"

    @property
    def title(self) -> str:
        per_team = self.position.quantity_per_team
        return f"{self.position.name} ({per_team * 2} jogadores - {per_team} por time)"


class SlotPool:
    """Name entries for both teams, built once per formation choice."""

    def __init__(self) -> None:
        self._slots: list[Slot] = []
        self._required = 0
        self._initialized = False

    @property
    def slots(self) -> list[Slot]:
        return self._slots

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self, positions: Sequence[Position]) -> bool:
        if self._initialized or self._slots:
            return False
        for position in positions:
            position.validate()
        self._slots = build_slots(positions)
        self._required = total_slots(positions)
        self._initialized = bool(self._slots)
        return self._initialized

    def reset(self) -> None:
        self._slots = []
        self._required = 0
        self._initialized = False

    def update(self, index: int, name: str) -> Slot:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"slot index {index} out of range (0..{len(self._slots) - 1})")
        slot = self._slots[index]
        slot.name = name
        return slot

    @property
    def required_count(self) -> int:
        return self._required

    @property
    def filled_count(self) -> int:
        return sum(1 for s in self._slots if s.is_filled)

    @property
    def missing_count(self) -> int:
        return max(self._required - self.filled_count, 0)

    @property
    def is_complete(self) -> bool:
        return self._initialized and self.missing_count == 0

    def groups(self, positions: Sequence[Position]) -> Iterator[SlotGroup]:
        for position in positions:
            entries = [(i, s) for i, s in enumerate(self._slots) if s.position == position.name]
            yield SlotGroup(position=position, entries=entries)
