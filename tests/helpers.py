from __future__ import annotations

from collections import Counter

from sorteador.contracts import ActionRequest, ActionResult, ActionType, Position, Slot, Team
from sorteador.draw import build_slots
from sorteador.runtime import DrawSession, make_request_id

SELECTIONS = [
    ("futsal", "formation1"),
    ("futsal", "formation2"),
    ("society", None),
]


def filled_slots(positions: list[Position]) -> list[Slot]:
    slots = build_slots(positions)
    for index, slot in enumerate(slots):
        slot.name = f"{slot.position} Player {index:02d}"
    return slots


def dispatch(session: DrawSession, action: ActionType, payload: dict | None = None) -> ActionResult:
    return session.handle_action(ActionRequest(make_request_id(), action, payload or {}))


def position_counts(team: Team) -> Counter:
    return Counter(p.position for p in team.players)


class RecordingClipboard:
    def __init__(self) -> None:
        self.writes: list[str] = []

    def write_text(self, text: str) -> None:
        self.writes.append(text)


class DeniedClipboard:
    def write_text(self, text: str) -> None:
        raise PermissionError("clipboard access denied")
