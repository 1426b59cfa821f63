from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Protocol, Sequence


class GameFormat(str, Enum):
    FUTSAL = "futsal"
    SOCIETY = "society"


class FutsalVariant(str, Enum):
    FORMATION1 = "formation1"
    FORMATION2 = "formation2"


class ActionType(str, Enum):
    SELECT_FORMAT = "select_format"
    SELECT_VARIANT = "select_variant"
    BACK = "back"
    SET_PLAYER_NAME = "set_player_name"
    DRAW_TEAMS = "draw_teams"
    COPY_TEAMS = "copy_teams"
    RESET = "reset"
    GET_STATE = "get_state"


class RandomSource(Protocol):
    def coin_flip(self) -> bool: ...

    def shuffle(self, items: list[Any]) -> None: ...

    def spawn(self, substream_id: str) -> RandomSource: ...


class ClipboardAdapter(Protocol):
    def write_text(self, text: str) -> None: ...


@dataclass(frozen=True, slots=True)
class Position:
    name: str
    quantity_per_team: int

    def validate(self) -> None:
        if not self.name.strip():
            raise ValueError("position name must not be empty")
        if self.quantity_per_team < 1:
            raise ValueError(f"position '{self.name}' needs at least one player per team")


@dataclass(slots=True)
class Slot:
    position: str
    name: str = ""

    @property
    def is_filled(self) -> bool:
        return self.name.strip() != ""


@dataclass(frozen=True, slots=True)
class RosterPlayer:
    name: str
    position: str


@dataclass(slots=True)
class Team:
    name: str
    players: list[RosterPlayer] = field(default_factory=list)

    def count_at(self, position: str) -> int:
        return sum(1 for p in self.players if p.position == position)


@dataclass(slots=True)
class DrawSettings:
    team_names: tuple[str, str] = ("Time Azul", "Time Vermelho")
    seed: int | None = None
    forensic_dir: Path | None = None
    copied_feedback_ms: int = 2000

    def validate(self) -> None:
        if len(self.team_names) != 2:
            raise ValueError("exactly two team names are required")
        first, second = (name.strip() for name in self.team_names)
        if not first or not second:
            raise ValueError("team names must not be empty")
        if first == second:
            raise ValueError("team names must be distinct")
        if self.copied_feedback_ms < 0:
            raise ValueError("copied_feedback_ms must be >= 0")


@dataclass(slots=True)
class ActionRequest:
    request_id: str
    action_type: ActionType | str
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ActionResult:
    request_id: str
    success: bool
    message: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ValidationIssue:
    code: str
    severity: str
    field_path: str
    message: str


@dataclass(slots=True)
class ValidationResult:
    ok: bool
    issues: list[ValidationIssue]


class ValidationError(ValueError):
    def __init__(self, issues: list[ValidationIssue]) -> None:
        message = "; ".join(f"{i.code}:{i.field_path}:{i.message}" for i in issues)
        super().__init__(message)
        self.issues = issues


class RosterValidationError(ValidationError):
    """Slot pool is not ready for a draw; ``missing`` entries still need names."""

    def __init__(self, issues: list[ValidationIssue], *, missing: int, required: int) -> None:
        super().__init__(issues)
        self.missing = missing
        self.required = required


class ClipboardUnavailableError(RuntimeError):
    pass


@dataclass(slots=True)
class ForensicArtifact:
    artifact_id: str
    timestamp: datetime
    engine_scope: str
    error_code: str
    message: str
    state_snapshot: Mapping[str, Any]
    context: Mapping[str, Any]
    identifiers: Mapping[str, str]
    causal_fragment: Sequence[str]
