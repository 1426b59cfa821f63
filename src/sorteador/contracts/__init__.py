from .types import (
    ActionRequest,
    ActionResult,
    ActionType,
    ClipboardAdapter,
    ClipboardUnavailableError,
    DrawSettings,
    ForensicArtifact,
    FutsalVariant,
    GameFormat,
    Position,
    RandomSource,
    RosterPlayer,
    RosterValidationError,
    Slot,
    Team,
    ValidationError,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "ActionRequest",
    "ActionResult",
    "ActionType",
    "ClipboardAdapter",
    "ClipboardUnavailableError",
    "DrawSettings",
    "ForensicArtifact",
    "FutsalVariant",
    "GameFormat",
    "Position",
    "RandomSource",
    "RosterPlayer",
    "RosterValidationError",
    "Slot",
    "Team",
    "ValidationError",
    "ValidationIssue",
    "ValidationResult",
]
