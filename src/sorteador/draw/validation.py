from __future__ import annotations

from collections import Counter
from typing import Sequence

from sorteador.contracts import Position, RosterValidationError, Slot, ValidationIssue, ValidationResult

from .catalog import total_slots


class RosterValidator:
    """Pre-draw gate: the pool must be exactly two teams' worth of named slots."""

    def validate(self, slots: Sequence[Slot], positions: Sequence[Position]) -> ValidationResult:
        issues: list[ValidationIssue] = []
        required = total_slots(positions)

        if not positions:
            issues.append(
                ValidationIssue(
                    code="FORMATION_NOT_SELECTED",
                    severity="blocking",
                    field_path="positions",
                    message="choose a format (and formation for futsal) before drawing",
                )
            )

        if len(slots) != required:
            issues.append(
                ValidationIssue(
                    code="SLOT_POOL_SIZE_MISMATCH",
                    severity="blocking",
                    field_path="slots",
                    message=f"expected {required} slots, got {len(slots)}",
                )
            )

        missing = self.missing_entries(slots, positions)
        if missing:
            issues.append(
                ValidationIssue(
                    code="ROSTER_INCOMPLETE",
                    severity="blocking",
                    field_path="slots",
                    message=f"fill all {required} positions: {missing} still empty",
                )
            )

        known = {p.name for p in positions}
        unknown = sorted({s.position for s in slots if s.position not in known})
        for name in unknown:
            issues.append(
                ValidationIssue(
                    code="UNKNOWN_POSITION",
                    severity="blocking",
                    field_path=f"slots.{name}",
                    message=f"position '{name}' is not part of the formation",
                )
            )

        per_position = Counter(s.position for s in slots)
        for position in positions:
            expected = position.quantity_per_team * 2
            if per_position[position.name] != expected:
                issues.append(
                    ValidationIssue(
                        code="POSITION_COUNT_MISMATCH",
                        severity="blocking",
                        field_path=f"slots.{position.name}",
                        message=f"expected {expected} slots for {position.name}, got {per_position[position.name]}",
                    )
                )

        return ValidationResult(ok=not issues, issues=issues)

    @staticmethod
    def missing_entries(slots: Sequence[Slot], positions: Sequence[Position]) -> int:
        filled = sum(1 for s in slots if s.is_filled)
        return max(total_slots(positions) - filled, 0)

    def require_ready(self, slots: Sequence[Slot], positions: Sequence[Position]) -> None:
        result = self.validate(slots, positions)
        if not result.ok:
            raise RosterValidationError(
                result.issues,
                missing=self.missing_entries(slots, positions),
                required=total_slots(positions),
            )
