from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any
from uuid import uuid4

from sorteador.contracts import (
    ActionRequest,
    ActionResult,
    ActionType,
    ClipboardAdapter,
    ClipboardUnavailableError,
    DrawSettings,
    FutsalVariant,
    GameFormat,
    Position,
    RosterValidationError,
    Team,
)
from sorteador.core import DrawIntegrityError, draw_random, persist_forensic_artifact, seeded_random
from sorteador.draw import (
    RosterValidator,
    SlotPool,
    TeamAssigner,
    describe_positions,
    format_label,
    format_roster,
    is_selection_complete,
    positions_for,
)
from sorteador.export import ClipboardExportService

logger = logging.getLogger(__name__)


def make_request_id(prefix: str = "req") -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


class DrawSession:
    """One sorting session: format choice, slot pool, and the last draw."""

    def __init__(self, settings: DrawSettings | None = None, clipboard: ClipboardAdapter | None = None) -> None:
        self.settings = settings or DrawSettings()
        self.settings.validate()
        self.rand = seeded_random(self.settings.seed) if self.settings.seed is not None else draw_random()
        self.validator = RosterValidator()
        self.assigner = TeamAssigner(self.rand.spawn("assign"), validator=self.validator, settings=self.settings)
        self.exporter = ClipboardExportService(clipboard) if clipboard is not None else None

        self.game_format: GameFormat | None = None
        self.variant: FutsalVariant | None = None
        self.pool = SlotPool()
        self.teams: list[Team] = []
        self.copied = False
        self.halted = False
        self.last_forensic_path: str | None = None

    @property
    def positions(self) -> list[Position]:
        return positions_for(self.game_format, self.variant)

    def reset(self) -> None:
        self.game_format = None
        self.variant = None
        self.pool.reset()
        self.teams = []
        self.copied = False
        self.halted = False
        self.last_forensic_path = None

    def handle_action(self, request: ActionRequest) -> ActionResult:
        if self.halted and self._normalize_action(request.action_type) != ActionType.RESET:
            return ActionResult(
                request.request_id,
                False,
                f"session halted after integrity failure; forensic={self.last_forensic_path}",
                {"forensic_path": self.last_forensic_path},
            )
        try:
            return self._handle_action_core(request)
        except DrawIntegrityError as exc:
            if self.settings.forensic_dir is not None:
                self.last_forensic_path = str(persist_forensic_artifact(exc.artifact, self.settings.forensic_dir))
            self.halted = True
            logger.error("draw integrity failure %s; forensic=%s", exc.error_code, self.last_forensic_path)
            return ActionResult(
                request.request_id,
                False,
                f"integrity failure: {exc.error_code}",
                {"forensic_path": self.last_forensic_path},
            )

    def _normalize_action(self, action: ActionType | str) -> ActionType | None:
        if isinstance(action, ActionType):
            return action
        try:
            return ActionType(str(action))
        except ValueError:
            return None

    def _handle_action_core(self, request: ActionRequest) -> ActionResult:
        action = self._normalize_action(request.action_type)
        payload = request.payload

        if action == ActionType.SELECT_FORMAT:
            if self.game_format is not None:
                return ActionResult(request.request_id, False, "format already chosen; go back or reset first")
            try:
                self.game_format = GameFormat(str(payload.get("format")))
            except ValueError:
                return ActionResult(request.request_id, False, f"invalid format '{payload.get('format')}'")
            self._initialize_slots()
            return ActionResult(request.request_id, True, f"format set to {format_label(self.game_format)}", self.snapshot())

        if action == ActionType.SELECT_VARIANT:
            if self.game_format is not GameFormat.FUTSAL:
                return ActionResult(request.request_id, False, "formation choice only applies to futsal")
            if self.variant is not None:
                return ActionResult(request.request_id, False, "formation already chosen; go back or reset first")
            try:
                self.variant = FutsalVariant(str(payload.get("variant")))
            except ValueError:
                return ActionResult(request.request_id, False, f"invalid variant '{payload.get('variant')}'")
            self._initialize_slots()
            return ActionResult(
                request.request_id,
                True,
                f"formation set: {describe_positions(self.positions)}",
                self.snapshot(),
            )

        if action == ActionType.BACK:
            if self.game_format is GameFormat.FUTSAL and self.variant is None:
                self.game_format = None
                return ActionResult(request.request_id, True, "back to format choice", self.snapshot())
            self.reset()
            return ActionResult(request.request_id, True, "back to start", self.snapshot())

        if action == ActionType.SET_PLAYER_NAME:
            if not self.pool.initialized:
                return ActionResult(request.request_id, False, "no slots yet; finish choosing the formation")
            try:
                index = int(payload["index"])
                slot = self.pool.update(index, str(payload.get("name", "")))
            except (KeyError, TypeError, ValueError):
                return ActionResult(request.request_id, False, "payload needs an integer 'index' and a 'name'")
            except IndexError as exc:
                return ActionResult(request.request_id, False, str(exc))
            self.teams = []
            self.copied = False
            return ActionResult(
                request.request_id,
                True,
                f"{self.pool.filled_count}/{self.pool.required_count} filled",
                {"slot": asdict(slot), "filled": self.pool.filled_count, "required": self.pool.required_count},
            )

        if action == ActionType.DRAW_TEAMS:
            return self._draw(request)

        if action == ActionType.COPY_TEAMS:
            return self._copy(request)

        if action == ActionType.RESET:
            self.reset()
            return ActionResult(request.request_id, True, "session reset", self.snapshot())

        if action == ActionType.GET_STATE:
            return ActionResult(request.request_id, True, "ok", self.snapshot())

        return ActionResult(request.request_id, False, f"unsupported action '{request.action_type}'")

    def _initialize_slots(self) -> None:
        if not is_selection_complete(self.game_format, self.variant):
            return
        if self.pool.initialize(self.positions):
            logger.debug("initialized %d slots for %s", self.pool.required_count, self.game_format.value)

    def _draw(self, request: ActionRequest) -> ActionResult:
        if not self.pool.initialized:
            return ActionResult(request.request_id, False, "no slots yet; finish choosing the formation")
        positions = self.positions
        try:
            first, second = self.assigner.assign(self.pool.slots, positions)
        except RosterValidationError as exc:
            logger.warning("draw rejected: %s", exc)
            return ActionResult(
                request.request_id,
                False,
                f"fill all {exc.required} positions: {exc.missing} still missing",
                {"missing": exc.missing, "required": exc.required, "issues": [asdict(i) for i in exc.issues]},
            )
        self.teams = [first, second]
        self.copied = False
        logger.info("draw complete for %s (%d slots)", self.game_format.value, len(self.pool.slots))
        return ActionResult(request.request_id, True, "teams drawn", {"teams": [asdict(t) for t in self.teams]})

    def _copy(self, request: ActionRequest) -> ActionResult:
        if self.exporter is None:
            return ActionResult(request.request_id, False, "no clipboard available")
        try:
            text = self.exporter.copy_teams(self.teams)
        except ClipboardUnavailableError as exc:
            logger.warning("copy failed: %s", exc)
            return ActionResult(request.request_id, False, f"copy failed: {exc}")
        if text is None:
            return ActionResult(request.request_id, False, "nothing to copy; draw the teams first")
        self.copied = True
        return ActionResult(request.request_id, True, "teams copied", {"text": text})

    def roster_text(self) -> str | None:
        return format_roster(self.teams)

    def snapshot(self) -> dict[str, Any]:
        positions = self.positions
        return {
            "format": self.game_format.value if self.game_format else None,
            "variant": self.variant.value if self.variant else None,
            "positions": [asdict(p) for p in positions],
            "slots": [asdict(s) for s in self.pool.slots],
            "groups": [
                {
                    "title": group.title,
                    "entries": [
                        {"index": index, "name": slot.name, "placeholder": group.placeholder(offset)}
                        for offset, (index, slot) in enumerate(group.entries)
                    ],
                }
                for group in self.pool.groups(positions)
            ],
            "filled": self.pool.filled_count,
            "required": self.pool.required_count,
            "teams": [asdict(t) for t in self.teams],
            "copied": self.copied,
            "halted": self.halted,
        }
