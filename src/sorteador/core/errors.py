from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, UTC
from pathlib import Path
from typing import Mapping, Sequence
from uuid import uuid4

from sorteador.contracts import ForensicArtifact, Position, Slot


class DrawIntegrityError(RuntimeError):
    """Raised when the draw reaches a state the slot pool rules out.

    This is a programming fault, not user error: callers must not retry or
    degrade to a partial result.
    """

    def __init__(self, artifact: ForensicArtifact) -> None:
        super().__init__(artifact.message)
        self.artifact = artifact

    @property
    def error_code(self) -> str:
        return self.artifact.error_code


def build_forensic_artifact(
    engine_scope: str,
    error_code: str,
    message: str,
    state_snapshot: Mapping[str, object],
    context: Mapping[str, object],
    identifiers: Mapping[str, str],
    causal_fragment: Sequence[str],
) -> ForensicArtifact:
    return ForensicArtifact(
        artifact_id=str(uuid4()),
        timestamp=datetime.now(UTC),
        engine_scope=engine_scope,
        error_code=error_code,
        message=message,
        state_snapshot=dict(state_snapshot),
        context=dict(context),
        identifiers=dict(identifiers),
        causal_fragment=list(causal_fragment),
    )


def quota_exhausted_artifact(
    slot: Slot,
    positions: Sequence[Position],
    counters: Sequence[Mapping[str, int]],
    team_names: Sequence[str],
) -> ForensicArtifact:
    quotas = {p.name: p.quantity_per_team for p in positions}
    return build_forensic_artifact(
        engine_scope="assignment",
        error_code="POSITION_QUOTA_EXHAUSTED",
        message=f"no team has room left for '{slot.name.strip()}' at {slot.position}",
        state_snapshot={
            "quotas": quotas,
            "placed": {name: dict(counter) for name, counter in zip(team_names, counters)},
        },
        context={"slot": asdict(slot)},
        identifiers={"position": slot.position},
        causal_fragment=["shuffle", "greedy_placement", "quota_check"],
    )


def persist_forensic_artifact(artifact: ForensicArtifact, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"forensic_{artifact.artifact_id}.json"
    path.write_text(json.dumps(asdict(artifact), default=str, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
