from __future__ import annotations

from typing import Sequence

from sorteador.contracts import FutsalVariant, GameFormat, Position

_FUTSAL_FORMATIONS: dict[FutsalVariant, tuple[Position, ...]] = {
    FutsalVariant.FORMATION1: (
        Position("Goleiro", 1),
        Position("Ala", 2),
        Position("Fixo", 1),
        Position("Pivô", 1),
    ),
    FutsalVariant.FORMATION2: (
        Position("Goleiro", 1),
        Position("Defensor", 2),
        Position("Atacante", 2),
    ),
}

_SOCIETY_FORMATION: tuple[Position, ...] = (
    Position("Goleiro", 1),
    Position("Zagueiro", 1),
    Position("Lateral", 2),
    Position("Meio-campista", 2),
    Position("Atacante", 1),
)

_FORMAT_LABELS = {
    GameFormat.FUTSAL: "Futsal",
    GameFormat.SOCIETY: "Society",
}

_VARIANT_LABELS = {
    FutsalVariant.FORMATION1: "Formação 1",
    FutsalVariant.FORMATION2: "Formação 2",
}


def _coerce_format(game_format: GameFormat | str | None) -> GameFormat | None:
    if game_format is None or isinstance(game_format, GameFormat):
        return game_format
    return GameFormat(str(game_format))


def _coerce_variant(variant: FutsalVariant | str | None) -> FutsalVariant | None:
    if variant is None or isinstance(variant, FutsalVariant):
        return variant
    return FutsalVariant(str(variant))


def is_selection_complete(game_format: GameFormat | str | None, variant: FutsalVariant | str | None = None) -> bool:
    fmt = _coerce_format(game_format)
    if fmt is None:
        return False
    return fmt is not GameFormat.FUTSAL or _coerce_variant(variant) is not None


def positions_for(game_format: GameFormat | str | None, variant: FutsalVariant | str | None = None) -> list[Position]:
    """Ordered positions one team must field for the selected format.

    An incomplete selection (no format yet, or futsal without a formation)
    yields an empty list. Order matters: it groups the input slots and is the
    primary sort key of a drawn roster.
    """
    fmt = _coerce_format(game_format)
    if fmt is GameFormat.SOCIETY:
        return list(_SOCIETY_FORMATION)
    if fmt is GameFormat.FUTSAL:
        chosen = _coerce_variant(variant)
        if chosen is None:
            return []
        return list(_FUTSAL_FORMATIONS[chosen])
    return []


def players_per_team(positions: Sequence[Position]) -> int:
    return sum(p.quantity_per_team for p in positions)


def total_slots(positions: Sequence[Position]) -> int:
    return players_per_team(positions) * 2


def position_order(positions: Sequence[Position]) -> dict[str, int]:
    return {p.name: index for index, p in enumerate(positions)}


def describe_positions(positions: Sequence[Position]) -> str:
    return ", ".join(f"{p.quantity_per_team} {p.name}" for p in positions)


def format_label(game_format: GameFormat | str) -> str:
    return _FORMAT_LABELS[_coerce_format(game_format)]


def variant_label(variant: FutsalVariant | str) -> str:
    return _VARIANT_LABELS[_coerce_variant(variant)]
