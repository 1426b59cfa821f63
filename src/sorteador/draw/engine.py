from __future__ import annotations

import logging
from typing import Callable, Sequence

from sorteador.contracts import DrawSettings, Position, RandomSource, RosterPlayer, Slot, Team
from sorteador.core import DrawIntegrityError, quota_exhausted_artifact

from .catalog import position_order
from .validation import RosterValidator

logger = logging.getLogger(__name__)


def roster_sort_key(order: dict[str, int]) -> Callable[[RosterPlayer], tuple[int, str]]:
    return lambda player: (order[player.position], player.name)


class TeamAssigner:
    """Splits a filled slot pool into two teams that meet every position quota.

    Slots are shuffled, then placed one at a time: when both teams still need
    the slot's position a coin flip decides, otherwise the player goes to the
    only team with room left.
    """

    def __init__(
        self,
        random_source: RandomSource,
        validator: RosterValidator | None = None,
        settings: DrawSettings | None = None,
    ) -> None:
        self._random = random_source
        self._validator = validator or RosterValidator()
        self._settings = settings or DrawSettings()

    def assign(self, slots: Sequence[Slot], positions: Sequence[Position]) -> tuple[Team, Team]:
        self._validator.require_ready(slots, positions)

        quotas = {p.name: p.quantity_per_team for p in positions}
        first_name, second_name = self._settings.team_names
        first, second = Team(first_name), Team(second_name)
        counters: tuple[dict[str, int], dict[str, int]] = (
            {name: 0 for name in quotas},
            {name: 0 for name in quotas},
        )

        shuffled = list(slots)
        self._random.shuffle(shuffled)

        for slot in shuffled:
            quota = quotas[slot.position]
            first_needs = counters[0][slot.position] < quota
            second_needs = counters[1][slot.position] < quota
            if first_needs and second_needs:
                side = 0 if self._random.coin_flip() else 1
            elif first_needs:
                side = 0
            elif second_needs:
                side = 1
            else:
                raise DrawIntegrityError(
                    quota_exhausted_artifact(slot, positions, counters, (first_name, second_name))
                )
            team = first if side == 0 else second
            team.players.append(RosterPlayer(name=slot.name.strip(), position=slot.position))
            counters[side][slot.position] += 1

        key = roster_sort_key(position_order(positions))
        first.players.sort(key=key)
        second.players.sort(key=key)
        logger.info("drew %d players into %s / %s", len(shuffled), first_name, second_name)
        return first, second
