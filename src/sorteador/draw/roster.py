from __future__ import annotations

from typing import Sequence

from sorteador.contracts import Team


def format_roster(teams: Sequence[Team]) -> str | None:
    """Plain-text export of a finished draw, or None before one exists."""
    if len(teams) != 2:
        return None
    first, second = teams
    lines = [f"{first.name} x {second.name}", ""]
    for index, team in enumerate((first, second)):
        if index:
            lines.append("")
        lines.append(team.name)
        lines.extend(f"{p.name} - {p.position}" for p in team.players)
    return "\n".join(lines) + "\n"
