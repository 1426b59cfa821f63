from __future__ import annotations

import pytest

from sorteador.contracts import ClipboardUnavailableError, RosterPlayer, Team
from sorteador.draw import format_roster
from sorteador.export import ClipboardExportService

from tests.helpers import DeniedClipboard, RecordingClipboard


def _teams() -> list[Team]:
    return [
        Team("Time Azul", [RosterPlayer("Dida", "Goleiro"), RosterPlayer("Cafu", "Lateral")]),
        Team("Time Vermelho", [RosterPlayer("Marcos", "Goleiro"), RosterPlayer("Júnior", "Lateral")]),
    ]


def test_roster_text_layout():
    assert format_roster(_teams()) == (
        "Time Azul x Time Vermelho\n"
        "\n"
        "Time Azul\n"
        "Dida - Goleiro\n"
        "Cafu - Lateral\n"
        "\n"
        "Time Vermelho\n"
        "Marcos - Goleiro\n"
        "Júnior - Lateral\n"
    )


def test_roster_text_is_deterministic():
    assert format_roster(_teams()) == format_roster(_teams())


@pytest.mark.parametrize("count", [0, 1, 3])
def test_roster_text_needs_exactly_two_teams(count):
    teams = (_teams() * 2)[:count]
    assert format_roster(teams) is None


def test_copy_writes_roster_to_clipboard():
    clipboard = RecordingClipboard()
    text = ClipboardExportService(clipboard).copy_teams(_teams())
    assert clipboard.writes == [text]
    assert text.startswith("Time Azul x Time Vermelho\n")


def test_copy_before_draw_is_a_noop():
    clipboard = RecordingClipboard()
    assert ClipboardExportService(clipboard).copy_teams([]) is None
    assert clipboard.writes == []


def test_clipboard_failure_is_wrapped():
    with pytest.raises(ClipboardUnavailableError) as ex:
        ClipboardExportService(DeniedClipboard()).copy_teams(_teams())
    assert isinstance(ex.value.__cause__, PermissionError)
