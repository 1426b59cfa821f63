from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Sequence

from sorteador.contracts import ActionRequest, ActionResult, ActionType, DrawSettings, FutsalVariant, GameFormat
from sorteador.draw import describe_positions, format_label, positions_for, variant_label
from sorteador.runtime import DrawSession, make_request_id

EXIT_INVALID_ROSTER = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sorteador de Times: random two-team draw by position")
    parser.add_argument("--format", choices=[f.value for f in GameFormat], help="game format")
    parser.add_argument("--variant", choices=[v.value for v in FutsalVariant], help="futsal formation")
    parser.add_argument("--names-file", type=Path, default=None, help="one player name per line, in slot order")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible draws")
    parser.add_argument("--team-names", nargs=2, metavar=("FIRST", "SECOND"), default=None, help="team labels")
    parser.add_argument("--forensic-dir", type=Path, default=None, help="where integrity failures are written")
    parser.add_argument("--copy", action="store_true", help="copy the result to the system clipboard")
    parser.add_argument("--ui", action="store_true", help="launch Qt desktop UI")
    parser.add_argument("--verbose", action="store_true", help="log draw details")
    return parser


def _settings_from_args(args: argparse.Namespace) -> DrawSettings:
    settings = DrawSettings(seed=args.seed, forensic_dir=args.forensic_dir)
    if args.team_names:
        settings.team_names = (args.team_names[0], args.team_names[1])
    return settings


def _prompt_choice(prompt: str, options: Sequence[tuple[str, str]], read: Callable[[str], str]) -> str:
    for index, (_, label) in enumerate(options, start=1):
        print(f"  {index}. {label}")
    while True:
        answer = read(prompt).strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1][0]
        for value, _ in options:
            if answer == value:
                return value
        print(f"Choose 1-{len(options)}.")


def _read_names_file(path: Path) -> list[str]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


def _dispatch(session: DrawSession, action: ActionType, payload: dict | None = None) -> ActionResult:
    return session.handle_action(ActionRequest(make_request_id(), action, payload or {}))


def run(argv: Sequence[str] | None = None, read: Callable[[str], str] = input) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = _settings_from_args(args)
        settings.validate()
    except ValueError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return EXIT_INVALID_ROSTER

    clipboard = None
    if args.copy or args.ui:
        from sorteador.ui.clipboard import QtClipboardAdapter

        clipboard = QtClipboardAdapter()
    session = DrawSession(settings=settings, clipboard=clipboard)

    if args.ui:
        from sorteador.ui import launch_ui

        launch_ui(session.handle_action, copied_feedback_ms=settings.copied_feedback_ms)
        return 0

    game_format = args.format or _prompt_choice(
        "Format: ", [(f.value, format_label(f)) for f in GameFormat], read
    )
    _dispatch(session, ActionType.SELECT_FORMAT, {"format": game_format})
    if session.game_format is GameFormat.FUTSAL:
        variant = args.variant or _prompt_choice(
            "Formation: ",
            [(v.value, f"{variant_label(v)} ({describe_positions(positions_for(GameFormat.FUTSAL, v))})") for v in FutsalVariant],
            read,
        )
        _dispatch(session, ActionType.SELECT_VARIANT, {"variant": variant})

    if args.names_file is not None:
        names = _read_names_file(args.names_file)
        for index, name in enumerate(names[: session.pool.required_count]):
            _dispatch(session, ActionType.SET_PLAYER_NAME, {"index": index, "name": name})
    else:
        for group in session.pool.groups(session.positions):
            print(group.title)
            for offset, (index, _) in enumerate(group.entries):
                name = read(f"  {group.placeholder(offset)}: ")
                _dispatch(session, ActionType.SET_PLAYER_NAME, {"index": index, "name": name})

    drawn = _dispatch(session, ActionType.DRAW_TEAMS)
    if not drawn.success:
        print(drawn.message, file=sys.stderr)
        return EXIT_INVALID_ROSTER
    print(session.roster_text(), end="")

    if args.copy:
        copied = _dispatch(session, ActionType.COPY_TEAMS)
        print(copied.message if copied.success else f"Copy unavailable: {copied.message}", file=sys.stderr)
    return 0


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
