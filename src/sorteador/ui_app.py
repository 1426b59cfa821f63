from __future__ import annotations

import argparse
import logging

from sorteador.contracts import DrawSettings
from sorteador.runtime import DrawSession
from sorteador.ui import QtClipboardAdapter, launch_ui


def main() -> None:
    parser = argparse.ArgumentParser(description="Sorteador de Times: desktop launcher")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible draws")
    parser.add_argument("--verbose", action="store_true", help="log draw details")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    settings = DrawSettings(seed=args.seed)
    session = DrawSession(settings=settings, clipboard=QtClipboardAdapter())
    launch_ui(session.handle_action, copied_feedback_ms=settings.copied_feedback_ms)


if __name__ == "__main__":
    main()
