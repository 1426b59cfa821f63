from __future__ import annotations

import logging
from typing import Sequence

from sorteador.contracts import ClipboardAdapter, ClipboardUnavailableError, Team
from sorteador.draw import format_roster

logger = logging.getLogger(__name__)


class ClipboardExportService:
    def __init__(self, clipboard: ClipboardAdapter) -> None:
        self.clipboard = clipboard

    def copy_teams(self, teams: Sequence[Team]) -> str | None:
        """Place the roster text on the clipboard; None when there is nothing to copy."""
        text = format_roster(teams)
        if text is None:
            return None
        try:
            self.clipboard.write_text(text)
        except ClipboardUnavailableError:
            raise
        except Exception as exc:
            raise ClipboardUnavailableError(f"clipboard write failed: {exc}") from exc
        logger.info("copied roster for %s", " x ".join(t.name for t in teams))
        return text
