from __future__ import annotations

from typing import Any, Callable

from PySide6.QtCore import Qt, QTimer

from sorteador.contracts import ActionRequest, ActionResult, ActionType, FutsalVariant, GameFormat
from sorteador.draw import describe_positions, format_label, positions_for, variant_label
from sorteador.runtime import make_request_id

_FORMAT_SUBTITLES = {
    GameFormat.FUTSAL: "4 jogadores + goleiro",
    GameFormat.SOCIETY: "6 jogadores + goleiro",
}


class MainWindowFactory:
    def __init__(self, copied_feedback_ms: int = 2000) -> None:
        self.copied_feedback_ms = copied_feedback_ms

    def create(self, action_handler: Callable[[ActionRequest], ActionResult]):
        from PySide6.QtWidgets import (
            QGridLayout,
            QGroupBox,
            QHBoxLayout,
            QLabel,
            QLineEdit,
            QMainWindow,
            QMessageBox,
            QPushButton,
            QScrollArea,
            QStackedWidget,
            QVBoxLayout,
            QWidget,
        )

        feedback_ms = self.copied_feedback_ms

        class MainWindow(QMainWindow):
            def __init__(self) -> None:
                super().__init__()
                self.setWindowTitle("Sorteador de Times")
                self.resize(900, 720)

                self.pages = QStackedWidget()
                self.format_page = self._format_page()
                self.variant_page = self._variant_page()
                self.slots_page = QWidget()
                self.results_page = QWidget()
                for page in (self.format_page, self.variant_page, self.slots_page, self.results_page):
                    self.pages.addWidget(page)

                root = QWidget()
                layout = QVBoxLayout(root)
                title = QLabel("⚽ Sorteador de Times")
                title.setAlignment(Qt.AlignmentFlag.AlignCenter)
                layout.addWidget(title)
                layout.addWidget(self.pages)
                self.setCentralWidget(root)
                self.statusBar().showMessage("Ready")

            def _dispatch(self, action: ActionType, payload: dict[str, Any] | None = None, *, warn: bool = True) -> ActionResult:
                result = action_handler(ActionRequest(make_request_id(), action, payload or {}))
                self.statusBar().showMessage(f"{action.value}: {'ok' if result.success else 'failed'}", 4000)
                if not result.success and warn:
                    QMessageBox.warning(self, "Action failed", result.message)
                return result

            def _format_page(self) -> QWidget:
                page = QWidget()
                layout = QVBoxLayout(page)
                layout.addWidget(QLabel("Escolha o formato do jogo:"))
                row = QHBoxLayout()
                for fmt in GameFormat:
                    button = QPushButton(f"{format_label(fmt)}\n{_FORMAT_SUBTITLES[fmt]}")
                    button.clicked.connect(lambda _=False, f=fmt: self._choose_format(f))
                    row.addWidget(button)
                layout.addLayout(row)
                layout.addStretch(1)
                return page

            def _variant_page(self) -> QWidget:
                page = QWidget()
                layout = QVBoxLayout(page)
                layout.addWidget(QLabel("Escolha a formação do Futsal:"))
                row = QHBoxLayout()
                for variant in FutsalVariant:
                    details = describe_positions(positions_for(GameFormat.FUTSAL, variant)).replace(", ", "\n")
                    button = QPushButton(f"{variant_label(variant)}\n{details}")
                    button.clicked.connect(lambda _=False, v=variant: self._choose_variant(v))
                    row.addWidget(button)
                layout.addLayout(row)
                back = QPushButton("← Voltar")
                back.clicked.connect(self._back)
                layout.addWidget(back)
                layout.addStretch(1)
                return page

            def _choose_format(self, fmt: GameFormat) -> None:
                result = self._dispatch(ActionType.SELECT_FORMAT, {"format": fmt.value})
                if result.success:
                    self._show_state(result.data)

            def _choose_variant(self, variant: FutsalVariant) -> None:
                result = self._dispatch(ActionType.SELECT_VARIANT, {"variant": variant.value})
                if result.success:
                    self._show_state(result.data)

            def _back(self) -> None:
                result = self._dispatch(ActionType.BACK)
                self._show_state(result.data)

            def _reset(self) -> None:
                result = self._dispatch(ActionType.RESET)
                self._show_state(result.data)

            def _show_state(self, state: dict[str, Any]) -> None:
                if state.get("teams"):
                    self._build_results_page(state)
                    self.pages.setCurrentWidget(self.results_page)
                elif state.get("slots"):
                    self._build_slots_page(state)
                    self.pages.setCurrentWidget(self.slots_page)
                elif state.get("format") == GameFormat.FUTSAL.value:
                    self.pages.setCurrentWidget(self.variant_page)
                else:
                    self.pages.setCurrentWidget(self.format_page)

            def _replace_page(self, old: QWidget) -> QWidget:
                page = QWidget()
                index = self.pages.indexOf(old)
                self.pages.removeWidget(old)
                old.deleteLater()
                self.pages.insertWidget(index, page)
                return page

            def _build_slots_page(self, state: dict[str, Any]) -> None:
                self.slots_page = self._replace_page(self.slots_page)
                layout = QVBoxLayout(self.slots_page)
                header = QHBoxLayout()
                header.addWidget(QLabel(f"{format_label(state['format'])} - Preencha os jogadores"))
                back = QPushButton("← Voltar ao início")
                back.clicked.connect(self._back)
                header.addWidget(back)
                layout.addLayout(header)

                self.counter = QLabel()
                layout.addWidget(self.counter)

                body = QWidget()
                body_layout = QVBoxLayout(body)
                for group in state["groups"]:
                    box = QGroupBox(group["title"])
                    grid = QGridLayout(box)
                    for offset, entry in enumerate(group["entries"]):
                        edit = QLineEdit(entry["name"])
                        edit.setPlaceholderText(entry["placeholder"])
                        edit.textChanged.connect(lambda text, i=entry["index"]: self._set_name(i, text))
                        grid.addWidget(edit, offset // 2, offset % 2)
                    body_layout.addWidget(box)
                scroll = QScrollArea()
                scroll.setWidgetResizable(True)
                scroll.setWidget(body)
                layout.addWidget(scroll)

                self.draw_button = QPushButton("🎲 Sortear Times")
                self.draw_button.clicked.connect(self._draw)
                layout.addWidget(self.draw_button)
                self._update_counter(state["filled"], state["required"])

            def _set_name(self, index: int, text: str) -> None:
                result = self._dispatch(ActionType.SET_PLAYER_NAME, {"index": index, "name": text}, warn=False)
                if result.success:
                    self._update_counter(result.data["filled"], result.data["required"])

            def _update_counter(self, filled: int, required: int) -> None:
                self.counter.setText(f"Preencha {required} posições ({filled} preenchidas)")
                self.draw_button.setVisible(filled >= required)

            def _draw(self) -> None:
                result = self._dispatch(ActionType.DRAW_TEAMS)
                if result.success:
                    self._show_state(self._dispatch(ActionType.GET_STATE, warn=False).data)

            def _build_results_page(self, state: dict[str, Any]) -> None:
                self.results_page = self._replace_page(self.results_page)
                layout = QVBoxLayout(self.results_page)
                layout.addWidget(QLabel("Times Sorteados!"))
                teams_row = QHBoxLayout()
                for team in state["teams"]:
                    box = QGroupBox(team["name"])
                    team_layout = QVBoxLayout(box)
                    for player in team["players"]:
                        team_layout.addWidget(QLabel(f"{player['name']}\n{player['position']}"))
                    team_layout.addStretch(1)
                    teams_row.addWidget(box)
                layout.addLayout(teams_row)

                actions = QHBoxLayout()
                self.copy_button = QPushButton("📋 Copiar Times")
                self.copy_button.clicked.connect(self._copy)
                again = QPushButton("🔄 Novo Sorteio")
                again.clicked.connect(self._reset)
                actions.addWidget(self.copy_button)
                actions.addWidget(again)
                layout.addLayout(actions)

            def _copy(self) -> None:
                result = self._dispatch(ActionType.COPY_TEAMS)
                if not result.success:
                    return
                button = self.copy_button
                button.setText("✓ Copiado!")
                QTimer.singleShot(feedback_ms, button, lambda: button.setText("📋 Copiar Times"))

        return MainWindow()


def launch_ui(action_handler: Callable[[ActionRequest], ActionResult], copied_feedback_ms: int = 2000) -> None:
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    window = MainWindowFactory(copied_feedback_ms=copied_feedback_ms).create(action_handler)
    window.show()
    app.exec()
