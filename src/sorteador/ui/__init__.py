from .clipboard import QtClipboardAdapter
from .main_window import MainWindowFactory, launch_ui

__all__ = ["MainWindowFactory", "QtClipboardAdapter", "launch_ui"]
