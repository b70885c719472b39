"""Top-level application windows."""

from fb_gui.windows.main_window import MainWindow

__all__ = ["MainWindow"]
