"""ViewModels exposing Qt signals for views."""

from fb_gui.viewmodels.browser_vm import FeatureBrowserViewModel
from fb_gui.viewmodels.theme_vm import ThemeViewModel

__all__ = [
    "FeatureBrowserViewModel",
    "ThemeViewModel",
]
