"""Login screen — variants, submit gate, notifications and HTML rendering.

Rendering requires ``kida``::

    pip install loginkit[ui]

Everything else (events, validity, notifications, view models) works
without it.
"""

from loginkit.screen.errors import ScreenError, TemplatingNotInstalledError
from loginkit.screen.session import LoginScreen
from loginkit.screen.view import FieldView, ScreenView, SwitchView, Toast

__all__ = [
    "FieldView",
    "LoginScreen",
    "ScreenError",
    "ScreenView",
    "SwitchView",
    "TemplatingNotInstalledError",
    "Toast",
]
