"""Kida rendering for the login screen.

Requires ``kida`` (``pip install loginkit[ui]``). The environment is
created once per autoescape setting and reused.
"""

from typing import Any

from loginkit.screen.errors import TemplatingNotInstalledError
from loginkit.screen.view import ScreenView

TEMPLATE_NAME = "login.html"

_environments: dict[bool, Any] = {}


def render_screen(view: ScreenView, *, autoescape: bool = True) -> str:
    """Render a screen view to HTML."""
    env = _get_environment(autoescape)
    template = env.get_template(TEMPLATE_NAME)
    return template.render({"screen": view})


def _get_environment(autoescape: bool) -> Any:
    """Create a kida Environment, raising a clear error if kida is missing."""
    env = _environments.get(autoescape)
    if env is not None:
        return env

    try:
        from kida import Environment, PackageLoader
    except ImportError:
        msg = (
            "loginkit.screen requires 'kida' for HTML rendering. "
            "Install with: pip install loginkit[ui]"
        )
        raise TemplatingNotInstalledError(msg) from None

    env = Environment(
        loader=PackageLoader("loginkit.screen", "templates"),
        autoescape=autoescape,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    _environments[autoescape] = env
    return env
