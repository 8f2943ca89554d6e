"""Screen layer error hierarchy."""

from loginkit.errors import LoginKitError


class ScreenError(LoginKitError):
    """Base for all loginkit.screen errors."""


class TemplatingNotInstalledError(ScreenError):
    """Raised when kida is not installed."""
