"""Utility layer errors."""


class UtilError(Exception):
    """Base error for wiring and configuration helpers."""

    pass


class ConfigurationError(UtilError):
    """The app or test container was wired with an impossible combination."""

    pass
