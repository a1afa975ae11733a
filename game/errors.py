"""Errors raised outside the simulation core."""


class PongError(Exception):
    """Base error carrying a context dict for the log record."""

    def __init__(self, message, context=None):
        super().__init__(message)
        self.context = context or {}


class ConfigError(PongError):
    """Invalid configuration value."""

    def __init__(self, message, key=None, **kwargs):
        context = kwargs.pop("context", {})
        if key:
            context["key"] = key
        super().__init__(message, context=context, **kwargs)
