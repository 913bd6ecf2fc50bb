"""Custom errors with tracking IDs."""

from druuid.utils.timestamp import format_timestamp


class BaseDruuidError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        # deferred: druuid.base36 imports this module
        from druuid.generator import gen
        from druuid.base36 import encode

        self.error_id = encode(gen())
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class ParseError(BaseDruuidError, ValueError):
    """Text is not a base-36 druuid."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
