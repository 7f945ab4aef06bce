"""
Autofill Errors

Failures raised by the autofill engine itself. Errors coming from the
browser automation layer are never wrapped and reach the caller unchanged.
"""


class AutoFillError(Exception):
    """Base class for autofill errors"""


class UsageError(AutoFillError):
    """The caller asked for a fill that cannot start (no elements to work on)"""


class ConfigError(AutoFillError):
    """A configuration override could not be parsed"""
