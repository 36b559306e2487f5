"""
🚨 Bridge Errors
Exception types raised inside the bridge. Adapters turn them into Failed results.
"""

from typing import Optional


class BridgeError(Exception):
    """Base class for every error raised by applebridge."""


class ScriptValueError(BridgeError, ValueError):
    """Raised when a parameter value cannot be passed to a script."""
    def __init__(self, message: str, param: Optional[str] = None):
        super().__init__(message)
        self.param = param


class UnknownOperationError(BridgeError, KeyError):
    """Raised when a script is requested for an operation that was never defined."""
    def __init__(self, operation: str):
        super().__init__(operation)
        self.operation = operation

    def __str__(self) -> str:
        return f"Unknown operation '{self.operation}'"


class MalformedRecordError(BridgeError):
    """Raised when a decoded record has fewer fields than its layout requires."""
    def __init__(self, message: str, fields: tuple = ()):
        super().__init__(message)
        self.fields = fields


class ConfigError(BridgeError):
    """Raised when a required setting is missing. Fatal at startup."""
    def __init__(self, message: str, key: str = ""):
        super().__init__(message)
        self.key = key
