"""Exceptions raised while constructing, decoding and building signals.

Sampling never raises; everything here happens at construction or build time.
"""

from __future__ import annotations


class SignalError(Exception):
    """Base exception for all mixed_signals errors"""
    pass


class InvalidParameterError(SignalError, ValueError):
    """A parameter failed validation at construction or build time"""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid parameter '{field}': {reason}")


class SpecDecodeError(SignalError, ValueError):
    """A spec document could not be decoded"""
    pass


class UnknownKindError(SpecDecodeError):
    """The 'kind' tag names no known signal"""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown signal kind: {kind!r}")


class MissingFieldError(SpecDecodeError):
    """A required field is absent from a spec node"""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Missing field '{name}' in {kind} spec")


class BuildFailureError(SignalError):
    """A child spec failed to build"""

    def __init__(self, kind: str, field: str, inner: SignalError):
        self.kind = kind
        self.field = field
        self.inner = inner
        super().__init__(f"{kind}.{field}: {inner}")

    @property
    def root_cause(self) -> SignalError:
        """Innermost error, unwrapping nested build failures."""
        err: SignalError = self
        while isinstance(err, BuildFailureError):
            err = err.inner
        return err


class ReflectionError(SignalError, TypeError):
    """A runtime signal has no spec representation"""
    pass
