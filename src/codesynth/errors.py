"""
Exception types raised by the synthesis engine.

All errors are fail-fast and synchronous. A failed operation leaves the
model exactly as it was before the call.
"""


class SynthesisError(Exception):
    """Base class for every error raised by codesynth."""
    pass


class InvalidElementKind(SynthesisError, TypeError):
    """Raised when a builder receives a value of the wrong kind."""
    pass


class DuplicateMemberError(SynthesisError):
    """Raised when a method or property name is already registered."""

    def __init__(self, name: str, kind: str = "member"):
        self.name = name
        self.kind = kind
        super().__init__(f"Duplicated {kind} definition: {name}")


class DuplicateParameterError(SynthesisError):
    """Raised when a parameter name is already registered on a method."""

    def __init__(self, name: str, method: str = ""):
        self.name = name
        self.method = method
        super().__init__(f"Duplicated entry {name} in method {method} definition")
