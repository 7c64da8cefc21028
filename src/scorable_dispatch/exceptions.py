class DispatchError(Exception):
    """Base exception for scorable dispatch."""


class ConfigurationError(DispatchError):
    """Raised when configuration values are missing or invalid."""


class UnresolvedError(DispatchError, LookupError):
    """Raised when no scope in a resolver chain can supply a requested value."""

    def __init__(self, kind, tag=None):
        self.kind = kind
        self.tag = tag
        name = getattr(kind, "__name__", repr(kind))
        if tag is None:
            super().__init__(f"Could not resolve {name}")
        else:
            super().__init__(f"Could not resolve {name} tagged {tag!r}")


class DispatchTimeoutError(DispatchError):
    """Raised when preparation does not finish within the configured timeout."""
