"""Error types raised by the carbon accounting engine."""


class ValidationError(ValueError):
    """Caller supplied a missing or non-numeric amount."""


class StoreError(RuntimeError):
    """The activity store failed to accept or return data."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or "unknown"
        super().__init__(self.message)


class StoreWriteError(StoreError):
    """The store rejected an insert."""


class StoreReadError(StoreError):
    """The store failed to return records."""
