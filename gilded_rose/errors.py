from __future__ import annotations


class StrategyRegistrationError(TypeError):
    """Raised when a strategy override cannot be registered."""

    def __init__(self, key: object, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"cannot register strategy for {key!r}: {reason}")
