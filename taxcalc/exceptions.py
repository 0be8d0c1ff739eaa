"""Custom exceptions for the tax calculator."""


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class BracketTableError(TaxComputationError):
    """Raised when a bracket table is missing or violates its invariants."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Bracket table error from {source}: {message}")
