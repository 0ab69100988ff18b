"""Pair pricing error classes.

InsufficientReservesError and InsufficientInputAmountError are trade outcomes
the caller can react to. InvariantViolation is a broken precondition (wrong
token, wrong liquidity token, liquidity above supply) and is not retryable.
"""


class PairError(Exception):
    """Base error for pair operations."""

    pass


class InsufficientReservesError(PairError):
    """A reserve is zero, or the requested output is not below the reserve."""

    pass


class InsufficientInputAmountError(PairError):
    """The computed trade or mint amount truncates to zero."""

    pass


class InvariantViolation(PairError, AssertionError):
    """A caller broke a contract precondition."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invariant failed: {message}")
        self.code = message


def invariant(condition: bool, message: str) -> None:
    """Raise InvariantViolation with the given code unless condition holds.

    Args:
        condition: Precondition to check
        message: Short code such as "TOKEN" or "LIQUIDITY"

    Raises:
        InvariantViolation: If condition is false
    """
    if not condition:
        raise InvariantViolation(message)


__all__ = [
    "PairError",
    "InsufficientReservesError",
    "InsufficientInputAmountError",
    "InvariantViolation",
    "invariant",
]
