"""Usage counter value object for access tokens.

The store holds one signed integer per token. Its sign carries the
meaning:

    value >= 0   present, not a retry counter (unlimited until TTL expiry)
    value == -1  the next validation is the last permitted use
    value == -n  n uses remain

Issuance writes ``-retries``, so ``retries == 0`` lands in the
non-negative branch and the token validates until the store expires it.
Each validation moves a negative counter one step toward zero; the step
from ``-1`` deletes the key instead of writing ``0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Sentinel retry count for "unlimited until expiry"
UNLIMITED_RETRIES = 0

LAST_USE = -1


class CounterTransition(Enum):
    """Store mutation required after a successful validation."""

    KEEP = "keep"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class UsageCounter:
    """Remaining-use counter stored at a token's storage key.

    Attributes:
        value: Signed integer as read from or written to the store.
    """

    value: int

    @classmethod
    def for_retries(cls, retries: int) -> UsageCounter:
        """Create the counter written at issuance.

        Args:
            retries: Number of permitted validations, or 0 for unlimited.

        Returns:
            UsageCounter holding ``-retries``.

        Raises:
            ValueError: If retries is negative.
        """
        if retries < 0:
            raise ValueError(f"retries must be non-negative, got {retries}")
        return cls(value=0 - retries)

    @property
    def is_unlimited(self) -> bool:
        """True when the counter does not limit validations."""
        return self.value >= 0

    @property
    def is_last_use(self) -> bool:
        """True when the next validation consumes the token."""
        return self.value == LAST_USE

    @property
    def remaining_uses(self) -> int | None:
        """Validations left before the token is consumed, None if unlimited."""
        if self.is_unlimited:
            return None
        return -self.value

    def consume(self) -> tuple[CounterTransition, UsageCounter | None]:
        """Apply one validation to this counter.

        Returns:
            The store transition to perform and the counter to write for
            UPDATE. The counter is None for DELETE and unchanged for KEEP.
        """
        if self.is_unlimited:
            return CounterTransition.KEEP, self
        if self.is_last_use:
            return CounterTransition.DELETE, None
        return CounterTransition.UPDATE, UsageCounter(value=self.value + 1)
