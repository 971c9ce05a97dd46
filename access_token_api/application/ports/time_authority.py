"""Time Authority Protocol - interface for clock access.

Components that need to measure elapsed time inject a
TimeAuthorityProtocol implementation instead of calling time.monotonic()
directly. The in-memory store uses it to expire entries, and tests swap
in FakeTimeAuthority to advance time deterministically.
"""

from abc import ABC, abstractmethod


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    Example usage:
        class MyStore:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def is_expired(self, expires_at: float) -> bool:
                return self._time.monotonic() >= expires_at

    For production:
        Use TimeAuthorityService from access_token_api/application/services/

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Returns:
            Monotonically increasing float value (in seconds).

        Note:
            The reference point is arbitrary - only differences are meaningful.
        """
        ...
