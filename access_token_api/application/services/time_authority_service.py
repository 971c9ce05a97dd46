"""System clock implementation of the time authority port."""

import time

from access_token_api.application.ports.time_authority import TimeAuthorityProtocol


class TimeAuthorityService(TimeAuthorityProtocol):
    """Time authority backed by the host's monotonic clock."""

    def monotonic(self) -> float:
        """Return time.monotonic()."""
        return time.monotonic()
