"""Application services - Use case orchestration.

Available services:
- AccessTokenService: Issue, validate and revoke action-scoped tokens
- TimeAuthorityService: Host clock
"""

from access_token_api.application.services.access_token_service import (
    AccessTokenService,
)
from access_token_api.application.services.time_authority_service import (
    TimeAuthorityService,
)

__all__: list[str] = ["AccessTokenService", "TimeAuthorityService"]
