"""Access token input rules and storage key derivation.

A token grants one action. Both are plain strings; the pair is hashed
into the key under which the store keeps the token's usage counter.

Developer Golden Rules:
1. Tokens are OPAQUE to clients
2. The storage key is a pure function of (action, token)
3. Never log a raw token
"""

from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass
from typing import Any

from access_token_api.domain.errors import ConfigurationError, InvalidArgumentError

MIN_ACTION_LENGTH = 4

# Key-length limit of the reference deployment's store
DEFAULT_MAX_KEY_LENGTH = 45

DEFAULT_DIGEST_ALGORITHM = "md5"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_utf8(value: str) -> bool:
    # Lone surrogates are valid str but cannot be hashed as UTF-8
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def require_action(action: Any) -> str:
    """Check an action name.

    Args:
        action: Value supplied as the action.

    Returns:
        The action, unmodified.

    Raises:
        InvalidArgumentError: If action is not a string of at least
            four characters after trimming, or is not encodable as
            UTF-8.
    """
    if not isinstance(action, str) or len(action.strip()) < MIN_ACTION_LENGTH:
        raise InvalidArgumentError(
            "action",
            action,
            f"Action must be a string, at least {MIN_ACTION_LENGTH} chars long",
        )
    if not _is_utf8(action):
        raise InvalidArgumentError("action", action, "Action must be encodable as UTF-8")
    return action


def require_token(token: Any) -> str:
    """Check a presented token.

    Raises:
        InvalidArgumentError: If token is not a non-empty string, or is
            not encodable as UTF-8.
    """
    if not isinstance(token, str) or not token.strip():
        raise InvalidArgumentError(
            "token",
            token,
            "Token must be a string and cannot be a zero-length string",
        )
    if not _is_utf8(token):
        raise InvalidArgumentError("token", token, "Token must be encodable as UTF-8")
    return token


def require_ttl_minutes(ttl_minutes: Any) -> int:
    """Check a time-to-live in minutes.

    Raises:
        InvalidArgumentError: If ttl_minutes is not a positive integer.
    """
    if not _is_int(ttl_minutes) or ttl_minutes <= 0:
        raise InvalidArgumentError(
            "ttl_minutes",
            ttl_minutes,
            "Time to live in minutes must be a positive integer",
        )
    return int(ttl_minutes)


def require_retries(retries: Any) -> int:
    """Check a retry count. Zero means unlimited until expiry.

    Raises:
        InvalidArgumentError: If retries is not a non-negative integer.
    """
    if not _is_int(retries) or retries < 0:
        raise InvalidArgumentError(
            "retries",
            retries,
            "Number of retries must be a non-negative integer "
            "(0 means unlimited until expiry)",
        )
    return int(retries)


@dataclass(frozen=True)
class KeyDerivation:
    """Digest configuration used to generate tokens and storage keys.

    Fixed at construction and checked once against the store's key
    limit, so a service built with it cannot produce an oversized key.

    Attributes:
        algorithm: Name of a ``hashlib`` digest algorithm.
        max_key_length: Longest key the store accepts.
    """

    algorithm: str = DEFAULT_DIGEST_ALGORITHM
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH

    def __post_init__(self) -> None:
        """Validate the algorithm against the key-length limit."""
        try:
            digest = hashlib.new(self.algorithm)
        except (ValueError, TypeError) as e:
            raise ConfigurationError(
                f"Unknown digest algorithm {self.algorithm!r}",
                algorithm=str(self.algorithm),
                max_key_length=self.max_key_length,
            ) from e

        # Variable-length digests (shake_*) report a digest_size of 0
        if digest.digest_size == 0:
            raise ConfigurationError(
                f"Digest algorithm {self.algorithm!r} has no fixed output length",
                algorithm=self.algorithm,
                max_key_length=self.max_key_length,
            )

        key_length = digest.digest_size * 2
        if key_length > self.max_key_length:
            raise ConfigurationError(
                algorithm=self.algorithm,
                key_length=key_length,
                max_key_length=self.max_key_length,
            )

    @property
    def digest_size(self) -> int:
        """Digest output size in bytes."""
        return hashlib.new(self.algorithm).digest_size

    @property
    def key_length(self) -> int:
        """Length of every hex-encoded storage key."""
        return self.digest_size * 2

    def new_token(self) -> str:
        """Generate an opaque token sized to the digest output space."""
        return secrets.token_hex(self.digest_size)

    def derive_key(self, action: str, token: str) -> str:
        """Derive the storage key for an (action, token) pair.

        Args:
            action: Action the token is scoped to.
            token: Token issued for the action.

        Returns:
            Hex digest of ``action + ":" + token``.

        Raises:
            ConfigurationError: If the key exceeds max_key_length.
        """
        key = hashlib.new(
            self.algorithm, f"{action}:{token}".encode("utf-8")
        ).hexdigest()
        if len(key) > self.max_key_length:
            raise ConfigurationError(
                algorithm=self.algorithm,
                key_length=len(key),
                max_key_length=self.max_key_length,
            )
        return key
