"""
Access Token API - short-lived, action-scoped access tokens

Issues opaque tokens bound to a named action, stores a remaining-use
counter for each one in an expiring key-value store, and validates or
revokes them until the store's TTL removes them.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
