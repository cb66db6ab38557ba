"""Exception types for gqlcache."""

from __future__ import annotations


class GqlCacheError(Exception):
    """Base exception for gqlcache."""


class ConfigurationError(GqlCacheError):
    """Raised when settings cannot describe a usable shape probe."""


class UncacheableValueError(GqlCacheError):
    """Raised when a deconstructed value cannot be handed to a cache store."""
