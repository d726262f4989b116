"""External service clients."""

from .attom_service import (
    AttomApiService,
    AttomError,
    AttomConfigurationError,
    AttomAuthenticationError,
    AttomAccessDeniedError,
    AttomRateLimitError,
    AttomApiError,
)

__all__ = [
    "AttomApiService",
    "AttomError",
    "AttomConfigurationError",
    "AttomAuthenticationError",
    "AttomAccessDeniedError",
    "AttomRateLimitError",
    "AttomApiError",
]
