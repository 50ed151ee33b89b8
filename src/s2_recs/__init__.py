"""
s2-recs - Semantic Scholar paper recommendations client
"""

from .client import RecommendationClient
from .errors import (
    DeserializationError,
    HttpStatusError,
    InvalidQueryError,
    NetworkError,
    RecommendationError,
)
from .models import (
    FetchResult,
    MultiSeedQuery,
    RecommendationFailure,
    RecommendationSuccess,
    SingleSeedQuery,
)

__version__ = "0.1.0"

__all__ = [
    "RecommendationClient",
    "SingleSeedQuery",
    "MultiSeedQuery",
    "FetchResult",
    "RecommendationSuccess",
    "RecommendationFailure",
    "RecommendationError",
    "NetworkError",
    "HttpStatusError",
    "DeserializationError",
    "InvalidQueryError",
]
