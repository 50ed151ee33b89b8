from __future__ import annotations


class RecommendationError(Exception):
    """Base class for failures while fetching recommendations."""


class NetworkError(RecommendationError):
    """Transport-level failure: DNS, refused connection, TLS, timeout."""


class HttpStatusError(RecommendationError):
    def __init__(self, status_code: int, status_text: str | None = None):
        self.status_code = status_code
        self.status_text = status_text or None
        msg = f"HTTP error! Status: {status_code}"
        if self.status_text:
            msg = f"{msg} {self.status_text}"
        super().__init__(msg)


class DeserializationError(RecommendationError):
    """Response body was not valid JSON."""


class InvalidQueryError(RecommendationError):
    """Arguments could not be turned into a request; nothing was sent."""
